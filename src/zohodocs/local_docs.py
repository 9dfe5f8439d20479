import logging
from pathlib import Path

from .signals import extract_local_signals
from .types import LocalSignals

logger = logging.getLogger(__name__)

# Where cached docs live, relative to the docs root
DEFAULT_DOCS_SUBDIR = "zoho-docs/api-reference"

LOCAL_DOC_FILENAME = "README.md"


def local_doc_path(
    root: str | Path, product: str, subdir: str = DEFAULT_DOCS_SUBDIR
) -> Path:
    """Get the path of a product's cached documentation.

    Layout: ``<root>/<subdir>/<product>/README.md``

    Args:
        root: Docs root directory
        product: Product id
        subdir: Directory holding one folder per product

    Returns:
        Path to the product's README.md (which may not exist)
    """
    return Path(root).expanduser() / subdir / product / LOCAL_DOC_FILENAME


def read_local_signals(path: str | Path) -> LocalSignals:
    """Read a cached markdown file and extract its signals.

    A missing or unreadable file is reported as ``exists=False`` rather than
    raised.

    Args:
        path: Path to the markdown file

    Returns:
        LocalSignals for the file
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"No readable local doc at {path}: {e}")
        return LocalSignals(exists=False)

    return extract_local_signals(content)
