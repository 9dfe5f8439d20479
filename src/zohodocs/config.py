"""Configuration dataclasses for the documentation checker."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Literal

import yaml

from .comparator import CONTENT_LENGTH_THRESHOLD
from .errors import ConfigError
from .local_docs import DEFAULT_DOCS_SUBDIR, local_doc_path
from .registry import DEFAULT_EXCLUDED, ProductRegistry

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

WaitUntil = Literal["commit", "domcontentloaded", "load", "networkidle"]


@dataclass
class BrowserConfig:
    """Configuration for the headless browser.

    Attributes:
        headless: Run Chromium without a window
        timeout: Per-page timeout in seconds
        user_agent: User agent sent with every page
        wait_until: Navigation event to wait for before reading the page
    """

    headless: bool = True
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    wait_until: WaitUntil = "domcontentloaded"

    @property
    def timeout_ms(self) -> float:
        return self.timeout * 1000


@dataclass
class CheckerConfig:
    """Configuration for a checker run.

    Attributes:
        docs_root: Directory holding the cached docs tree
        docs_subdir: Path below docs_root with one folder per product
        output_dir: Where update reports are written
        content_length_threshold: Remote page length above which a missing
            local date counts as stale
        workers: Number of pages fetched at once (1 = sequential)
        browser: Browser settings
        registry: Products to check
    """

    docs_root: Path = Path(".")
    docs_subdir: str = DEFAULT_DOCS_SUBDIR
    output_dir: Path = Path(".")
    content_length_threshold: int = CONTENT_LENGTH_THRESHOLD
    workers: int = 1
    browser: BrowserConfig = field(default_factory=BrowserConfig)
    registry: ProductRegistry = field(default_factory=ProductRegistry)

    def __post_init__(self) -> None:
        self.docs_root = Path(self.docs_root).expanduser()
        self.output_dir = Path(self.output_dir).expanduser()
        if self.workers < 1:
            raise ConfigError(f"workers must be at least 1, got {self.workers}")
        if self.content_length_threshold < 0:
            raise ConfigError(
                f"content_length_threshold must not be negative, got {self.content_length_threshold}"
            )
        if self.browser.timeout <= 0:
            raise ConfigError(f"browser timeout must be positive, got {self.browser.timeout}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str | None = None) -> "CheckerConfig":
        """Build a config from parsed YAML.

        ``products`` and ``excluded`` replace the default registry; every
        other key maps onto a field of the same name.
        """
        data = dict(data or {})
        allowed = {f.name for f in fields(cls)} - {"registry"} | {"products", "excluded"}
        unknown = sorted(set(data) - allowed)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}", path)

        browser_data = data.pop("browser", None) or {}
        if not isinstance(browser_data, dict):
            raise ConfigError("'browser' must be a mapping", path)
        browser_keys = {f.name for f in fields(BrowserConfig)}
        bad_browser = sorted(set(browser_data) - browser_keys)
        if bad_browser:
            raise ConfigError(f"Unknown browser keys: {', '.join(bad_browser)}", path)

        products = data.pop("products", None)
        excluded = data.pop("excluded", None)
        if products is not None:
            if not isinstance(products, dict):
                raise ConfigError("'products' must be a mapping of product id to URL", path)
            for name, url in products.items():
                if not isinstance(name, str) or not name:
                    raise ConfigError(f"Invalid product id: {name!r}", path)
                if not isinstance(url, str) or not url.strip():
                    raise ConfigError(f"Product '{name}' needs a URL, got {url!r}", path)
        if excluded is not None and (
            not isinstance(excluded, list) or not all(isinstance(p, str) for p in excluded)
        ):
            raise ConfigError("'excluded' must be a list of product ids", path)
        registry = ProductRegistry(
            products=products if products is not None else ProductRegistry().products,
            excluded=frozenset(excluded) if excluded is not None else DEFAULT_EXCLUDED,
        )

        try:
            return cls(browser=BrowserConfig(**browser_data), registry=registry, **data)
        except (TypeError, ValueError) as e:
            raise ConfigError(str(e), path) from e

    @classmethod
    def from_yaml(cls, path: Path) -> "CheckerConfig":
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config: {e}", str(path)) from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}", str(path)) from e

        if data is not None and not isinstance(data, dict):
            raise ConfigError("Top level must be a mapping", str(path))
        return cls.from_dict(data or {}, path=str(path))

    def local_doc_path(self, product: str) -> Path:
        return local_doc_path(self.docs_root, product, self.docs_subdir)
