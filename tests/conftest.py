"""Shared fixtures: a fake fetcher, a small registry and a docs tree in tmp_path."""

from pathlib import Path

import pytest

from zohodocs.checker import CheckContext
from zohodocs.config import CheckerConfig
from zohodocs.errors import InaccessibleError
from zohodocs.registry import ProductRegistry
from zohodocs.types import FetchedPage

SAMPLE_PRODUCTS = {
    "crm": "https://docs.test/crm/",
    "books": "https://docs.test/books/",
    "desk": "https://docs.test/desk/",
    "deluge": "https://docs.test/deluge/",
}


class FakeFetcher:
    """Stands in for DocsFetcher.

    ``pages`` maps URL to a FetchedPage, an int (non-200 status) or an
    exception instance to raise.
    """

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.fetched: list[str] = []
        self.connected = False
        self.closed = False

    async def connect(self):
        self.connected = True

    async def close(self):
        self.closed = True

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def fetch(self, url: str) -> FetchedPage:
        self.fetched.append(url)
        page = self.pages.get(url, 404)
        if isinstance(page, BaseException):
            raise page
        if isinstance(page, int):
            raise InaccessibleError(url, page)
        return page


def make_page(url: str, text: str, title: str = "API Docs") -> FetchedPage:
    return FetchedPage(url=url, status=200, title=title, text=text)


def write_local_doc(root: Path, product: str, content: str) -> Path:
    path = root / "zoho-docs" / "api-reference" / product / "README.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def registry():
    return ProductRegistry(products=SAMPLE_PRODUCTS, excluded=frozenset({"deluge"}))


@pytest.fixture
def config(tmp_path, registry):
    return CheckerConfig(docs_root=tmp_path, output_dir=tmp_path / "reports", registry=registry)


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def ctx(fetcher, config):
    return CheckContext.create(fetcher, config)
