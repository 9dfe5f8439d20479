"""Shared fixtures for E2E tests that drive a real headless Chromium."""

import threading
from functools import partial
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer

import pytest

SITE_FILES = {
    "crm/index.html": """<html><head><title>CRM API v8</title></head><body>
<h1>Zoho CRM REST API</h1>
<p>API Version: 8</p>
<p>Last Updated: March 4, 2024</p>
<p>Authentication uses OAuth 2.0. Webhooks notify you of changes.</p>
</body></html>""",
    "books/index.html": """<html><head><title>Books API</title></head><body>
<h1>Books</h1><p>Version 3</p></body></html>""",
}


def pytest_collection_modifyitems(items):
    for item in items:
        if "/e2e/" in str(item.fspath).replace("\\", "/"):
            item.add_marker(pytest.mark.e2e)


@pytest.fixture(scope="session")
def check_browser_available():
    """Skip when Playwright's Chromium is not installed."""
    try:
        from playwright.sync_api import sync_playwright

        with sync_playwright() as p:
            browser = p.chromium.launch(headless=True)
            browser.close()
    except Exception as e:
        pytest.skip(f"headless Chromium not available: {e}")
    return True


@pytest.fixture(scope="session")
def site_dir(tmp_path_factory):
    root = tmp_path_factory.mktemp("site")
    for rel_path, html in SITE_FILES.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
    return root


class _QuietHandler(SimpleHTTPRequestHandler):
    def log_message(self, format, *args):
        pass


@pytest.fixture(scope="session")
def base_url(site_dir):
    """Serve the test site from a local HTTP server."""
    handler = partial(_QuietHandler, directory=str(site_dir))
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()
