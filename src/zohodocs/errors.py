"""Exception hierarchy for the documentation checker."""


class ZohoDocsError(Exception):
    """Base exception for all checker errors."""

    pass


class ConfigError(ZohoDocsError):
    """Raised when a configuration file or value is invalid."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        full_msg = message
        if path:
            full_msg = f"{path}: {message}"
        super().__init__(full_msg)


class BrowserLaunchError(ZohoDocsError):
    """Raised when the headless browser session cannot be started."""

    def __init__(self, message: str, cause: BaseException | None = None):
        self.cause = cause
        full_msg = message
        if cause is not None:
            full_msg += f": {cause}"
        super().__init__(full_msg)


class FetchError(ZohoDocsError):
    """Raised when a documentation page cannot be fetched."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Fetching '{url}' failed: {message}")


class InaccessibleError(FetchError):
    """Raised when a page answers with anything other than HTTP 200."""

    def __init__(self, url: str, status: int | None):
        self.status = status
        super().__init__(url, f"HTTP {status}")


class ReportError(ZohoDocsError):
    """Raised when the update report cannot be written."""

    def __init__(self, path: str, cause: BaseException | None = None):
        self.path = path
        self.cause = cause
        msg = f"Could not write report to {path}"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)
