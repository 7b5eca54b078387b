"""
Custom exceptions for urlloader
"""


class URLLoaderError(Exception):
    """Base exception for all urlloader errors"""

    pass


class FetchFailure(URLLoaderError):
    """
    Raised (or delivered through a completion handler) when a fetch fails.

    The Loader treats this as opaque: it is handed to the caller unchanged
    inside an Error result.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        original: BaseException | None = None,
    ):
        self.url = url
        self.status_code = status_code
        self.original = original
        super().__init__(message)


class InvalidURLError(FetchFailure):
    """Raised when an identifier cannot be resolved to an absolute http(s) URL"""

    def __init__(self, url: str):
        super().__init__(
            f"Cannot resolve '{url}' to an absolute URL (no base_url configured)", url=url
        )


class ConfigurationError(URLLoaderError):
    """
    Raised when required configuration values are missing or invalid.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")
