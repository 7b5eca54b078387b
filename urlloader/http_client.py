"""HTTP client abstraction over a shared requests.Session."""

from typing import Any

import requests


class HttpClient:
    """
    Session-backed HTTP client used by the requests fetch engine.

    Wrapping the session keeps the engine testable: tests hand in a Mock
    instead of patching requests globally.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        default_headers: dict[str, str] | None = None,
    ):
        """
        Args:
            session: Session to send requests through (a new one if None)
            default_headers: Headers applied to every request made by this client
        """
        self.session = session if session is not None else requests.Session()
        if default_headers:
            self.session.headers.update(default_headers)

    def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        params: Any | None = None,
        **kwargs,
    ) -> requests.Response:
        """
        Send a GET request.

        Args:
            url: Absolute URL to request
            headers: Optional per-request HTTP headers
            params: Optional query parameters
            **kwargs: Additional arguments to pass to Session.get()

        Returns:
            requests.Response object
        """
        return self.session.get(url, headers=headers, params=params, **kwargs)

    def close(self) -> None:
        """Close the underlying session and its pooled connections."""
        self.session.close()
