"""
Test double for FetchEngine

MockFetchEngine answers every request synchronously with fixed values and
never touches the network.
"""

from typing import Any

from .engine import CompletionHandler, FetchEngine


class MockFetchEngine(FetchEngine):
    """
    FetchEngine that records requested identifiers and replies immediately

    Example:
        >>> from urlloader import Loader
        >>> results = []
        >>> engine = MockFetchEngine(payload=b"Hello world")
        >>> Loader(engine=engine).load("my/API", results.append)
        >>> engine.last_url
        'my/API'
        >>> results
        [Data(payload=b'Hello world')]
    """

    def __init__(
        self,
        payload: bytes | None = None,
        metadata: Any | None = None,
        failure: BaseException | None = None,
    ):
        self.payload = payload
        self.metadata = metadata
        self.failure = failure
        self.last_url: str | None = None
        self.requested_urls: list[str] = []

    def perform_request(self, url: str, completion_handler: CompletionHandler) -> None:
        self.last_url = url
        self.requested_urls.append(url)
        completion_handler(self.payload, self.metadata, self.failure)
