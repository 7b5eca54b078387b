"""
Fetch engines

FetchEngine is the capability the Loader depends on. RequestsFetchEngine is
the default implementation: it runs each GET on a worker thread and calls
the completion handler from that thread.
"""

import atexit
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any
from urllib.parse import urljoin, urlparse

import requests

from .config import Config, config
from .exceptions import ConfigurationError, FetchFailure, InvalidURLError
from .http_client import HttpClient
from .logging_config import get_module_logger

logger = get_module_logger("engine")

# (payload, metadata, failure)
CompletionHandler = Callable[[bytes | None, Any | None, BaseException | None], None]


class FetchEngine(ABC):
    """
    Capability to fetch one URL-like identifier asynchronously.

    Implementations must invoke the completion handler exactly once per
    request, with (payload, metadata, failure). Any of the three may be None.
    """

    @abstractmethod
    def perform_request(self, url: str, completion_handler: CompletionHandler) -> None:
        """
        Start fetching url and eventually report the outcome.

        Args:
            url: Identifier to fetch
            completion_handler: Called once with (payload, metadata, failure)
        """
        pass


class RequestsFetchEngine(FetchEngine):
    """Fetch engine backed by requests and a thread pool"""

    def __init__(
        self,
        http_client: HttpClient | None = None,
        executor: Executor | None = None,
        config_obj: Config | None = None,
        base_url: str | None = None,
    ):
        """
        Initialize the engine

        Args:
            http_client: HTTP client for making requests (optional)
            executor: Executor that runs requests (optional, a thread pool
                sized by fetch.max_workers if None)
            config_obj: Config object (optional, uses global config if None)
            base_url: Prefix for relative identifiers (overrides fetch.base_url)
        """
        if config_obj is None:
            config_obj = config

        self.base_url = base_url if base_url is not None else config_obj.get("fetch.base_url")
        self.raise_for_status = bool(config_obj.get("fetch.raise_for_status", False))

        if executor is None:
            max_workers = config_obj.get("fetch.max_workers", 4)
            if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
                raise ConfigurationError(
                    f"must be a positive integer, got {max_workers!r}",
                    config_key="fetch.max_workers",
                )
            executor = ThreadPoolExecutor(
                max_workers=max_workers, thread_name_prefix="urlloader-fetch"
            )
        self.executor = executor

        if http_client is None:
            user_agent = config_obj.get("fetch.headers.user_agent")
            http_client = HttpClient(
                default_headers={"User-Agent": user_agent} if user_agent else None
            )
        self.http_client = http_client

    def resolve_url(self, url: str) -> str:
        """
        Turn an identifier into an absolute http(s) URL

        Raises:
            InvalidURLError: url is relative and no base_url is configured
        """
        parsed = urlparse(url)
        if parsed.scheme in ("http", "https") and parsed.netloc:
            return url
        if self.base_url:
            return urljoin(self.base_url, url)
        raise InvalidURLError(url)

    def perform_request(self, url: str, completion_handler: CompletionHandler) -> None:
        logger.debug(f"Queueing request for {url}")
        try:
            self.executor.submit(self._fetch, url, completion_handler)
        except RuntimeError as e:
            # Executor already shut down
            failure = FetchFailure(f"Engine is closed, cannot fetch {url}", url=url, original=e)
            logger.warning(str(failure))
            self._deliver(url, completion_handler, None, None, failure)

    def _fetch(self, url: str, completion_handler: CompletionHandler) -> None:
        payload: bytes | None = None
        metadata: Any | None = None
        failure: BaseException | None = None

        try:
            resolved = self.resolve_url(url)
            response = self.http_client.get(resolved)
            metadata = response
            if self.raise_for_status and not 200 <= response.status_code < 300:
                failure = FetchFailure(
                    f"HTTP {response.status_code} for {resolved}",
                    url=url,
                    status_code=response.status_code,
                )
            else:
                payload = response.content
        except InvalidURLError as e:
            failure = e
        except requests.exceptions.RequestException as e:
            failure = FetchFailure(f"Network error fetching {url}: {e}", url=url, original=e)
            failure.__cause__ = e
        except Exception as e:
            failure = FetchFailure(f"Unexpected error fetching {url}: {e}", url=url, original=e)
            failure.__cause__ = e

        if failure is not None:
            logger.warning(f"Fetch failed for {url}: {failure}")
        else:
            logger.debug(f"Fetched {url}: {len(payload or b'')} bytes")

        self._deliver(url, completion_handler, payload, metadata, failure)

    @staticmethod
    def _deliver(
        url: str,
        completion_handler: CompletionHandler,
        payload: bytes | None,
        metadata: Any | None,
        failure: BaseException | None,
    ) -> None:
        try:
            completion_handler(payload, metadata, failure)
        except Exception:
            # Nobody waits on the executor future, so report it here
            logger.exception(f"Completion handler for {url} raised")

    def close(self) -> None:
        """Wait for queued requests, then release threads and connections."""
        self.executor.shutdown(wait=True)
        self.http_client.close()

    def __enter__(self) -> "RequestsFetchEngine":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


_shared_engine: RequestsFetchEngine | None = None
_shared_engine_lock = threading.Lock()


def shared_engine() -> RequestsFetchEngine:
    """
    Get the process-wide engine, creating it on first use

    Returns:
        The shared RequestsFetchEngine built from the global config
    """
    global _shared_engine
    if _shared_engine is None:
        with _shared_engine_lock:
            if _shared_engine is None:
                _shared_engine = RequestsFetchEngine()
                atexit.register(reset_shared_engine)
    return _shared_engine


def reset_shared_engine() -> None:
    """Close and forget the shared engine; the next shared_engine() call builds a new one."""
    global _shared_engine
    with _shared_engine_lock:
        engine, _shared_engine = _shared_engine, None
    if engine is not None:
        atexit.unregister(reset_shared_engine)
        engine.close()
