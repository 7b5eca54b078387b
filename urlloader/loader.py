"""
Loader - fetch one URL through a FetchEngine and report a Result
"""

import threading
from collections.abc import Callable

from .engine import FetchEngine, shared_engine
from .logging_config import get_module_logger
from .result import Data, Error, Result

logger = get_module_logger("loader")


class Loader:
    """
    Loads a URL through an injected FetchEngine.

    Production code uses the process-wide shared engine; tests pass a
    MockFetchEngine (or any other FetchEngine) instead.
    """

    def __init__(self, engine: FetchEngine | None = None):
        """
        Args:
            engine: Engine to fetch through (the shared engine if None)
        """
        self._engine = engine if engine is not None else shared_engine()

    @property
    def engine(self) -> FetchEngine:
        return self._engine

    def load(self, url: str, completion_handler: Callable[[Result], None]) -> None:
        """
        Fetch url and pass the outcome to completion_handler.

        The handler is called once, on whatever thread the engine calls back
        on. A failure wins over a payload; a missing payload becomes b"".
        Only the engine's first callback is honored.

        Args:
            url: Identifier understood by the engine
            completion_handler: Receives Data(payload) or Error(failure)
        """
        completed = threading.Lock()

        def on_complete(payload, metadata, failure):
            if not completed.acquire(blocking=False):
                logger.warning(f"Ignoring repeated completion for {url}")
                return

            result: Result
            if failure is not None:
                result = Error(failure)
            else:
                result = Data(payload if payload is not None else b"")
            completion_handler(result)

        self._engine.perform_request(url, on_complete)
