"""urlloader - load URLs through a swappable fetch engine."""

from .engine import (
    CompletionHandler,
    FetchEngine,
    RequestsFetchEngine,
    reset_shared_engine,
    shared_engine,
)
from .exceptions import ConfigurationError, FetchFailure, InvalidURLError, URLLoaderError
from .loader import Loader
from .result import Data, Error, Result, is_data, is_error
from .testing import MockFetchEngine

__version__ = "0.1.0"

__all__ = [
    "CompletionHandler",
    "ConfigurationError",
    "Data",
    "Error",
    "FetchEngine",
    "FetchFailure",
    "InvalidURLError",
    "Loader",
    "MockFetchEngine",
    "RequestsFetchEngine",
    "Result",
    "URLLoaderError",
    "is_data",
    "is_error",
    "reset_shared_engine",
    "shared_engine",
]
