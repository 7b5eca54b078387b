"""
Two-variant result delivered by Loader.load().

A fetch either produced a payload (Data) or failed (Error). Failures are
carried as values, not raised.
"""

from dataclasses import dataclass
from typing import TypeGuard


@dataclass(frozen=True)
class Data:
    """Successful fetch with its binary payload (possibly empty)."""

    payload: bytes


@dataclass(frozen=True)
class Error:
    """Failed fetch with the failure reported by the engine."""

    failure: BaseException


Result = Data | Error


def is_data(result: Result) -> TypeGuard[Data]:
    return isinstance(result, Data)


def is_error(result: Result) -> TypeGuard[Error]:
    return isinstance(result, Error)
