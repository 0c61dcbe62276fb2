from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .reason import Error

if TYPE_CHECKING:
    from .result import ResultBase


class TraceabilityError(Exception):
    def __str__(self):
        return "Unknown traceability error."


@dataclass
class FailedResultAccess(TraceabilityError):
    result: Any

    def __str__(self):
        return f"Cannot read the value of a failed result: {self.result}"


class OperationFailedSignal(TraceabilityError):
    """Carries a failed result across code that can only communicate by
    raising, e.g. constructors or dunder methods.

    Raised only by `require_success`. When caught by `try_result` it ends up
    inside an `ExceptionalError`, and `unwrap_reasons` recovers the reasons
    of the carried result from there.
    """
    def __init__(self, result: ResultBase):
        if result is None:
            raise TypeError("`OperationFailedSignal` needs a result to carry, got `None`.")
        super().__init__(str(result))
        self._result = result

    @property
    def result(self) -> ResultBase:
        return self._result

    def __str__(self):
        return self.args[0]


@dataclass(frozen=True)
class ExceptionalError(Error):
    """Failure cause produced from a caught exception."""
    exception: BaseException | None = None

    def __post_init__(self):
        super().__post_init__()
        if not self.message and self.exception is not None:
            object.__setattr__(self, "message", str(self.exception))
