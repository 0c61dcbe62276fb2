from .reason import Reason, Error, Success
from .errors import TraceabilityError, FailedResultAccess, OperationFailedSignal, ExceptionalError
from .result import Result, ResultBase, ok, fail, try_result, try_result_async
from .extensions import (
    dispose_all,
    require_success,
    require_success_async,
    add_success_if_passed,
    add_reason_if_failed,
    add_error_if_failed,
    unwrap_reasons,
    get_non_errors,
    partition_reasons,
)
from .version import __version__

__all__ = [
    "Reason", "Error", "Success",
    "TraceabilityError", "FailedResultAccess", "OperationFailedSignal", "ExceptionalError",
    "Result", "ResultBase", "ok", "fail", "try_result", "try_result_async",
    "dispose_all", "require_success", "require_success_async",
    "add_success_if_passed", "add_reason_if_failed", "add_error_if_failed",
    "unwrap_reasons", "get_non_errors", "partition_reasons",
    "__version__",
]
