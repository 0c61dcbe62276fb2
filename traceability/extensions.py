from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Iterator, Sequence
from typing import Any, Protocol, TypeVar

from .reason import Reason, Error, Success
from .errors import ExceptionalError, OperationFailedSignal
from .result import Result, ResultBase, ok, try_result
from .logging import logger


log = logger()

R = TypeVar("R", bound=ResultBase)


class Closeable(Protocol):
    def close(self) -> Any: ...


def dispose_all(items: Iterable[Closeable], *, stop_on_error: bool = False) -> Result[None]:
    """Close every item in order.

    Each failing `close()` adds an `ExceptionalError` to the returned result.
    By default the remaining items are still closed; with `stop_on_error` the
    first failure ends the loop.
    """
    result: Result[None] = ok()
    for i, item in enumerate(items):
        closed = try_result(item.close)
        if closed.is_success:
            continue
        log.debug("closing item %d `%r` failed: %s", i, item, closed)
        result.with_errors(closed.errors)
        if stop_on_error:
            break
    return result


def require_success(result: R) -> R:
    """Return `result` if it succeeded, raise `OperationFailedSignal` if not.

    This is the one place where a failed result turns into an exception.
    """
    if result.is_failed:
        log.debug("raising `OperationFailedSignal` for %s", result)
        raise OperationFailedSignal(result)
    return result


async def require_success_async(result: Awaitable[R]) -> R:
    return require_success(await result)


def _append_successes(result: ResultBase, successes: Sequence[Success]):
    result.with_successes(successes)


def _append_reasons(result: ResultBase, reasons: Sequence[Reason]):
    result.with_reasons(reasons)


def add_success_if_passed(
    result: R,
    *successes: Success,
    handler: Callable[[R, Sequence[Success]], Any] | None = None,
) -> R:
    if result.is_success:
        (handler or _append_successes)(result, successes)
    return result


def add_reason_if_failed(
    result: R,
    *reasons: Reason,
    handler: Callable[[R, Sequence[Reason]], Any] | None = None,
) -> R:
    if result.is_failed:
        (handler or _append_reasons)(result, reasons)
    return result


def add_error_if_failed(result: R, *errors: Error) -> R:
    if result.is_failed:
        result.with_errors(errors)
    return result


def unwrap_reasons(result: ResultBase, reasons: list[Reason] | None = None) -> list[Reason]:
    """Flatten the reasons of `result` into `reasons`.

    Whenever a reason is an `ExceptionalError` holding an
    `OperationFailedSignal`, the reasons of the carried result are unwrapped
    in its place, at any depth. Everything else is kept as is. Order is
    depth-first, left to right.
    """
    if reasons is None:
        reasons = []

    # one iterator per signal level still being read
    pending: list[Iterator[Reason]] = [iter(result.reasons)]
    while pending:
        for reason in pending[-1]:
            match reason:
                case ExceptionalError(exception=OperationFailedSignal(result=inner)):
                    log.debug("expanding signal for %s", inner)
                    pending.append(iter(inner.reasons))
                    break
                case _:
                    reasons.append(reason)
        else:
            pending.pop()

    return reasons


def get_non_errors(result: ResultBase, reasons: list[Reason] | None = None) -> list[Reason]:
    """All unwrapped reasons of `result` that are not an `Error`, in order."""
    if reasons is None:
        reasons = []

    for reason in unwrap_reasons(result):
        match reason:
            case Error():
                continue
            case _:
                reasons.append(reason)

    return reasons


def partition_reasons(result: ResultBase) -> tuple[list[Success], list[Error], list[Reason]]:
    """Split the unwrapped reasons of `result` into what succeeded, what went
    wrong and everything else."""
    successes: list[Success] = []
    errors: list[Error] = []
    other: list[Reason] = []

    for reason in unwrap_reasons(result):
        match reason:
            case Success():
                successes.append(reason)
            case Error():
                errors.append(reason)
            case _:
                other.append(reason)

    return successes, errors, other
