from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar, cast

from .reason import Reason, Error, Success
from .errors import ExceptionalError, FailedResultAccess


T = TypeVar("T")


class ResultBase(Protocol):
    """What the composition helpers need from a result type."""
    reasons: list[Reason]

    @property
    def is_success(self) -> bool: ...

    @property
    def is_failed(self) -> bool: ...

    @property
    def errors(self) -> tuple[Error, ...]: ...

    @property
    def successes(self) -> tuple[Success, ...]: ...

    def with_reasons(self, reasons: Iterable[Reason]) -> Any: ...

    def with_errors(self, errors: Iterable[Error]) -> Any: ...

    def with_successes(self, successes: Iterable[Success]) -> Any: ...


@dataclass
class Result(Generic[T]):
    """Success or failure, with the reasons that led there.

    A result is failed as soon as one of its reasons is an `Error`. The
    `with_*` methods append in place and return the same instance, so they
    chain.
    """
    reasons: list[Reason] = field(default_factory=list)
    payload: T | None = None

    @property
    def is_failed(self) -> bool:
        return any(isinstance(r, Error) for r in self.reasons)

    @property
    def is_success(self) -> bool:
        return not self.is_failed

    @property
    def errors(self) -> tuple[Error, ...]:
        """Read-only view of the errors in `reasons`; add through `with_errors`."""
        return tuple(r for r in self.reasons if isinstance(r, Error))

    @property
    def successes(self) -> tuple[Success, ...]:
        return tuple(r for r in self.reasons if isinstance(r, Success))

    @property
    def value(self) -> T:
        if self.is_failed:
            raise FailedResultAccess(self)
        return cast(T, self.payload)

    def with_reasons(self, reasons: Iterable[Reason]) -> Result[T]:
        self.reasons.extend(reasons)
        return self

    def with_reason(self, reason: Reason) -> Result[T]:
        return self.with_reasons([reason])

    def with_errors(self, errors: Iterable[Error]) -> Result[T]:
        return self.with_reasons(errors)

    def with_error(self, error: Error | str) -> Result[T]:
        return self.with_reasons([Error(error) if isinstance(error, str) else error])

    def with_successes(self, successes: Iterable[Success]) -> Result[T]:
        return self.with_reasons(successes)

    def with_success(self, success: Success | str) -> Result[T]:
        return self.with_reasons([Success(success) if isinstance(success, str) else success])

    def __bool__(self):
        return self.is_success

    def __str__(self):
        reasons = ", ".join(f"{type(r).__name__}: {r}" for r in self.reasons)
        return f"Result: is_success={self.is_success}, reasons=[{reasons}]"


def ok(value: T | None = None) -> Result[T]:
    return Result(payload=value)


def fail(error: Error | str) -> Result[Any]:
    match error:
        case Error():
            return Result([error])
        case str():
            return Result([Error(error)])
        case _:
            raise TypeError(f"Expected an `Error` or a message, got: {error!r}")


def try_result(func: Callable[..., T], *args, **kwargs) -> Result[T]:
    """Call `func`, turning any raised `Exception` into a failed result that
    carries it as an `ExceptionalError`."""
    try:
        value = func(*args, **kwargs)
    except Exception as e:
        return Result([ExceptionalError(exception=e)])
    return ok(value)


async def try_result_async(func: Callable[..., Awaitable[T]], *args, **kwargs) -> Result[T]:
    try:
        value = await func(*args, **kwargs)
    except Exception as e:
        return Result([ExceptionalError(exception=e)])
    return ok(value)
