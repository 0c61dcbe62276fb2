from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Reason:
    """Any fact attached to a result: a message, free-form metadata and the
    moment it was recorded.

    `Error` and `Success` are the two tagged variants; a plain `Reason` is
    neither. Consumers tell them apart with `match`, not by probing attributes.
    `metadata` is copied at construction into a read-only mapping.
    """
    message: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)
    creation_time: datetime = field(default_factory=datetime.now, init=False, compare=False)

    def __post_init__(self):
        if self.message is None:
            object.__setattr__(self, "message", "")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata or {})))

    def __str__(self):
        return self.message


@dataclass(frozen=True)
class Error(Reason):
    reasons: tuple[Error, ...] = ()

    def __post_init__(self):
        super().__post_init__()
        # copied: the sub-cause tree is fixed once built
        object.__setattr__(self, "reasons", tuple(self.reasons or ()))

    def caused_by(self, *errors: Error) -> Error:
        """A copy of this error with `errors` appended to its sub-causes."""
        return replace(self, reasons=(*self.reasons, *errors))

    def walk(self) -> Iterator[Error]:
        """This error followed by all of its sub-causes, depth-first."""
        pending = [self]
        while pending:
            error = pending.pop()
            yield error
            pending.extend(reversed(error.reasons))


@dataclass(frozen=True)
class Success(Reason):
    pass

