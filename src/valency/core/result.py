# src/valency/core/result.py
"""
Result values: every engine operation returns one instead of raising.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from valency.core.roles import ErrorKind

T = TypeVar("T")


class ValencyError(Exception):
    def __init__(self, kind: ErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class Result(Generic[T]):
    value: T | None = None
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind) -> "Result[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        """Return the value or raise ValencyError carrying the error kind."""
        if self.error is not None:
            raise ValencyError(self.error)
        return self.value

    def to_dict(self) -> dict:
        if self.error is not None:
            return {"ok": False, "error": self.error.value}
        return {"ok": True, "value": _to_plain(self.value)}


def _to_plain(value):
    if isinstance(value, list):
        return [_to_plain(v) for v in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value
