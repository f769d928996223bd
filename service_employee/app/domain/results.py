"""
Tagged outcome of an upstream-facing operation.

Callers inside the service branch on ``outcome`` so not-found and failure
stay distinguishable for logging; the façade collapses both to ``None``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Outcome(str, Enum):
    """Result kinds."""
    OK = "ok"
    NOT_FOUND = "not_found"
    FAILURE = "failure"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Value plus the outcome that produced it."""

    outcome: Outcome
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(Outcome.OK, value=value)

    @classmethod
    def not_found(cls, error: Optional[str] = None) -> "Result[T]":
        return cls(Outcome.NOT_FOUND, error=error)

    @classmethod
    def failure(cls, error: str) -> "Result[T]":
        return cls(Outcome.FAILURE, error=error)

    @property
    def is_ok(self) -> bool:
        return self.outcome is Outcome.OK

    @property
    def is_not_found(self) -> bool:
        return self.outcome is Outcome.NOT_FOUND

    @property
    def is_failure(self) -> bool:
        return self.outcome is Outcome.FAILURE
