"""
Tagged results returned by the service layer.

Services never return ``None`` to signal a problem.  Each operation
returns an ``Outcome`` whose ``kind`` tells the caller what happened
and, for the negative kinds, carries a short human readable ``reason``
used in log messages.  The HTTP layer collapses the kinds into status
codes; the reason never reaches the client.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class OutcomeKind(str, Enum):
    OK = "ok"
    INVALID = "invalid"
    UNAUTHORIZED = "unauthorized"
    ABSENT = "absent"
    # The storage backend failed; the operation was not completed.
    FAILED = "failed"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a service operation."""

    kind: OutcomeKind
    value: Optional[T] = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Outcome[T]":
        return cls(OutcomeKind.OK, value=value)

    @classmethod
    def invalid(cls, reason: str) -> "Outcome[T]":
        return cls(OutcomeKind.INVALID, reason=reason)

    @classmethod
    def unauthorized(cls, reason: str) -> "Outcome[T]":
        return cls(OutcomeKind.UNAUTHORIZED, reason=reason)

    @classmethod
    def absent(cls, reason: Optional[str] = None) -> "Outcome[T]":
        return cls(OutcomeKind.ABSENT, reason=reason)

    @classmethod
    def failed(cls, reason: str) -> "Outcome[T]":
        return cls(OutcomeKind.FAILED, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.kind is OutcomeKind.OK
