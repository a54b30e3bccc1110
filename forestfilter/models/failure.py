"""
Failure Classification — Errors Raised by Forest Operations.

Every error raised by forestfilter is a KnownError: the library knows
exactly what went wrong and can describe it in a serializable form.

INVARIANT: Errors are raised synchronously, before any output is produced.
There is no partially filtered result to recover.

Taxonomy:
- InvalidArgumentError: an absent view, an absent predicate, or
  mismatched/absent sequences at forest construction time
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    INVALID_ARGUMENT = "invalid_argument"


class FailureDetail(BaseModel):
    """Serializable description of a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="Explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the library knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
        )


class InvalidArgumentError(KnownError, ValueError):
    """
    Raised when an operation receives an absent or inconsistent argument.

    Also a ValueError, so callers may catch it without importing
    forestfilter types.
    """

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.INVALID_ARGUMENT,
            message=message,
            detail=detail,
        )
