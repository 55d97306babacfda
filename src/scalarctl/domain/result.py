"""ValidationResult — the success/failure outcome of checking an input.

INVARIANT: A failure always carries at least one message.
A success never carries messages.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from pydantic import BaseModel, model_validator

T = TypeVar("T")


class ValidationResult(BaseModel, Generic[T]):
    """Outcome of a single ``validate`` call.

    Attributes:
        successful: Whether the input was accepted.
        value: The accepted input on success, ``None`` on failure.
        errors: Ordered, human-readable messages on failure.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    successful: bool
    value: T | None = None
    errors: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _check_errors_match_outcome(self) -> ValidationResult[T]:
        if self.successful and self.errors:
            msg = "A successful ValidationResult cannot carry errors"
            raise ValueError(msg)
        if not self.successful and not self.errors:
            msg = "A failed ValidationResult requires at least one error"
            raise ValueError(msg)
        return self

    @classmethod
    def ok(cls, value: T) -> ValidationResult[T]:
        """Wrap an accepted *value*."""
        return cls(successful=True, value=value)

    @classmethod
    def failure(cls, errors: Iterable[str]) -> ValidationResult[T]:
        """Build a failed result from one or more *errors*."""
        return cls(successful=False, errors=tuple(errors))
