"""Ready-made scalar instances and refinement factories.

Every instance here is wrapped with :func:`non_null`. The instances are
built once at import and never mutated. The published names mirror the
scalar names used in schemas, hence the CamelCase factories.
"""

# ruff: noqa: N802

from __future__ import annotations

from datetime import datetime

from scalarctl.domain.nullability import NonNullType, non_null
from scalarctl.domain.refinements import (
    IntMaxType,
    IntMinType,
    IntRangeType,
    StringMaxType,
    StringMinType,
    StringRangeType,
)
from scalarctl.domain.scalars import BooleanType, DateType, FloatType, IntType, StringType

__all__ = [
    "ID",
    "Boolean",
    "Date",
    "Float",
    "Int",
    "IntMax",
    "IntMin",
    "IntRange",
    "NegativeInt",
    "NonEmptyString",
    "NonNegativeInt",
    "NonPositiveInt",
    "PositiveInt",
    "String",
    "StringMax",
    "StringMin",
    "StringRange",
]

# --- Boolean / String ---

Boolean: NonNullType[bool, bool] = non_null(BooleanType())

String: NonNullType[str, str] = non_null(StringType())

ID: NonNullType[str, str] = non_null(
    StringType(name="ID", description="A unique identifier, not intended to be human-readable.")
)


def StringMin(
    min: int, *, description: str | None = None, name: str = "String"
) -> NonNullType[str, str]:
    """String with at least *min* characters."""
    return non_null(StringMinType(min, description=description, name=name))


def StringMax(
    max: int, *, description: str | None = None, name: str = "String"
) -> NonNullType[str, str]:
    """String with at most *max* characters."""
    return non_null(StringMaxType(max, description=description, name=name))


def StringRange(
    min: int, max: int, *, description: str | None = None, name: str = "String"
) -> NonNullType[str, str]:
    """String with between *min* and *max* characters."""
    return non_null(StringRangeType(min, max, description=description, name=name))


NonEmptyString = StringMin(1, description="Non empty String")

# --- Int ---

Int: NonNullType[int, int | float] = non_null(IntType())


def IntMin(min: int, *, description: str | None = None) -> NonNullType[int, int | float]:
    """Int no lower than *min*."""
    return non_null(IntMinType(min, description=description))


def IntMax(max: int, *, description: str | None = None) -> NonNullType[int, int | float]:
    """Int no greater than *max*."""
    return non_null(IntMaxType(max, description=description))


def IntRange(
    min: int, max: int, *, description: str | None = None
) -> NonNullType[int, int | float]:
    """Int between *min* and *max*, inclusive."""
    return non_null(IntRangeType(min, max, description=description))


PositiveInt = IntMin(1, description="Positive integer (>= 1)")
NonPositiveInt = IntMax(0, description="Non positive integer (<= 0)")
NegativeInt = IntMax(-1, description="Negative integer (<= -1)")
NonNegativeInt = IntMin(0, description="Non negative integer (>= 0)")

# --- Float / Date ---

Float: NonNullType[float, int | float] = non_null(FloatType())

Date: NonNullType[datetime, str] = non_null(DateType())
