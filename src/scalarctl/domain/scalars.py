"""Primitive scalar family: Boolean, String (and ID), Int, Float, Date.

Validation messages are user-facing and stable; tests assert on them
verbatim.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from scalarctl.domain.inputs import InputKind, classify_input, runtime_type_name
from scalarctl.domain.result import ValidationResult
from scalarctl.domain.types import GraphQLScalarType


class BooleanType(GraphQLScalarType[bool, bool]):
    """``true`` or ``false``."""

    name = "Boolean"
    description = "A boolean value; can be either true or false."

    def __init__(self) -> None:
        self._seal()

    def validate(self, key: str, input: Any) -> ValidationResult[bool]:
        if classify_input(input) is not InputKind.BOOLEAN:
            return ValidationResult.failure([f'Expected "{key}" to be a boolean.'])
        return ValidationResult.ok(input)

    def serialize(self, value: bool) -> bool:
        return value

    def deserialize(self, serialized: bool) -> bool:
        return serialized


class StringType(GraphQLScalarType[str, str]):
    """A UTF-8 character sequence.

    Also backs ``ID``: same wire format, different name, signalling a
    value that is not meant to be human-readable.
    """

    def __init__(self, *, name: str = "String", description: str = "A character sequence.") -> None:
        self.name = name
        self.description = description
        self._seal()

    def validate(self, key: str, input: Any) -> ValidationResult[str]:
        if classify_input(input) is not InputKind.STRING:
            return ValidationResult.failure([f'Expected "{key}" to be a string.'])
        return ValidationResult.ok(input)

    def serialize(self, value: str) -> str:
        return value

    def deserialize(self, serialized: str) -> str:
        return serialized


class IntType(GraphQLScalarType[int, int | float]):
    """A signed integer. Serialized as a JSON number."""

    name = "Int"

    def __init__(self, *, description: str = "") -> None:
        self.description = description
        self._seal()

    def validate(self, key: str, input: Any) -> ValidationResult[int]:
        if classify_input(input) is not InputKind.INTEGER:
            return ValidationResult.failure(
                [f'Expected "{key}" to be {self.name} but is {runtime_type_name(input)}.']
            )
        return ValidationResult.ok(input)

    def serialize(self, value: int) -> int | float:
        return value

    def deserialize(self, serialized: int | float) -> int:
        # int() truncates toward zero.
        return int(serialized)

    def sanitize(self, value: Any) -> int:
        return int(value)


class FloatType(GraphQLScalarType[float, int | float]):
    """A signed double-precision floating-point value."""

    name = "Float"

    def __init__(self, *, description: str = "") -> None:
        self.description = description
        self._seal()

    def validate(self, key: str, input: Any) -> ValidationResult[float]:
        if classify_input(input) is not InputKind.FLOAT:
            return ValidationResult.failure(
                [f'Expected "{key}" to be {self.name} but is {runtime_type_name(input)}.']
            )
        return ValidationResult.ok(input)

    def serialize(self, value: float) -> int | float:
        return value

    def deserialize(self, serialized: int | float) -> float:
        return float(serialized)

    def sanitize(self, value: Any) -> float:
        return float(value)


class DateType(GraphQLScalarType[datetime, str]):
    """A :class:`~datetime.datetime`, serialized as an ISO-8601 string.

    ``validate`` accepts the raw string and leaves it as-is; ``sanitize``
    and ``deserialize`` parse it. UTC instants serialize with a ``Z``
    suffix. Naive datetimes stay naive.
    """

    name = "Date"
    description = "An ISO-8601 Date."

    def __init__(self) -> None:
        self._seal()

    def validate(self, key: str, input: Any) -> ValidationResult[str]:
        error = f"{key} must be an ISO 8601-formatted date string."
        if classify_input(input) is not InputKind.STRING:
            return ValidationResult.failure([error])
        try:
            datetime.fromisoformat(input)
        except ValueError:
            return ValidationResult.failure([error])
        return ValidationResult.ok(input)

    def serialize(self, value: datetime) -> str:
        text = value.isoformat()
        if value.utcoffset() == timedelta(0):
            text = text.removesuffix("+00:00") + "Z"
        return text

    def deserialize(self, serialized: str) -> datetime:
        return datetime.fromisoformat(serialized)

    def sanitize(self, value: Any) -> datetime:
        if isinstance(value, datetime):
            return value
        return self.deserialize(value)
