"""Untyped external values and their classification.

External input arrives as arbitrary Python objects (usually decoded JSON).
Scalars never match on ``isinstance`` directly; they classify the input
into one closed :class:`InputKind` first, so ``bool`` never passes as an
integer and ``int`` never passes as a float.
"""

from __future__ import annotations

from enum import StrEnum


class InputKind(StrEnum):
    """Shapes an untyped external value can take."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    OTHER = "other"


def classify_input(value: object) -> InputKind:
    """Return the :class:`InputKind` of an untyped *value*.

    Examples:
        >>> classify_input(True)
        <InputKind.BOOLEAN: 'boolean'>
        >>> classify_input(3)
        <InputKind.INTEGER: 'integer'>
        >>> classify_input(3.0)
        <InputKind.FLOAT: 'float'>
    """
    if value is None:
        return InputKind.NULL
    # bool subclasses int, so it must be checked first.
    if isinstance(value, bool):
        return InputKind.BOOLEAN
    if isinstance(value, int):
        return InputKind.INTEGER
    if isinstance(value, float):
        return InputKind.FLOAT
    if isinstance(value, str):
        return InputKind.STRING
    return InputKind.OTHER


def runtime_type_name(value: object) -> str:
    """Name of *value*'s runtime type, as shown in validation messages."""
    return type(value).__name__
