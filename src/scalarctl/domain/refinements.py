"""Bound refinements for String and Int.

A refinement wraps a parent descriptor and a bound check:

1. The parent's ``validate`` runs first. A parent failure is returned
   unchanged and the bound is never checked.
2. The bound check runs against the validated input's magnitude
   (the integer itself, or the string's character count).
3. A violation produces exactly one message; otherwise the parent's
   success is returned unchanged.

Float has no refinements.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from scalarctl.domain.result import ValidationResult
from scalarctl.domain.scalars import IntType, StringType
from scalarctl.domain.types import GraphQLScalarType, GraphQLType, SerializedT, ValueT

BoundCheck = Callable[[Any], str | None]
"""Returns a violation message, or ``None`` when the value is in bounds."""


class RefinedType(GraphQLScalarType[ValueT, SerializedT]):
    """A parent descriptor plus an additional bound check."""

    kind = "refined"

    def __init__(
        self,
        parent: GraphQLType[ValueT, SerializedT],
        check: BoundCheck,
        *,
        name: str,
        description: str,
        bounds: dict[str, int],
    ) -> None:
        self.parent = parent
        self.check = check
        self.name = name
        self.description = description
        self.bounds = dict(bounds)
        self._seal()

    def validate(self, key: str, input: Any) -> ValidationResult[Any]:
        result = self.parent.validate(key, input)
        if not result.successful:
            return result
        violation = self.check(result.value)
        if violation is not None:
            return ValidationResult.failure([violation])
        return result

    def serialize(self, value: ValueT) -> SerializedT:
        return self.parent.serialize(value)

    def deserialize(self, serialized: SerializedT) -> ValueT:
        return self.parent.deserialize(serialized)

    def sanitize(self, value: Any) -> ValueT:
        return self.parent.sanitize(value)


def _check_range(min: int, max: int) -> None:
    if min > max:
        msg = f"Range minimum {min} is greater than maximum {max}"
        raise ValueError(msg)


# ---------------------------------------------------------------------------
# Int
# ---------------------------------------------------------------------------


class IntMinType(RefinedType[int, int | float]):
    def __init__(self, min: int, *, description: str | None = None) -> None:
        self.min = min

        def check(value: int) -> str | None:
            if value < min:
                return f"Value ({value}) can not be lower than {min}"
            return None

        parent = IntType()
        super().__init__(
            parent,
            check,
            name=parent.name,
            description=f"Int with minimum of {min}" if description is None else description,
            bounds={"min": min},
        )


class IntMaxType(RefinedType[int, int | float]):
    def __init__(self, max: int, *, description: str | None = None) -> None:
        self.max = max

        def check(value: int) -> str | None:
            if value > max:
                return f"Value ({value}) can not be greater than {max}"
            return None

        parent = IntType()
        super().__init__(
            parent,
            check,
            name=parent.name,
            description=f"Int with maximum of {max}" if description is None else description,
            bounds={"max": max},
        )


class IntRangeType(RefinedType[int, int | float]):
    def __init__(self, min: int, max: int, *, description: str | None = None) -> None:
        _check_range(min, max)
        self.min = min
        self.max = max
        limits = f"{min} and {max}. (>= {min} && <= {max})"

        def check(value: int) -> str | None:
            if value < min or value > max:
                return f"Value ({value}) must be between {limits}"
            return None

        parent = IntType()
        super().__init__(
            parent,
            check,
            name=parent.name,
            description=f"Int between {limits}" if description is None else description,
            bounds={"min": min, "max": max},
        )


# ---------------------------------------------------------------------------
# String (length bounds)
# ---------------------------------------------------------------------------


class StringMinType(RefinedType[str, str]):
    def __init__(
        self, min: int, *, description: str | None = None, name: str = "String"
    ) -> None:
        self.min = min

        def check(value: str) -> str | None:
            if len(value) < min:
                return f"Value ({len(value)} chars) can not be lower than {min}"
            return None

        if description is None:
            description = f"{name} with minimum of {min} characters"
        super().__init__(
            StringType(name=name),
            check,
            name=name,
            description=description,
            bounds={"min": min},
        )


class StringMaxType(RefinedType[str, str]):
    def __init__(
        self, max: int, *, description: str | None = None, name: str = "String"
    ) -> None:
        self.max = max

        def check(value: str) -> str | None:
            if len(value) > max:
                return f"Value ({len(value)} chars) can not be greater than {max}"
            return None

        if description is None:
            description = f"{name} with max of {max} characters"
        super().__init__(
            StringType(name=name),
            check,
            name=name,
            description=description,
            bounds={"max": max},
        )


class StringRangeType(RefinedType[str, str]):
    """Length between ``min`` and ``max`` characters, inclusive.

    Used with a custom *name* to declare refined string types such as
    ``Username`` (3-20 chars).
    """

    def __init__(
        self, min: int, max: int, *, description: str | None = None, name: str = "String"
    ) -> None:
        _check_range(min, max)
        self.min = min
        self.max = max

        def check(value: str) -> str | None:
            if len(value) < min or len(value) > max:
                return f"Value ({len(value)} chars) must have between {min} and {max} chars"
            return None

        if description is None:
            description = f"{name} with characters between {min} and {max}"
        super().__init__(
            StringType(name=name),
            check,
            name=name,
            description=description,
            bounds={"min": min, "max": max},
        )
