"""Non-nullable capability, applied explicitly to every built-in leaf.

A bare scalar rejects absence. Rather than baking that rule into each
scalar, the built-in instances are wrapped in :class:`NonNullType` at
construction so the policy is visible on the descriptor itself
(``descriptor.is_non_nullable``).
"""

from __future__ import annotations

from typing import Any

from scalarctl.domain.inputs import InputKind, classify_input
from scalarctl.domain.result import ValidationResult
from scalarctl.domain.types import GraphQLType, SerializedT, ValueT


class NonNullType(GraphQLType[ValueT, SerializedT]):
    """Rejects ``None`` and delegates everything else to ``of_type``.

    Unknown attributes (e.g. a refinement's ``min``) are read through to
    the wrapped descriptor.
    """

    is_non_nullable = True

    def __init__(self, of_type: GraphQLType[ValueT, SerializedT]) -> None:
        self.of_type = of_type
        self.kind = of_type.kind
        self._seal()

    @property
    def name(self) -> str:  # type: ignore[override]
        return self.of_type.name

    @property
    def description(self) -> str:  # type: ignore[override]
        return self.of_type.description

    def __getattr__(self, attr: str) -> Any:
        # Only reached for attributes missing on the wrapper itself.
        if attr.startswith("_") or attr == "of_type":
            raise AttributeError(attr)
        return getattr(self.of_type, attr)

    def validate(self, key: str, input: Any) -> ValidationResult[Any]:
        if classify_input(input) is InputKind.NULL:
            return ValidationResult.failure([f'Expected "{key}" to be a non-null {self.name}.'])
        return self.of_type.validate(key, input)

    def serialize(self, value: ValueT) -> SerializedT:
        return self.of_type.serialize(value)

    def deserialize(self, serialized: SerializedT) -> ValueT:
        return self.of_type.deserialize(serialized)

    def sanitize(self, value: Any) -> ValueT:
        return self.of_type.sanitize(value)

    def coerce_to_input_object(self) -> NonNullType[ValueT, SerializedT]:
        return self


def non_null(of_type: GraphQLType[ValueT, SerializedT]) -> NonNullType[ValueT, SerializedT]:
    """Wrap *of_type* so absent values are rejected. Idempotent."""
    if isinstance(of_type, NonNullType):
        return of_type
    return NonNullType(of_type)
