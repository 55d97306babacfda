"""Type descriptor contract shared by every scalar.

A descriptor is generic over two representations:

- ``ValueT``: the internal value handed to application code.
- ``SerializedT``: the wire value embedded into responses (usually JSON).

Descriptors are immutable after construction and are meant to be built
once and shared for the lifetime of the process.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from scalarctl.domain.result import ValidationResult

ValueT = TypeVar("ValueT")
SerializedT = TypeVar("SerializedT")


class GraphQLType(ABC, Generic[ValueT, SerializedT]):
    """Abstract base class for type descriptors.

    Subclasses must provide ``name`` and ``description`` (as class
    attributes or set in ``__init__``) and implement ``validate``,
    ``serialize`` and ``deserialize``. Attributes are assigned during
    ``__init__`` and the instance is sealed with :meth:`_seal`; any later
    assignment raises ``AttributeError``.
    """

    name: str
    description: str
    kind: str = "type"
    is_non_nullable: bool = False

    def __setattr__(self, attr: str, value: Any) -> None:
        if self.__dict__.get("_sealed", False):
            msg = f"{type(self).__name__} is immutable; cannot set {attr!r}"
            raise AttributeError(msg)
        super().__setattr__(attr, value)

    def __delattr__(self, attr: str) -> None:
        msg = f"{type(self).__name__} is immutable; cannot delete {attr!r}"
        raise AttributeError(msg)

    def _seal(self) -> None:
        """Freeze the instance. Called last in every concrete ``__init__``."""
        object.__setattr__(self, "_sealed", True)

    @abstractmethod
    def validate(self, key: str, input: Any) -> ValidationResult[Any]:
        """Check an untyped external *input*.

        *key* is the field name used only to format error messages.
        On success the accepted input is returned unchanged.
        """
        ...

    @abstractmethod
    def serialize(self, value: ValueT) -> SerializedT:
        """Convert an already-valid internal value to its wire form."""
        ...

    @abstractmethod
    def deserialize(self, serialized: SerializedT) -> ValueT:
        """Convert a wire value back to its internal form.

        May raise for malformed input; callers are expected to run
        :meth:`validate` first.
        """
        ...

    def sanitize(self, value: Any) -> ValueT:
        """Narrow a validated input to the internal value type."""
        return value

    def coerce_to_input_object(self) -> GraphQLType[ValueT, SerializedT]:
        """Return a descriptor usable in input position."""
        return self

    def coerce(self, key: str, input: Any) -> ValidationResult[ValueT]:
        """Validate *input* and sanitize it into the internal value type."""
        result = self.validate(key, input)
        if not result.successful:
            return result
        return ValidationResult.ok(self.sanitize(result.value))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class GraphQLScalarType(GraphQLType[ValueT, SerializedT]):
    """Leaf (non-composite) type descriptor.

    Scalars are valid in both output and input position, so
    :meth:`coerce_to_input_object` is always the identity.
    """

    kind = "scalar"

    def coerce_to_input_object(self) -> GraphQLScalarType[ValueT, SerializedT]:
        return self
