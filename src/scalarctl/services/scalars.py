"""ScalarService — validate, convert, and inspect registered scalars."""

from __future__ import annotations

import inspect
import math
from collections.abc import Callable
from typing import Any

from scalarctl.config.logging import get_logger
from scalarctl.domain.registry import SCALAR_FACTORIES, SCALAR_REGISTRY
from scalarctl.domain.types import GraphQLType
from scalarctl.services.base import BaseService
from scalarctl.services.result import ServiceResult


def _factory_signature(name: str, factory: Callable[..., GraphQLType]) -> str:
    params = [
        p.name
        for p in inspect.signature(factory).parameters.values()
        if p.kind is inspect.Parameter.POSITIONAL_OR_KEYWORD
    ]
    return f"{name}({', '.join(params)})"


def _normalized(before: Any, after: Any) -> bool:
    """Whether serializing changed the value. NaN is equal to itself here."""
    if isinstance(before, float) and isinstance(after, float):
        if math.isnan(before) and math.isnan(after):
            return False
    return after != before


class ScalarService(BaseService):
    """Operations over the scalar registry.

    Every method accepts a type expression (``"Int"``, ``"StringMin(3)"``)
    and, where relevant, raw text that is decoded before use.
    """

    def validate(
        self,
        expression: str,
        raw: str,
        *,
        key: str | None = None,
        as_string: bool = False,
    ) -> ServiceResult:
        """Validate *raw* and report the accepted value in wire form."""
        op = "validate"
        scalar = self._resolve(op, expression)
        if isinstance(scalar, ServiceResult):
            return scalar
        value = self._decode(op, raw, as_string=as_string)
        if isinstance(value, ServiceResult):
            return value

        key = key or self._settings.validation.default_key
        log = get_logger(__name__, op=op, type=scalar.name, key=key)

        result = scalar.coerce(key, value)
        if not result.successful:
            log.debug("validation failed", errors=list(result.errors))
            return self._validation_failure(op, scalar, key, result.errors)

        log.debug("validation passed")
        return ServiceResult.success(
            op,
            {
                "type": scalar.name,
                "expression": expression,
                "key": key,
                "valid": True,
                "value": scalar.serialize(result.value),
            },
        )

    def serialize(self, expression: str, raw: str, *, as_string: bool = False) -> ServiceResult:
        """Validate *raw*, then emit its canonical serialized form.

        Adds a warning when the canonical form differs from the input
        (e.g. a ``+00:00`` offset rewritten as ``Z``).
        """
        op = "serialize"
        scalar = self._resolve(op, expression)
        if isinstance(scalar, ServiceResult):
            return scalar
        value = self._decode(op, raw, as_string=as_string)
        if isinstance(value, ServiceResult):
            return value

        key = self._settings.validation.default_key
        result = scalar.coerce(key, value)
        if not result.successful:
            return self._validation_failure(op, scalar, key, result.errors)

        serialized = scalar.serialize(result.value)
        warnings: list[str] = []
        if _normalized(value, serialized):
            warnings.append(f"Input normalized: {value!r} -> {serialized!r}")
        return ServiceResult.success(
            op,
            {"type": scalar.name, "expression": expression, "serialized": serialized},
            warnings=warnings,
        )

    def deserialize(self, expression: str, raw: str, *, as_string: bool = False) -> ServiceResult:
        """Convert a wire value into the scalar's internal value.

        Conversion errors (e.g. a malformed date) are not validation
        failures; they are reported as ``CONVERSION_FAILED``.
        """
        op = "deserialize"
        scalar = self._resolve(op, expression)
        if isinstance(scalar, ServiceResult):
            return scalar
        serialized = self._decode(op, raw, as_string=as_string)
        if isinstance(serialized, ServiceResult):
            return serialized

        try:
            value = scalar.deserialize(serialized)
        except (TypeError, ValueError, OverflowError) as exc:
            get_logger(__name__, op=op, type=scalar.name).warning(
                "deserialize failed", error=str(exc)
            )
            return ServiceResult.fail(
                op,
                "CONVERSION_FAILED",
                f"Cannot deserialize {serialized!r} as {scalar.name}: {exc}",
                type=scalar.name,
            )
        return ServiceResult.success(
            op,
            {
                "type": scalar.name,
                "expression": expression,
                "value": repr(value),
                "python_type": type(value).__name__,
            },
        )

    def describe(self, expression: str) -> ServiceResult:
        """Report name, description, kind, and bounds of a type expression."""
        op = "describe"
        scalar = self._resolve(op, expression)
        if isinstance(scalar, ServiceResult):
            return scalar
        return ServiceResult.success(op, self._describe(expression, scalar))

    def list_types(self) -> ServiceResult:
        """List registered scalars and available refinement factories."""
        items = [
            {"id": reg_name, "name": s.name, "description": s.description, "kind": s.kind}
            for reg_name, s in SCALAR_REGISTRY.items()
        ]
        factories = [_factory_signature(n, f) for n, f in SCALAR_FACTORIES.items()]
        return ServiceResult.success(
            "list_types",
            {"items": items, "factories": factories, "count": len(items)},
        )

    @staticmethod
    def _describe(expression: str, scalar: GraphQLType) -> dict[str, Any]:
        return {
            "expression": expression,
            "name": scalar.name,
            "description": scalar.description,
            "kind": scalar.kind,
            "non_null": scalar.is_non_nullable,
            "bounds": dict(getattr(scalar, "bounds", {})),
        }

    @staticmethod
    def _validation_failure(
        op: str, scalar: GraphQLType, key: str, errors: tuple[str, ...]
    ) -> ServiceResult:
        return ServiceResult.fail(
            op,
            "VALIDATION_FAILED",
            "; ".join(errors),
            type=scalar.name,
            key=key,
            errors=list(errors),
        )
