"""Process-wide registry of well-known scalars and refinement factories.

Built-in instances are registered once at import. Plugins may add more
through :func:`register_scalar`; built-in names are reserved.

Type expressions name either a registered scalar (``"PositiveInt"``) or
a factory call with integer arguments (``"IntRange(1, 10)"``).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from scalarctl.domain import builtins
from scalarctl.domain.types import GraphQLType

logger = logging.getLogger(__name__)

SCALAR_REGISTRY: dict[str, GraphQLType] = {}

SCALAR_FACTORIES: dict[str, Callable[..., GraphQLType]] = {}

_EXPRESSION = re.compile(
    r"^\s*(?P<name>[A-Za-z_][A-Za-z0-9_]*)\s*(?:\((?P<args>[^()]*)\))?\s*$"
)


def _builtin_scalar_map() -> dict[str, GraphQLType]:
    return {
        "Boolean": builtins.Boolean,
        "String": builtins.String,
        "ID": builtins.ID,
        "NonEmptyString": builtins.NonEmptyString,
        "Int": builtins.Int,
        "PositiveInt": builtins.PositiveInt,
        "NonPositiveInt": builtins.NonPositiveInt,
        "NegativeInt": builtins.NegativeInt,
        "NonNegativeInt": builtins.NonNegativeInt,
        "Float": builtins.Float,
        "Date": builtins.Date,
    }


def _builtin_factory_map() -> dict[str, Callable[..., GraphQLType]]:
    return {
        "StringMin": builtins.StringMin,
        "StringMax": builtins.StringMax,
        "StringRange": builtins.StringRange,
        "IntMin": builtins.IntMin,
        "IntMax": builtins.IntMax,
        "IntRange": builtins.IntRange,
    }


def get_scalar(name: str) -> GraphQLType:
    """Look up a registered scalar by *name*.

    Raises:
        KeyError: If nothing is registered under *name*.
    """
    try:
        return SCALAR_REGISTRY[name]
    except KeyError:
        msg = f"No scalar registered under {name!r}"
        raise KeyError(msg) from None


def register_scalar(name: str, scalar: GraphQLType) -> None:
    """Register a custom scalar under *name*.

    Re-registering the same instance is a no-op. Built-in and factory
    names are reserved.
    """
    normalized_name = name.strip()
    if not normalized_name:
        msg = "Scalar name must not be empty"
        raise ValueError(msg)

    if not isinstance(scalar, GraphQLType):
        msg = f"Scalar {normalized_name!r} must be a GraphQLType, got {type(scalar).__name__}"
        raise TypeError(msg)

    if normalized_name in _builtin_scalar_map() or normalized_name in SCALAR_FACTORIES:
        msg = f"Scalar {normalized_name!r} conflicts with a built-in registration"
        raise ValueError(msg)

    existing = SCALAR_REGISTRY.get(normalized_name)
    if existing is scalar:
        return
    if existing is not None:
        msg = f"Scalar {normalized_name!r} is already registered"
        raise ValueError(msg)

    SCALAR_REGISTRY[normalized_name] = scalar
    logger.debug("Registered scalar %s (%s)", normalized_name, scalar.name)


def _parse_args(name: str, raw_args: str) -> list[int]:
    args: list[int] = []
    for part in raw_args.split(","):
        token = part.strip()
        try:
            args.append(int(token))
        except ValueError:
            msg = f"Argument {token!r} to {name} is not an integer"
            raise ValueError(msg) from None
    return args


def resolve_scalar(expression: str) -> GraphQLType:
    """Resolve a type *expression* to a descriptor.

    Examples:
        >>> resolve_scalar("PositiveInt").description
        'Positive integer (>= 1)'
        >>> resolve_scalar("IntRange(1, 10)").bounds
        {'min': 1, 'max': 10}

    Raises:
        KeyError: Unknown scalar or factory name.
        ValueError: Malformed expression or bad factory arguments.
    """
    match = _EXPRESSION.match(expression)
    if match is None:
        msg = f"Malformed type expression: {expression!r}"
        raise ValueError(msg)

    name = match.group("name")
    raw_args = match.group("args")

    if raw_args is None:
        if name in SCALAR_FACTORIES:
            msg = f"{name} requires arguments, e.g. {name}(1)"
            raise ValueError(msg)
        return get_scalar(name)

    factory = SCALAR_FACTORIES.get(name)
    if factory is None:
        msg = f"No scalar factory registered under {name!r}"
        raise KeyError(msg)

    args = _parse_args(name, raw_args)
    try:
        return factory(*args)
    except TypeError as exc:
        msg = f"Invalid arguments for {name}: {exc}"
        raise ValueError(msg) from exc


def _register_scalars() -> None:
    """Populate the registries with built-in scalars and factories."""
    SCALAR_REGISTRY.update(_builtin_scalar_map())
    SCALAR_FACTORIES.update(_builtin_factory_map())


_register_scalars()
