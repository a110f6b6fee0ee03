"""Conversion of GraphQL type expressions to TypeScript types."""

import re

from .exceptions import InvalidTypeExpression
from .scalars import ScalarRegistry

_NAME = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")

_default_registry = ScalarRegistry()


def map_type(type_expr: str, scalars: ScalarRegistry | None = None) -> str:
    """Map a GraphQL type expression to a TypeScript type.

    Non-null markers are dropped, so 'String!' and 'String' both map to
    'string'. Lists map to arrays: '[Int!]!' becomes 'number[]'. Names
    without a scalar mapping are returned unchanged.

    Raises:
        InvalidTypeExpression: If the expression is not valid GraphQL type syntax.
    """
    registry = scalars or _default_registry
    return _map(type_expr, type_expr, registry)


def _map(fragment: str, type_expr: str, registry: ScalarRegistry) -> str:
    """Map ``fragment``; errors always report the full ``type_expr``."""
    stripped = fragment.replace("!", "").strip()

    if stripped.startswith("[") or stripped.endswith("]"):
        if not (stripped.startswith("[") and stripped.endswith("]")):
            raise InvalidTypeExpression(type_expr, "unbalanced list brackets")
        return f"{_map(stripped[1:-1], type_expr, registry)}[]"

    if not _NAME.match(stripped):
        raise InvalidTypeExpression(type_expr)

    ts_type = registry.get(stripped)
    return ts_type if ts_type is not None else stripped
