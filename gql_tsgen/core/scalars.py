"""Scalar type mappings for TypeScript code generation.

Maps GraphQL scalar names to the TypeScript types used in generated
interfaces and function signatures.

Example usage:
    from gql_tsgen.core.scalars import ScalarRegistry

    registry = ScalarRegistry()
    registry.register("DateTime", "string")

    registry.get("Int")       # "number"
    registry.get("DateTime")  # "string"
"""

from .exceptions import ConfigurationError

DEFAULT_SCALARS = {
    "ID": "string",
    "String": "string",
    "Int": "number",
    "Float": "number",
    "Boolean": "boolean",
}


class ScalarRegistry:
    """Registry of GraphQL scalar to TypeScript type mappings.

    The five built-in GraphQL scalars are always registered. Custom
    scalars are only mapped once registered; otherwise they keep their
    GraphQL name in the generated code.
    """

    def __init__(self, mappings: dict[str, str] | None = None):
        self._types: dict[str, str] = dict(DEFAULT_SCALARS)
        for scalar_name, ts_type in (mappings or {}).items():
            self.register(scalar_name, ts_type)

    @classmethod
    def from_pairs(cls, pairs: tuple[str, ...] | list[str]) -> "ScalarRegistry":
        """Build a registry from 'Name=tsType' strings, e.g. from the command line."""
        registry = cls()
        for pair in pairs:
            scalar_name, sep, ts_type = pair.partition("=")
            if not sep or not scalar_name.strip() or not ts_type.strip():
                raise ConfigurationError(
                    f"Invalid scalar mapping {pair!r}, expected NAME=TYPE"
                )
            registry.register(scalar_name.strip(), ts_type.strip())
        return registry

    def register(self, scalar_name: str, ts_type: str):
        """Register the TypeScript type for a scalar."""
        self._types[scalar_name] = ts_type

    def get(self, scalar_name: str) -> str | None:
        """Get the TypeScript type for a scalar, or None if not registered."""
        return self._types.get(scalar_name)

    def has(self, scalar_name: str) -> bool:
        """Check if a mapping is registered for a scalar."""
        return scalar_name in self._types

    @property
    def custom(self) -> dict[str, str]:
        """Mappings registered on top of the built-in scalars."""
        return {k: v for k, v in self._types.items() if k not in DEFAULT_SCALARS}
