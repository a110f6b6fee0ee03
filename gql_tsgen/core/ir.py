"""Intermediate Representation (IR) for GraphQL schemas.

This module defines the dataclasses the generator reads. They are built
once by the parser and never modified afterwards.
"""

import re
from dataclasses import dataclass, field

BUILTIN_SCALARS = ("ID", "String", "Int", "Float", "Boolean")

_WRAPPER_CHARS = re.compile(r"[\[\]!\s]")


def named_type(type_ref: str) -> str:
    """Return the innermost type name of a type expression, e.g. 'User' for '[User!]!'."""
    return _WRAPPER_CHARS.sub("", type_ref)


@dataclass(frozen=True)
class IRArgument:
    """Represents an argument to a field."""
    name: str
    type_ref: str  # GraphQL syntax, e.g. "ID!" or "[String]"


@dataclass(frozen=True)
class IRField:
    """Represents a field of an object type."""
    name: str
    type_ref: str
    arguments: tuple[IRArgument, ...] = ()

    @property
    def named_type(self) -> str:
        return named_type(self.type_ref)


@dataclass
class IRType:
    """Represents a GraphQL object type."""
    name: str
    fields: list[IRField] = field(default_factory=list)


@dataclass
class IRSchema:
    """Complete intermediate representation of a GraphQL schema."""
    types: dict[str, IRType] = field(default_factory=dict)
    # Custom scalars, enums and unions: named types that carry no fields
    scalars: set[str] = field(default_factory=set)
    query_type: str | None = "Query"
    mutation_type: str | None = "Mutation"

    def get_type_by_name(self, name: str) -> IRType | None:
        """Look up an object type by name."""
        return self.types.get(name)

    def is_leaf(self, name: str) -> bool:
        """Check whether a named type has no fields to select."""
        return name in BUILTIN_SCALARS or name in self.scalars

    @property
    def root_types(self) -> dict[str, str]:
        """Map root type names to their operation keyword."""
        roots = {}
        if self.query_type:
            roots[self.query_type] = "query"
        if self.mutation_type:
            roots[self.mutation_type] = "mutation"
        return roots
