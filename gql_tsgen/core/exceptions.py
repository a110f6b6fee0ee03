"""Exceptions raised by gql-tsgen.

Every error is fatal for a generation run: the CLI reports it and exits
without writing any output.
"""

from typing import Any


class GqlTsgenError(Exception):
    """Base exception for all gql-tsgen errors."""

    def __init__(self, message: str, *args: Any):
        self.message = message
        super().__init__(message, *args)


class ConfigurationError(GqlTsgenError):
    """An option value could not be interpreted."""


class SchemaError(GqlTsgenError):
    """Base exception for schema loading and parsing errors."""


class SchemaLoadError(SchemaError):
    """The schema could not be read from disk.

    Attributes:
        source: The file or directory that failed to load.
        cause: The underlying exception, if any.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load schema from '{source}'"
        if cause:
            message += f": {cause}"
        super().__init__(message)


class SchemaParseError(SchemaError):
    """graphql-core rejected the schema text.

    Attributes:
        source: The schema file or directory.
        errors: Messages reported by graphql-core.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"Invalid GraphQL schema in '{source}'"
        if self.errors:
            message += f": {'; '.join(self.errors)}"
        super().__init__(message)


class GenerationError(GqlTsgenError):
    """Base exception for errors raised while rendering code."""


class InvalidTypeExpression(GenerationError):
    """A GraphQL type expression is malformed."""

    def __init__(self, type_expr: str, reason: str = "malformed type expression"):
        self.type_expr = type_expr
        super().__init__(f"Invalid type expression {type_expr!r}: {reason}")


class UnknownTypeError(GenerationError):
    """A field refers to a type the schema does not define."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Unknown type '{type_name}'")


class CyclicSelectionError(GenerationError):
    """A response shape refers back to a type already being expanded.

    Attributes:
        path: Type names from the root field down to the repeated type.
    """

    def __init__(self, path: list[str]):
        self.path = path
        super().__init__(f"Cyclic selection: {' -> '.join(path)}")


class DuplicateOperationError(GenerationError):
    """Two root fields would produce functions with the same name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Operation '{name}' is defined on both the query and mutation root types"
        )


class OutputWriteError(GqlTsgenError):
    """The output file could not be created or written."""

    def __init__(self, path: str, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        message = f"Failed to write output to '{path}'"
        if cause:
            message += f": {cause}"
        super().__init__(message)
