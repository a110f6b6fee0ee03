"""GraphQL schema parser using graphql-core.

Parses schema files and produces an IRSchema.
"""

import logging
import os

from graphql import (
    GraphQLEnumType,
    GraphQLError,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
    Source,
    build_ast_schema,
    parse,
)

from .exceptions import SchemaLoadError, SchemaParseError
from .ir import BUILTIN_SCALARS, IRArgument, IRField, IRSchema, IRType

logger = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls", ".gql")


class SchemaParser:
    """Parses GraphQL schema files into IR."""

    def __init__(self, schema_path: str):
        """Initialize a parser with a path to a schema file or directory."""
        self.schema_path = schema_path
        self.ir = IRSchema()

    def parse_all(self) -> IRSchema:
        """Parse all schema files and return the complete IR."""
        content = "\n".join(self._read(path) for path in self._collect_schema_files())
        return self.parse_source(content)

    def parse_source(self, content: str) -> IRSchema:
        """Parse schema text and return the complete IR."""
        try:
            document = parse(Source(content, os.path.basename(self.schema_path)))
            schema = build_ast_schema(document)
        except GraphQLError as e:
            raise SchemaParseError(self.schema_path, [str(e)]) from e
        except TypeError as e:
            # build_ast_schema reports SDL validation failures as a TypeError
            raise SchemaParseError(self.schema_path, str(e).split("\n\n")) from e

        self._process_schema(schema)
        return self.ir

    def _collect_schema_files(self) -> list[str]:
        """Collect schema files from path."""
        if os.path.isfile(self.schema_path):
            return [self.schema_path]
        if not os.path.isdir(self.schema_path):
            raise SchemaLoadError(self.schema_path, FileNotFoundError("no such file or directory"))

        files = []
        for root, _, filenames in os.walk(self.schema_path):
            for filename in filenames:
                if filename.endswith(SCHEMA_EXTENSIONS):
                    files.append(os.path.join(root, filename))
        if not files:
            raise SchemaLoadError(self.schema_path, FileNotFoundError("no schema files found"))
        return sorted(files)

    def _read(self, file_path: str) -> str:
        try:
            with open(file_path, encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaLoadError(file_path, e) from e

    def _process_schema(self, schema: GraphQLSchema):
        """Populate the IR from a validated schema."""
        self.ir.query_type = schema.query_type.name if schema.query_type else None
        self.ir.mutation_type = schema.mutation_type.name if schema.mutation_type else None
        # Operations are dispatched by root type name, so the roots must differ
        if self.ir.query_type and self.ir.query_type == self.ir.mutation_type:
            raise SchemaParseError(
                self.schema_path,
                [f"Type '{self.ir.query_type}' cannot be both the query and the mutation root"],
            )

        for name, graphql_type in schema.type_map.items():
            # Skip introspection and built-in scalar types
            if name.startswith("__") or name in BUILTIN_SCALARS:
                continue

            if isinstance(graphql_type, (GraphQLObjectType, GraphQLInterfaceType)):
                self._process_object_type(graphql_type)
            elif isinstance(graphql_type, GraphQLInputObjectType):
                self._process_input_type(graphql_type)
            elif isinstance(graphql_type, (GraphQLScalarType, GraphQLEnumType, GraphQLUnionType)):
                self.ir.scalars.add(name)
            else:
                logger.warning("Skipping unsupported type definition %s", name)

    def _process_object_type(self, graphql_type: GraphQLObjectType | GraphQLInterfaceType):
        fields = []
        for field_name, graphql_field in graphql_type.fields.items():
            args = tuple(
                IRArgument(name=arg_name, type_ref=str(arg.type))
                for arg_name, arg in graphql_field.args.items()
            )
            fields.append(IRField(name=field_name, type_ref=str(graphql_field.type), arguments=args))
        self.ir.types[graphql_type.name] = IRType(name=graphql_type.name, fields=fields)
        logger.debug("Parsed type %s with %d fields", graphql_type.name, len(fields))

    def _process_input_type(self, graphql_type: GraphQLInputObjectType):
        fields = [
            IRField(name=field_name, type_ref=str(input_field.type))
            for field_name, input_field in graphql_type.fields.items()
        ]
        self.ir.types[graphql_type.name] = IRType(name=graphql_type.name, fields=fields)
        logger.debug("Parsed input type %s with %d fields", graphql_type.name, len(fields))
