"""Tests for the graphql-core schema parser."""

import pytest

from gql_tsgen.core.exceptions import SchemaLoadError, SchemaParseError
from gql_tsgen.core.parser import SchemaParser

SCHEMA = """
scalar DateTime

enum Role { ADMIN USER }

interface Node { id: ID! }

input CreateUserInput {
  name: String!
  tags: [String!]
}

type User implements Node {
  id: ID!
  name: String
  role: Role!
  friends(first: Int = 10, after: String): [User!]!
}

type Query {
  user(id: ID!): User
  users: [User]
}

type Mutation {
  createUser(input: CreateUserInput!): User!
}

extend type User {
  joined: DateTime
}
"""


@pytest.fixture
def ir():
    return SchemaParser("schema.graphql").parse_source(SCHEMA)


class TestParseSource:
    """Tests for building the IR from schema text."""

    def test_root_type_names(self, ir):
        assert ir.query_type == "Query"
        assert ir.mutation_type == "Mutation"
        assert ir.root_types == {"Query": "query", "Mutation": "mutation"}

    def test_no_mutation_root(self):
        ir = SchemaParser("s.graphql").parse_source("type Query { a: Int }")
        assert ir.mutation_type is None
        assert ir.root_types == {"Query": "query"}

    def test_object_types(self, ir):
        assert {"User", "Query", "Mutation"} <= set(ir.types)

    def test_builtin_and_introspection_types_skipped(self, ir):
        for name in ("String", "Int", "Boolean", "ID", "Float", "__Schema", "__Type"):
            assert name not in ir.types
            assert name not in ir.scalars

    def test_field_type_refs_keep_graphql_syntax(self, ir):
        fields = {f.name: f for f in ir.types["User"].fields}

        assert fields["id"].type_ref == "ID!"
        assert fields["name"].type_ref == "String"
        assert fields["friends"].type_ref == "[User!]!"
        assert fields["friends"].named_type == "User"

    def test_field_declaration_order(self, ir):
        assert [f.name for f in ir.types["User"].fields][:4] == ["id", "name", "role", "friends"]

    def test_extension_fields_merged(self, ir):
        assert "joined" in [f.name for f in ir.types["User"].fields]

    def test_arguments(self, ir):
        user = ir.types["Query"].fields[0]

        assert user.name == "user"
        assert [(a.name, a.type_ref) for a in user.arguments] == [("id", "ID!")]

    def test_argument_order(self, ir):
        friends = next(f for f in ir.types["User"].fields if f.name == "friends")
        assert [a.name for a in friends.arguments] == ["first", "after"]

    def test_input_types_have_fields(self, ir):
        fields = ir.types["CreateUserInput"].fields
        assert [(f.name, f.type_ref) for f in fields] == [("name", "String!"), ("tags", "[String!]")]

    def test_leaf_types(self, ir):
        assert ir.scalars == {"DateTime", "Role"}
        assert ir.is_leaf("Role")
        assert ir.is_leaf("String")
        assert not ir.is_leaf("User")


class TestParseErrors:
    """Tests for errors reported by graphql-core."""

    def test_syntax_error(self):
        with pytest.raises(SchemaParseError) as exc_info:
            SchemaParser("broken.graphql").parse_source("type Query {")
        assert exc_info.value.source == "broken.graphql"
        assert exc_info.value.errors

    def test_unknown_type_reference(self):
        with pytest.raises(SchemaParseError) as exc_info:
            SchemaParser("s.graphql").parse_source("type Query { user: Missing }")
        assert "Missing" in str(exc_info.value)

    def test_empty_document(self):
        with pytest.raises(SchemaParseError):
            SchemaParser("s.graphql").parse_source("")

    def test_same_type_for_query_and_mutation_root(self):
        sdl = "schema { query: Root mutation: Root }\ntype Root { a: Int }"
        with pytest.raises(SchemaParseError) as exc_info:
            SchemaParser("s.graphql").parse_source(sdl)
        assert "Root" in str(exc_info.value)
        assert "both the query and the mutation root" in str(exc_info.value)


class TestParseFiles:
    """Tests for reading schema files from disk."""

    def test_single_file(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text(SCHEMA)

        ir = SchemaParser(str(path)).parse_all()
        assert "User" in ir.types

    def test_directory_of_files(self, tmp_path):
        (tmp_path / "a_query.graphqls").write_text("type Query { user: User }")
        (tmp_path / "nested").mkdir()
        (tmp_path / "nested" / "b_user.graphql").write_text("type User { id: ID! }")
        (tmp_path / "notes.txt").write_text("not a schema")

        ir = SchemaParser(str(tmp_path)).parse_all()
        assert {"Query", "User"} <= set(ir.types)

    def test_directory_without_schema_files(self, tmp_path):
        (tmp_path / "notes.txt").write_text("nothing here")

        with pytest.raises(SchemaLoadError):
            SchemaParser(str(tmp_path)).parse_all()

    def test_missing_path(self, tmp_path):
        with pytest.raises(SchemaLoadError) as exc_info:
            SchemaParser(str(tmp_path / "missing.graphql")).parse_all()
        assert exc_info.value.cause is not None
