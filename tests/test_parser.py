"""Tests for the GraphQL schema parser."""

import pytest
from graphql import GraphQLSyntaxError

from gql_resolvergen.core.ir import TypeKind
from gql_resolvergen.core.parser import SchemaParser


class TestParseFile:

    def test_declaration_order(self, schema_ir):
        assert [t.name for t in schema_ir.types] == [
            "DateTime",
            "Query",
            "Mutation",
            "User",
            "Post",
            "PostStatus",
            "PostInput",
            "UserFilter",
        ]

    def test_kinds(self, schema_ir):
        kinds = schema_ir.kinds()
        assert kinds["DateTime"] == TypeKind.SCALAR
        assert kinds["Query"] == TypeKind.OBJECT
        assert kinds["PostStatus"] == TypeKind.ENUM
        assert kinds["PostInput"] == TypeKind.INPUT

    def test_object_and_input_types(self, schema_ir):
        assert [t.name for t in schema_ir.object_types()] == [
            "Query", "Mutation", "User", "Post",
        ]
        assert [t.name for t in schema_ir.input_types()] == ["PostInput", "UserFilter"]

    def test_enum_values(self, schema_ir):
        assert schema_ir.get_type_by_name("PostStatus").values == ["DRAFT", "PUBLISHED"]


class TestTypeReferences:

    def test_required_list_of_objects(self, schema_ir):
        users = schema_ir.get_type_by_name("Query").fields[1]
        assert users.name == "users"
        assert users.type.name == "User"
        assert users.type.is_list
        assert users.type.is_required
        assert users.type.is_object

    def test_argument_kinds(self, schema_ir):
        users = schema_ir.get_type_by_name("Query").fields[1]
        filter_arg, limit_arg = users.arguments
        assert filter_arg.type.is_input
        assert not filter_arg.type.is_required
        assert limit_arg.type.is_scalar

    def test_custom_scalar_reference(self, schema_ir):
        created_at = schema_ir.get_type_by_name("Post").fields[5]
        assert created_at.type.name == "DateTime"
        assert created_at.type.is_scalar

    def test_enum_reference(self, schema_ir):
        status = schema_ir.get_type_by_name("Post").fields[6]
        assert status.type.is_enum
        assert not status.type.is_object

    def test_nullable_list_with_required_items(self):
        ir = SchemaParser.from_string("type Query { ids: [ID!] }")
        ids = ir.types[0].fields[0]
        assert ids.type.is_list
        assert not ids.type.is_required

    def test_nested_list_collapses(self):
        ir = SchemaParser.from_string("type Query { grid: [[Int!]!]! }")
        grid = ir.types[0].fields[0]
        assert grid.type.name == "Int"
        assert grid.type.is_list
        assert grid.type.is_required

    def test_union_reference_is_object_like(self):
        ir = SchemaParser.from_string(
            """
            type A { id: ID }
            type B { id: ID }
            union AorB = A | B
            type Query { thing: AorB }
            """
        )
        assert ir.get_type_by_name("AorB").members == ["A", "B"]
        thing = ir.get_type_by_name("Query").fields[0]
        assert thing.type.kind == TypeKind.UNION
        assert thing.type.is_object

    def test_default_value_is_printed(self):
        ir = SchemaParser.from_string("type Query { posts(first: Int = 10): [ID] }")
        arg = ir.types[0].fields[0].arguments[0]
        assert arg.default_value == "10"


class TestFiles:

    def test_directory_is_walked(self, tmp_path):
        (tmp_path / "a.graphql").write_text("type Query { a: A }")
        (tmp_path / "nested").mkdir()
        (tmp_path / "nested" / "b.graphqls").write_text("type A { id: ID! }")
        (tmp_path / "ignored.txt").write_text("not a schema")

        ir = SchemaParser(str(tmp_path)).parse_all()
        assert [t.name for t in ir.types] == ["Query", "A"]
        # Kinds resolve across files
        assert ir.types[0].fields[0].type.is_object

    def test_syntax_error_is_raised(self, tmp_path):
        bad = tmp_path / "bad.graphql"
        bad.write_text("type Query {")
        with pytest.raises(GraphQLSyntaxError):
            SchemaParser(str(bad)).parse_all()

class TestExtensions:

    def test_extend_type_appends_fields(self):
        ir = SchemaParser.from_string("type Query { a: Int }\nextend type Query { b: Int }")
        assert ir.get_type_by_name("Query").field_names() == ["a", "b"]
        assert len(ir.types) == 1

    def test_extend_input_appends_fields(self):
        ir = SchemaParser.from_string(
            "input PostInput { title: String! }\n"
            "extend input PostInput { body: String }\n"
            "type Mutation { createPost(data: PostInput!): Int }\n"
        )
        post_input = ir.get_type_by_name("PostInput")
        assert post_input.field_names() == ["title", "body"]
        assert ir.get_type_by_name("Mutation").fields[0].arguments[0].type.is_input

    def test_duplicate_extension_fields_ignored(self):
        ir = SchemaParser.from_string("type Query { a: Int }\nextend type Query { a: String, c: ID }")
        query = ir.get_type_by_name("Query")
        assert query.field_names() == ["a", "c"]
        assert query.fields[0].type.name == "Int"

    def test_extension_before_definition_across_files(self, tmp_path):
        (tmp_path / "a_posts.graphql").write_text("extend type Query { posts: [ID] }")
        (tmp_path / "b_schema.graphql").write_text('"""Root"""\ntype Query { me: ID }')

        ir = SchemaParser(str(tmp_path)).parse_all()
        assert [t.name for t in ir.types] == ["Query"]
        query = ir.types[0]
        assert query.field_names() == ["me", "posts"]
        assert query.description == "Root"
        assert query.kind == TypeKind.OBJECT
