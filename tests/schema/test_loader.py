#!/usr/bin/env python3
"""Tests for schema document loading and dumping."""

import pytest
import yaml

from hidefield.core.constants import ErrorCode
from hidefield.schema.loader import (
    SchemaError,
    dump_schema,
    load_schema,
    parse_attribute,
    schema_from_dict,
    schema_to_dict,
)
from hidefield.schema.model import LiteralKind


class TestParseAttribute:
    """Tests for parse_attribute."""

    def test_without_parentheses(self):
        attr = parse_attribute("@graphql.show")
        assert attr.name == "graphql.show"
        assert attr.args == []

    def test_empty_arguments(self):
        assert parse_attribute("@graphql.hide()").args == []

    def test_without_at_sign(self):
        assert parse_attribute("graphql.show(query: true)").name == "graphql.show"

    def test_boolean_arguments(self):
        attr = parse_attribute("@graphql.show(query: true, create: false)")
        assert [(a.name, a.value.value) for a in attr.args] == [("query", True), ("create", False)]
        assert all(a.value.kind == LiteralKind.BOOLEAN for a in attr.args)

    def test_argument_order_preserved(self):
        attr = parse_attribute("@graphql.hide(update: true, query: true, read: true)")
        assert [a.name for a in attr.args] == ["update", "query", "read"]

    def test_whitespace_tolerated(self):
        attr = parse_attribute("  @graphql.show(  read :true ,update:  true  )  ")
        assert [(a.name, a.value.value) for a in attr.args] == [("read", True), ("update", True)]

    @pytest.mark.parametrize(
        "text,value",
        [("'x, y'", "x, y"), ('"quoted"', "quoted"), ("3", 3), ("2.5", 2.5), ("TRUE", "TRUE")],
    )
    def test_generic_literals(self, text, value):
        arg = parse_attribute(f"@graphql.show(query: {text})").args[0]
        assert arg.value.kind == LiteralKind.LITERAL
        assert arg.value.value == value

    @pytest.mark.parametrize(
        "text", ["", "@", "@graphql.show(query)", "@graphql.show(: true)", "@1bad()"]
    )
    def test_invalid(self, text):
        with pytest.raises(SchemaError):
            parse_attribute(text)


class TestSchemaFromDict:
    """Tests for schema_from_dict."""

    def test_models_in_order(self, sample_schema):
        assert sample_schema.model_names() == ["Book", "Author", "Statistics"]
        assert sample_schema.enums == ["Role"]

    def test_relation_detection(self, sample_schema):
        book = sample_schema.get_model("Book")
        relations = {f.name: f.is_relation for f in book.fields}
        assert relations == {
            "id": False,
            "author": True,
            "stats": True,
            "related": True,
            "price": False,
            "internalId": False,
            "tags": False,
        }

    def test_enum_is_not_relation(self, sample_schema):
        role = sample_schema.get_model("Author").fields[1]
        assert role.type == "Role"
        assert role.is_relation is False

    def test_type_modifiers(self, sample_schema):
        book = sample_schema.get_model("Book")
        stats = book.fields[2]
        related = book.fields[3]
        assert (stats.type, stats.optional, stats.is_list) == ("Statistics", True, False)
        assert (related.type, related.optional, related.is_list) == ("Book", False, True)

    def test_containing_model_recorded(self, sample_schema):
        assert sample_schema.get_model("Author").fields[0].qualified_name == "Author.name"

    def test_attribute_mapping_form(self):
        schema = schema_from_dict(
            {
                "models": [
                    {
                        "name": "A",
                        "fields": [
                            {
                                "name": "x",
                                "type": "String",
                                "attributes": [
                                    {"name": "graphql.hide", "args": {"create": True}},
                                    {
                                        "name": "graphql.show",
                                        "args": [{"name": "read", "value": True}],
                                    },
                                ],
                            }
                        ],
                    }
                ]
            }
        )
        hide, show = schema.models[0].fields[0].attributes
        assert hide.name == "graphql.hide"
        assert hide.args[0].name == "create"
        assert hide.args[0].value.is_true()
        assert show.args[0].name == "read"

    def test_existing_comments_kept(self):
        schema = schema_from_dict(
            {"models": [{"name": "A", "fields": [{"name": "x", "type": "Int", "comments": ["/// doc"]}]}]}
        )
        assert schema.models[0].fields[0].comments == ["/// doc"]

    def test_empty_document(self):
        assert schema_from_dict({}).models == []

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"models": "Book"},
            {"models": [{"fields": []}]},
            {"models": [{"name": "A", "fields": [{"name": "x"}]}]},
            {"models": [{"name": "A", "fields": ["x"]}]},
            {"models": [{"name": "A", "fields": [{"name": "x", "type": "Int", "attributes": [5]}]}]},
            {"models": [{"name": "A", "fields": [{"name": "x", "type": "Int", "comments": "c"}]}]},
            {"enums": "Role"},
        ],
    )
    def test_malformed(self, data):
        with pytest.raises(SchemaError):
            schema_from_dict(data)

    def test_duplicate_model(self):
        with pytest.raises(SchemaError) as exc_info:
            schema_from_dict({"models": [{"name": "A"}, {"name": "A"}]})
        assert exc_info.value.error_code == ErrorCode.CONFLICT


class TestLoadSchema:
    """Tests for load_schema."""

    def test_load(self, schema_file):
        schema = load_schema(schema_file)
        assert schema.model_names() == ["Book", "Author", "Statistics"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaError) as exc_info:
            load_schema(tmp_path / "missing.yaml")
        assert exc_info.value.error_code == ErrorCode.NOT_FOUND

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("models: [")
        with pytest.raises(SchemaError, match="YAML parse error"):
            load_schema(path)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "latin1.yaml"
        path.write_bytes(b"models:\n  - name: B\xff\xfeok\n")
        with pytest.raises(SchemaError, match="not valid UTF-8") as exc_info:
            load_schema(path)
        assert exc_info.value.error_code == ErrorCode.INVALID_INPUT

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_schema(path).models == []


class TestDumpSchema:
    """Tests for schema_to_dict and dump_schema."""

    def test_to_dict_keeps_order_and_modifiers(self, sample_schema):
        document = schema_to_dict(sample_schema)
        book = document["models"][0]
        assert [f["name"] for f in book["fields"]][:3] == ["id", "author", "stats"]
        assert book["fields"][2] == {
            "name": "stats",
            "type": "Statistics",
            "optional": True,
            "attributes": ["@graphql.show(read: true)"],
        }
        assert document["enums"] == ["Role"]

    def test_dump_reloads_to_same_document(self, sample_schema):
        text = dump_schema(sample_schema)
        assert schema_to_dict(schema_from_dict(yaml.safe_load(text))) == schema_to_dict(
            sample_schema
        )

    def test_dump_includes_comments(self, sample_schema):
        sample_schema.models[0].fields[0].comments.append("/// @HideField({ output: true })")
        assert "@HideField({ output: true })" in dump_schema(sample_schema)
