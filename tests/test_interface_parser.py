from pathlib import Path

import pytest

from interface_mock.errors import InvalidInterfaceInput
from interface_mock.parser.base import TypeInfo
from interface_mock.parser.interface import (
    FALLBACK_NAME,
    MAX_NESTING_DEPTH,
    parse_interface,
    parse_nested_object,
    parse_type_info,
)

FIXTURES = Path(__file__).parent / "fixtures"

USER = """interface User {
  id: number;
  email: string;
  isActive: boolean;
  tags: string[];
}"""


class TestParseInterface:
    def test_user_interface(self):
        parsed = parse_interface(USER)
        assert parsed.name == "User"
        assert list(parsed.properties) == ["id", "email", "isActive", "tags"]
        assert parsed.properties["id"] == TypeInfo(kind="number")
        assert parsed.properties["email"] == TypeInfo(kind="string", string_format="email")
        assert parsed.properties["isActive"] == TypeInfo(kind="boolean")
        assert parsed.properties["tags"] == TypeInfo(kind="string", is_array=True)

    def test_optional_field(self):
        parsed = parse_interface("interface Profile {\n  bio?: string;\n  age: number;\n}")
        assert parsed.properties["bio"].is_optional is True
        assert parsed.properties["age"].is_optional is False

    def test_fields_without_semicolons(self):
        parsed = parse_interface("interface A {\n  a: string\n  b: number\n}")
        assert set(parsed.properties) == {"a", "b"}

    def test_single_line_interface(self):
        parsed = parse_interface("interface Point { x: number; y: number }")
        assert parsed.name == "Point"
        assert set(parsed.properties) == {"x", "y"}

    def test_brace_on_its_own_line(self):
        parsed = parse_interface("interface Point\n{\n  x: number;\n}")
        assert parsed.name == "Point"
        assert list(parsed.properties) == ["x"]

    def test_strips_comments(self):
        source = """/* header
        comment: string; */
        interface Commented {
          // ignored: number;
          kept: boolean; // trailing note
        }"""
        parsed = parse_interface(source)
        assert parsed.name == "Commented"
        assert list(parsed.properties) == ["kept"]
        assert parsed.properties["kept"].kind == "boolean"

    def test_malformed_line_is_skipped(self):
        parsed = parse_interface("interface A {\n  id: number;\n  foo bar baz\n  ok: boolean;\n}")
        assert list(parsed.properties) == ["id", "ok"]

    def test_missing_interface_keyword_uses_fallback_name(self):
        parsed = parse_interface("type User = {\n  id: number;\n}")
        assert parsed.name == FALLBACK_NAME
        assert "id" in parsed.properties

    def test_empty_source(self):
        parsed = parse_interface("   \n\n")
        assert parsed.name == FALLBACK_NAME
        assert parsed.properties == {}

    def test_export_and_readonly(self):
        parsed = parse_interface("export interface Item {\n  readonly id: string;\n}")
        assert parsed.name == "Item"
        assert list(parsed.properties) == ["id"]

    def test_multiline_nested_object(self):
        parsed = parse_interface((FIXTURES / "order.ts").read_text(encoding="utf-8"))
        assert parsed.name == "Order"
        assert list(parsed.properties) == ["orderId", "createdAt", "note", "customer", "items"]

        customer = parsed.properties["customer"]
        assert customer.kind == "object"
        assert list(customer.properties) == ["fullName", "email", "phone"]
        assert customer.properties["fullName"].string_format == "name"
        assert customer.properties["phone"].is_optional is True

        items = parsed.properties["items"]
        assert items.kind == "object"
        assert items.is_array is True
        assert items.properties["quantity"].kind == "number"

    def test_deeply_nested_objects(self):
        parsed = parse_interface(
            "interface Deep {\n  a: { b: { c: { d: boolean } } };\n}"
        )
        level = parsed.properties["a"]
        for key in ("b", "c"):
            assert level.kind == "object"
            level = level.properties[key]
        assert level.properties["d"].kind == "boolean"

    def test_nesting_beyond_limit_does_not_raise(self):
        levels = 500
        source = "interface Deep {\n  a: " + "{ a: " * levels + "number" + " }" * levels + ";\n}"
        parsed = parse_interface(source)

        info = parsed.properties["a"]
        depth = 0
        while info.properties:
            info = info.properties["a"]
            depth += 1
        assert depth == MAX_NESTING_DEPTH
        assert info.kind == "object"
        assert info.properties == {}

    def test_duplicate_field_keeps_last_definition(self):
        parsed = parse_interface("interface A {\n  x: number;\n  y: string;\n  x: boolean;\n}")
        assert list(parsed.properties) == ["x", "y"]
        assert parsed.properties["x"].kind == "boolean"

    def test_parsing_is_idempotent(self):
        source = (FIXTURES / "order.ts").read_text(encoding="utf-8")
        assert parse_interface(source) == parse_interface(source)

    @pytest.mark.parametrize("value", [None, 42, b"interface A {}", ["interface A {}"]])
    def test_non_string_input_raises(self, value):
        with pytest.raises(InvalidInterfaceInput):
            parse_interface(value)

    def test_non_string_input_is_a_type_error(self):
        with pytest.raises(TypeError):
            parse_interface(None)


class TestParseTypeInfo:
    @pytest.mark.parametrize(
        "expr, kind",
        [
            ("string", "string"),
            ("number", "number"),
            ("boolean", "boolean"),
            ("Date", "date"),
            ("string | null", "string"),
            ("Record<string, number>", "string"),
            ("Status", "string"),
            ("any", "string"),
        ],
    )
    def test_kind_rules(self, expr, kind):
        assert parse_type_info(expr).kind == kind

    def test_array_suffix(self):
        info = parse_type_info("number[];")
        assert info.kind == "number"
        assert info.is_array is True

    def test_lowercase_date_is_not_a_date(self):
        assert parse_type_info("date").kind == "string"

    def test_object_literal(self):
        info = parse_type_info("{ street: string, zip: number }")
        assert info.kind == "object"
        assert list(info.properties) == ["street", "zip"]

    def test_array_of_objects(self):
        info = parse_type_info("{ id: number }[]")
        assert info.kind == "object"
        assert info.is_array is True
        assert info.properties["id"].kind == "number"

    def test_scalar_has_no_properties(self):
        assert parse_type_info("number").properties is None

    def test_format_only_for_strings(self):
        assert parse_type_info("number", field_name="email").string_format is None
        assert parse_type_info("string", field_name="email").string_format == "email"

    def test_unknown_type_still_infers_format(self):
        info = parse_type_info("Status", field_name="statusId")
        assert info.kind == "string"
        assert info.string_format == "uuid"
        assert parse_type_info("Status", field_name="status").string_format is None

    def test_format_from_type_text(self):
        assert parse_type_info("EmailString").string_format == "email"


class TestParseNestedObject:
    def test_without_brace(self):
        assert parse_nested_object("string") == {}

    def test_skips_unmatched_entries(self):
        props = parse_nested_object("{ a: number, garbage, b?: boolean }")
        assert list(props) == ["a", "b"]
        assert props["b"].is_optional is True

    def test_generic_commas_stay_together(self):
        props = parse_nested_object("{ m: Map<string, number>, n: number }")
        assert list(props) == ["m", "n"]
