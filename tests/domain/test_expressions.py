"""Tests for Go-style type expression parsing."""

import pytest

from routedoc.domain.errors import TypeExpressionError
from routedoc.domain.expressions import parse_type_expression
from routedoc.domain.types import (
    ArrayType,
    InterfaceType,
    MapType,
    PointerType,
    PrimitiveType,
    StructType,
)


class TestLeaves:
    @pytest.mark.parametrize("name", ["int", "string", "int64", "float64", "bool", "byte"])
    def test_builtin_is_primitive(self, name: str) -> None:
        assert parse_type_expression(name) == PrimitiveType(name=name)

    def test_other_identifier_is_struct_reference(self) -> None:
        result = parse_type_expression("User")
        assert isinstance(result, StructType)
        assert result.name == "User"
        assert result.fields == ()

    def test_qualified_identifier(self) -> None:
        assert parse_type_expression("time.Time") == StructType(name="time.Time")

    def test_interface_forms(self) -> None:
        assert parse_type_expression("interface{}") == InterfaceType()
        assert parse_type_expression("any") == InterfaceType(name="any")

    def test_surrounding_whitespace_ignored(self) -> None:
        assert parse_type_expression("  int ") == PrimitiveType(name="int")


class TestComposites:
    def test_pointer(self) -> None:
        result = parse_type_expression("*User")
        assert isinstance(result, PointerType)
        assert result.target == StructType(name="User")
        assert result.name == "*User"

    def test_array(self) -> None:
        result = parse_type_expression("[]User")
        assert isinstance(result, ArrayType)
        assert result.name == "[]User"

    def test_fixed_length_array(self) -> None:
        result = parse_type_expression("[4]byte")
        assert isinstance(result, ArrayType)
        assert result.element == PrimitiveType(name="byte")
        assert result.length == 4
        assert result.name == "[4]byte"

    def test_slice_has_no_length(self) -> None:
        result = parse_type_expression("[]byte")
        assert isinstance(result, ArrayType)
        assert result.length is None

    @pytest.mark.parametrize("expr", ["[32]byte", "map[string][2]*User", "*[0]int", "[3][]string"])
    def test_name_keeps_expression_as_written(self, expr: str) -> None:
        assert parse_type_expression(expr).name == expr

    def test_map_of_pointer_slice(self) -> None:
        result = parse_type_expression("map[string][]*User")
        assert isinstance(result, MapType)
        assert result.key == PrimitiveType(name="string")
        assert isinstance(result.value, ArrayType)
        assert isinstance(result.value.element, PointerType)
        assert result.name == "map[string][]*User"

    def test_pointer_to_pointer(self) -> None:
        result = parse_type_expression("**User")
        assert isinstance(result, PointerType)
        assert isinstance(result.target, PointerType)
        assert result.name == "**User"


class TestErrors:
    @pytest.mark.parametrize("expr", ["", "   ", "map[string", "[x]int", "User]", "*", "9abc"])
    def test_malformed(self, expr: str) -> None:
        with pytest.raises(TypeExpressionError):
            parse_type_expression(expr)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="invalid type expression"):
            parse_type_expression("map[")
