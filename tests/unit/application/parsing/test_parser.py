# tests/unit/application/parsing/test_parser.py

"""Tests for the strict JSON parser and its error coordinates"""

# Third party imports
from pytest import mark
from pytest import param
from pytest import raises

# Local imports
from json_workbench.application.parsing import MAX_NESTING_DEPTH
from json_workbench.application.parsing import loads
from json_workbench.application.parsing import parse_json
from json_workbench.core.exceptions import JsonSyntaxError


class TestParseValues:
    """Test values produced for valid documents"""

    def test_object_with_nested_values(self):
        """Test a document using every kind of value"""
        result = parse_json('{"a": [1, 2.5, "x"], "b": {"c": null}, "d": true, "e": false}')
        assert result.ok
        assert result.error is None
        assert result.value == {"a": [1, 2.5, "x"], "b": {"c": None}, "d": True, "e": False}

    def test_null_document_is_valid(self):
        """Test that a bare null parses to None without an error"""
        result = parse_json("null")
        assert result.ok
        assert result.value is None

    def test_key_order_preserved(self):
        """Test that object keys keep document order"""
        result = parse_json('{"z": 1, "a": 2, "m": 3}')
        assert list(result.value) == ["z", "a", "m"]

    def test_duplicate_keys_keep_last_value(self):
        """Test that a repeated key keeps its first position and last value"""
        result = parse_json('{"a": 1, "b": 2, "a": 3}')
        assert result.value == {"a": 3, "b": 2}
        assert list(result.value) == ["a", "b"]

    def test_surrounding_whitespace(self):
        """Test that leading and trailing whitespace is accepted"""
        assert parse_json(" \n\t[1]\r\n ").value == [1]

    @mark.parametrize(
        "text,expected,expected_type",
        [
            param("42", 42, int, id="integer"),
            param("-0", 0, int, id="negative-zero"),
            param("2.5", 2.5, float, id="fraction"),
            param("1e2", 100.0, float, id="exponent"),
            param("-1.5E-3", -0.0015, float, id="signed-exponent"),
            param("12345678901234567890", 12345678901234567890.0, float, id="unsafe-integer"),
        ],
    )
    def test_numbers(self, text, expected, expected_type):
        """Test number readings"""
        value = parse_json(text).value
        assert value == expected
        assert type(value) is expected_type

    def test_string_escapes(self):
        """Test simple and unicode escapes"""
        value = parse_json(r'"a\"b\\c\/d\n\té"').value
        assert value == 'a"b\\c/d\n\té'

    def test_surrogate_pair_combined(self):
        """Test that an escaped surrogate pair becomes one character"""
        text = "\"" + "\\" + "ud83d" + "\\" + "ude00" + "\""
        assert parse_json(text).value == "\U0001f600"

    def test_lone_surrogate_kept(self):
        """Test that an unpaired surrogate escape is kept as-is"""
        assert parse_json(r'"\ud83d"').value == "\ud83d"

    def test_nesting_at_limit(self):
        """Test that nesting up to the limit parses"""
        text = "[" * MAX_NESTING_DEPTH + "]" * MAX_NESTING_DEPTH
        assert parse_json(text).ok


class TestParseErrors:
    """Test error messages and coordinates"""

    def test_empty_input(self):
        """Test that empty input reports the end of input"""
        error = parse_json("").error
        assert error.message == "Unexpected end of JSON input"
        assert (error.line, error.column, error.offset) == (1, 1, 0)

    def test_whitespace_only_input(self):
        """Test that whitespace-only input reports the end offset"""
        error = parse_json("   ").error
        assert error.message == "Unexpected end of JSON input"
        assert error.offset == 3
        assert error.column == 4

    def test_missing_colon_on_second_line(self):
        """Test line and column of an error after a newline"""
        error = parse_json('{"a": 1,\n  "b" 2}').error
        assert error.message == "Expected ':' after property name"
        assert error.offset == 15
        assert (error.line, error.column) == (2, 7)

    def test_trailing_comma_in_array(self):
        """Test that a trailing comma is rejected at the closer"""
        error = parse_json("[1, 2,]").error
        assert error.message == "Unexpected token ']'"
        assert error.offset == 6

    def test_unquoted_key(self):
        """Test that bareword keys are rejected"""
        error = parse_json("{a: 1}").error
        assert error.message.startswith("Expected property name")
        assert error.offset == 1

    def test_trailing_garbage(self):
        """Test that text after the value is an error at its offset"""
        error = parse_json('{"a": 1} x').error
        assert error.message == "Unexpected non-whitespace character 'x' after JSON"
        assert error.offset == 9

    def test_unterminated_string(self):
        """Test an unterminated string"""
        error = parse_json('"abc').error
        assert error.message == "Unterminated string"
        assert error.offset == 4

    def test_raw_control_character(self):
        """Test that a raw tab inside a string is rejected"""
        error = parse_json('"a\tb"').error
        assert error.message == "Bad control character in string literal"
        assert error.offset == 2

    def test_bad_escape(self):
        """Test that an unknown escape points at the backslash"""
        error = parse_json(r'"\x"').error
        assert error.message == "Bad escaped character 'x'"
        assert error.offset == 1

    def test_bad_unicode_escape(self):
        """Test that a malformed unicode escape is rejected"""
        error = parse_json(r'"\u12G4"').error
        assert error.message == "Bad Unicode escape"
        assert error.offset == 1

    @mark.parametrize(
        "text,message,offset",
        [
            param("-", "No number after minus sign", 1, id="lone-minus"),
            param("1.", "Unterminated fractional number", 2, id="dangling-dot"),
            param("1e", "Exponent part is missing a number", 2, id="dangling-exponent"),
        ],
    )
    def test_malformed_numbers(self, text, message, offset):
        """Test incomplete numbers"""
        error = parse_json(text).error
        assert error.message == message
        assert error.offset == offset

    def test_truncated_literal(self):
        """Test a literal cut short by the end of input"""
        error = parse_json("tru").error
        assert error.message == "Unexpected end of JSON input"
        assert error.offset == 3

    def test_misspelled_literal(self):
        """Test that the first diverging character is reported"""
        error = parse_json("[trux]").error
        assert error.message == "Unexpected token 'x'"
        assert error.offset == 4

    def test_nesting_beyond_limit(self):
        """Test that excessive nesting is an error, not a crash"""
        depth = MAX_NESTING_DEPTH + 1
        error = parse_json("[" * depth + "]" * depth).error
        assert error.message == f"Nesting depth exceeds {MAX_NESTING_DEPTH} levels"

    def test_error_string_includes_coordinates(self):
        """Test the printable form of a parse error"""
        error = parse_json("[1, 2,]").error
        assert str(error) == "Unexpected token ']' (line 1, column 7)"


class TestParseContract:
    """Test argument handling and the raising variant"""

    def test_non_string_input_raises(self):
        """Test that non-str input is a programmer error"""
        with raises(TypeError):
            parse_json(b"{}")

    def test_loads_returns_value(self):
        """Test the raising variant on valid input"""
        assert loads("[1, 2]") == [1, 2]

    def test_loads_raises_with_offset(self):
        """Test the raising variant on invalid input"""
        with raises(JsonSyntaxError) as exc_info:
            loads("[1,]")
        assert exc_info.value.offset == 3
        assert isinstance(exc_info.value, ValueError)
