# tests/unit/application/formatting/test_serializer.py

"""Tests for value serialization, indentation and smart layout"""

# Third party imports
from pytest import mark
from pytest import param
from pytest import raises

# Local imports
from json_workbench.application.formatting import resolve_indent
from json_workbench.application.formatting import serialize_json
from json_workbench.application.formatting import smart_serialize


class TestResolveIndent:
    """Test indent option handling"""

    @mark.parametrize(
        "indent,expected",
        [
            param(None, "", id="none"),
            param(0, "", id="zero"),
            param(-3, "", id="negative"),
            param(2, "  ", id="two"),
            param(25, " " * 10, id="clamped"),
            param("tab", "\t", id="tab"),
            param("--", "--", id="literal"),
        ],
    )
    def test_resolves(self, indent, expected):
        """Test the indentation unit for each option"""
        assert resolve_indent(indent) == expected

    @mark.parametrize("indent", [True, 1.5, [2]])
    def test_rejects(self, indent):
        """Test that other types are a programmer error"""
        with raises(TypeError):
            resolve_indent(indent)


class TestSerializeJson:
    """Test plain serialization"""

    def test_pretty(self):
        """Test indented output layout"""
        assert serialize_json({"a": 1, "b": [1, 2]}, 2) == (
            '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ]\n}'
        )

    def test_compact(self):
        """Test that no indent gives the minified form"""
        assert serialize_json({"a": 1, "b": [True, None]}) == '{"a":1,"b":[true,null]}'

    def test_empty_containers_stay_inline(self):
        """Test empty arrays and objects"""
        assert serialize_json({"a": [], "b": {}}, 2) == '{\n  "a": [],\n  "b": {}\n}'

    def test_tab_indent(self):
        """Test tab indentation"""
        assert serialize_json([1], "tab") == "[\n\t1\n]"

    def test_key_order_preserved(self):
        """Test that keys are written in insertion order"""
        assert serialize_json({"z": 1, "a": 2}) == '{"z":1,"a":2}'

    @mark.parametrize(
        "value,expected",
        [
            param(1.0, "1", id="integral-float"),
            param(-0.0, "0", id="negative-zero"),
            param(2.5, "2.5", id="fraction"),
            param(1e21, "1e+21", id="large-exponent"),
            param(1e-7, "1e-7", id="small-exponent"),
            param(1e-6, "0.000001", id="small-decimal"),
            param(1.5e-5, "0.000015", id="small-fraction"),
            param(float("nan"), "null", id="nan"),
            param(float("inf"), "null", id="infinity"),
            param(12345678901234567890, "12345678901234567890", id="big-int"),
        ],
    )
    def test_numbers(self, value, expected):
        """Test number rendering"""
        assert serialize_json(value) == expected

    def test_unicode_kept(self):
        """Test that non-ASCII text is written as is"""
        assert serialize_json({"name": "café"}) == '{"name":"café"}'

    def test_lone_surrogate_escaped(self):
        """Test that unpaired surrogates are written as escapes"""
        assert serialize_json(chr(0xD800)) == '"\\ud800"'

    def test_escapes(self):
        """Test control characters and quotes"""
        assert serialize_json('a"b\n') == '"a\\"b\\n"'

    def test_unsupported_type(self):
        """Test that non-JSON values raise"""
        with raises(TypeError):
            serialize_json({"a": {1, 2}})


class TestSmartSerialize:
    """Test width-driven layout"""

    def test_small_value_inline(self):
        """Test that short structures stay on one line"""
        assert smart_serialize({"a": 1, "b": [1, 2]}) == '{ "a": 1, "b": [1, 2] }'

    def test_expands_when_too_long(self):
        """Test that only the level that does not fit expands"""
        long_text = "x" * 80
        assert smart_serialize({"a": [1, 2], "long": long_text}) == (
            '{\n  "a": [1, 2],\n  "long": "' + long_text + '"\n}'
        )

    def test_trailing_comma_counts(self):
        """Test that the comma after an inlined member counts toward the width"""
        # '  "k": [1, 2]' is 13 characters; with the comma it is 14
        value = {"k": [1, 2], "z": 0}
        assert smart_serialize(value, 2, 13) == '{\n  "k": [\n    1,\n    2\n  ],\n  "z": 0\n}'
        assert smart_serialize(value, 2, 14) == '{\n  "k": [1, 2],\n  "z": 0\n}'

    def test_empty_containers(self):
        """Test that empty structures render compactly"""
        assert smart_serialize({"a": [], "b": {}}, 2, 5) == '{\n  "a": [],\n  "b": {}\n}'

    def test_scalar(self):
        """Test that scalars render as plain JSON"""
        assert smart_serialize("text") == '"text"'

    def test_zero_indent_is_compact(self):
        """Test that an indent of 0 gives the same compact text as serialize_json"""
        value = {"a": [1, 2], "b": {"c": "x" * 90}}
        assert smart_serialize(value, 0) == serialize_json(value, 0)
        assert "\n" not in smart_serialize(value, 0, 10)
