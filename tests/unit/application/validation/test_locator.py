# tests/unit/application/validation/test_locator.py

"""Tests for mapping JSON Pointers back to source lines"""

# Third party imports
from pytest import mark
from pytest import param

# Local imports
from json_workbench.application.validation import find_path_line
from json_workbench.application.validation._locator import split_pointer


class TestFindPathLine:
    """Test line resolution against a multi-line document"""

    @mark.parametrize(
        "pointer,expected",
        [
            param("", 1, id="empty-root"),
            param("/", 1, id="slash-root"),
            param("/name", 2, id="top-level-key"),
            param("/tags", 3, id="array-key"),
            param("/tags/1", 3, id="inline-array-element"),
            param("/items", 4, id="multi-line-array"),
            param("/items/0", 5, id="first-element"),
            param("/items/1", 6, id="second-element"),
            param("/items/1/label", 6, id="key-inside-element"),
        ],
    )
    def test_resolves(self, sample_document, pointer, expected):
        """Test pointers that resolve"""
        assert find_path_line(sample_document, pointer) == expected

    @mark.parametrize(
        "pointer",
        [
            param("/missing", id="unknown-key"),
            param("/items/5", id="index-out-of-range"),
            param("/name/0", id="index-into-scalar"),
        ],
    )
    def test_unresolved_is_none(self, sample_document, pointer):
        """Test that unresolvable pointers return None rather than raising"""
        assert find_path_line(sample_document, pointer) is None

    def test_root_array(self):
        """Test elements of a top-level array"""
        text = '[\n  "a",\n  {"b": [1, 2]},\n  3\n]'
        assert find_path_line(text, "/0") == 2
        assert find_path_line(text, "/2") == 4

    def test_nested_arrays_not_resolved(self):
        """Test that an index into an array of arrays is left unresolved"""
        text = '{"grid": [\n  [1, 2],\n  [3, 4]\n]}'
        assert find_path_line(text, "/grid/1") == 3
        assert find_path_line(text, "/grid/1/0") is None

    def test_string_contents_ignored(self):
        """Test that brackets and commas inside strings do not shift counting"""
        text = '{"list": [\n  "a, [b]",\n  "c"\n]}'
        assert find_path_line(text, "/list/1") == 3

    def test_key_found_after_parent(self):
        """Test that a key is searched for from its parent onwards"""
        text = '{\n  "id": 0,\n  "child": {\n    "id": 1\n  }\n}'
        assert find_path_line(text, "/id") == 2
        assert find_path_line(text, "/child/id") == 4

    def test_escaped_pointer_segment(self):
        """Test that ~1 and ~0 are unescaped before matching"""
        text = '{\n  "a/b": 1,\n  "c~d": 2\n}'
        assert find_path_line(text, "/a~1b") == 2
        assert find_path_line(text, "/c~0d") == 3


class TestSplitPointer:
    """Test pointer segmentation"""

    def test_split(self):
        """Test unescaping and empty segment removal"""
        assert split_pointer("/a~1b//c~0/0") == ["a/b", "c~", "0"]
