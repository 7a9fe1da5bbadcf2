# tests/unit/shared/utils/test_text_utils.py

"""Tests for text position, collation and natural-order helpers"""

# Third party imports
from hypothesis import given
from hypothesis import strategies as st
from pytest import mark
from pytest import param

# Local imports
from json_workbench.shared.utils import collation_key
from json_workbench.shared.utils import is_identifier
from json_workbench.shared.utils import natural_key
from json_workbench.shared.utils import offset_to_line_column


class TestOffsetToLineColumn:
    """Test offset conversion"""

    @mark.parametrize(
        "offset,expected",
        [
            param(0, (1, 1), id="start"),
            param(2, (1, 3), id="first-line"),
            param(3, (1, 4), id="at-newline"),
            param(4, (2, 1), id="second-line-start"),
            param(6, (2, 3), id="end"),
            param(99, (2, 3), id="clamped-high"),
            param(-5, (1, 1), id="clamped-low"),
        ],
    )
    def test_positions(self, offset, expected):
        """Test 1-based line and column numbers"""
        assert offset_to_line_column("abc\nde", offset) == expected

    @given(st.text(alphabet="ab\n", max_size=30), st.data())
    def test_line_counts_newlines(self, text, data):
        """Test that the line is one plus the newlines before the offset"""
        offset = data.draw(st.integers(min_value=0, max_value=len(text)))
        line, column = offset_to_line_column(text, offset)
        assert line == text[:offset].count("\n") + 1
        assert column >= 1


class TestCollationKey:
    """Test locale-style ordering"""

    def test_accent_and_case_insensitive(self):
        """Test that accents and case are secondary"""
        assert sorted(["b", "Á", "a", "B"], key=collation_key) == ["a", "Á", "B", "b"]

    def test_ties_broken_by_code_point(self):
        """Test that distinct strings never compare equal"""
        assert collation_key("e") != collation_key("é")
        assert collation_key("e")[0] == collation_key("é")[0]


class TestNaturalKey:
    """Test natural ordering"""

    def test_numeric_runs_by_value(self):
        """Test that item2 sorts before item10"""
        assert sorted(["item10", "item2", "item1"], key=natural_key) == ["item1", "item2", "item10"]

    def test_leading_number(self):
        """Test that numbers compare by value and text runs sort first"""
        assert sorted(["10a", "9b", "b"], key=natural_key) == ["b", "9b", "10a"]

    def test_mixed_runs_do_not_raise(self):
        """Test that text and number runs in the same position compare"""
        assert sorted(["a1", "1a"], key=natural_key) == ["a1", "1a"]


class TestIsIdentifier:
    """Test dot-notation eligibility"""

    @mark.parametrize(
        "key,expected",
        [
            param("name", True),
            param("_private", True),
            param("$ref", True),
            param("a1", True),
            param("1a", False),
            param("odd key", False),
            param("", False),
            param("a-b", False),
        ],
    )
    def test_is_identifier(self, key, expected):
        """Test which keys can be written with dots"""
        assert is_identifier(key) is expected
