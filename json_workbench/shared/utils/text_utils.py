# json_workbench/shared/utils/text_utils.py

"""Text utilities shared by the parser, the sorters and the find engine"""

# Standard library imports
from functools import lru_cache
from re import compile
from unicodedata import combining
from unicodedata import normalize

_NATURAL_RUN_PATTERN = compile(r"(\d+)")
_IDENTIFIER_PATTERN = compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def offset_to_line_column(text: str, offset: int) -> tuple[int, int]:
    """Convert a character offset into 1-based line and column numbers

    The line is one plus the number of newlines before ``offset``; the column
    is one plus the number of characters since the last of those newlines.

    Args:
        text: Source text
        offset: Character offset, clamped to the text bounds

    Returns:
        Tuple of (line, column)
    """
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    last_newline = text.rfind("\n", 0, offset)
    column = offset - last_newline
    return line, column


@lru_cache(maxsize=4096)
def collation_key(value: str) -> tuple[str, str]:
    """Locale-style sort key: accent- and case-insensitive, code points break ties

    Example:
        sorted(["b", "Á", "a"], key=collation_key) == ["a", "Á", "b"]
    """
    decomposed = normalize("NFKD", value)
    primary = "".join(ch for ch in decomposed if not combining(ch)).casefold()
    return primary, value


def natural_key(value: str) -> tuple[tuple[int, int | str], ...]:
    """Split text into alternating alphabetic and numeric runs

    Numeric runs compare by value so "item2" sorts before "item10". Runs are
    tagged so a text run is never compared with a numeric one.
    """
    parts: list[tuple[int, int | str]] = []
    for index, run in enumerate(_NATURAL_RUN_PATTERN.split(value)):
        if index % 2:
            parts.append((1, int(run)))
        elif run:
            parts.append((0, collation_key(run)[0]))
    return tuple(parts)


def is_identifier(key: str) -> bool:
    """Whether a key can be written with dot notation in a path"""
    return bool(_IDENTIFIER_PATTERN.match(key))
