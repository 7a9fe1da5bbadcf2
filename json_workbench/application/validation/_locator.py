# json_workbench/application/validation/_locator.py

"""Map JSON Pointers back to source lines

No positional parse tree is kept, so the resolver re-scans the raw text. Object
keys are found by pattern from the parent key onwards, which can pick the wrong
occurrence when the same key name appears in a nested value before the intended
one.
"""

# Standard library imports
from json import dumps
from re import compile
from re import escape

# Local imports
from json_workbench.shared.utils.text_utils import offset_to_line_column

_WHITESPACE = " \t\n\r"


def split_pointer(pointer: str) -> list[str]:
    """Split a JSON Pointer into unescaped segments, dropping empty ones"""
    return [
        segment.replace("~1", "/").replace("~0", "~")
        for segment in pointer.split("/")
        if segment
    ]


def _encoded_key(key: str) -> str:
    return escape(dumps(key, ensure_ascii=False))


def _locate(text: str, segments: list[str]) -> int | None:
    """Offset where the addressed key or element starts"""
    if not segments:
        return 0
    if segments[-1].isascii() and segments[-1].isdigit():
        return _find_element(text, segments)
    return _find_key(text, segments)


def _find_key(text: str, segments: list[str]) -> int | None:
    parent = _locate(text, segments[:-1])
    if parent is None:
        return None
    pattern = compile(r"(?:^|[{,])\s*(" + _encoded_key(segments[-1]) + r")\s*:")
    match = pattern.search(text, parent)
    return match.start(1) if match else None


def _find_array_open(text: str, segments: list[str]) -> int | None:
    """Offset of the '[' that opens the array holding the final segment"""
    if len(segments) == 1:
        pos = 0
        while pos < len(text) and text[pos] in _WHITESPACE:
            pos += 1
        return pos if text.startswith("[", pos) else None

    parent_key = segments[-2]
    if parent_key.isascii() and parent_key.isdigit():
        # Arrays of arrays are not resolved
        return None
    parent = _locate(text, segments[:-1])
    if parent is None:
        return None
    pattern = compile(_encoded_key(parent_key) + r"\s*:\s*(\[)")
    match = pattern.search(text, parent)
    return match.start(1) if match else None


def _find_element(text: str, segments: list[str]) -> int | None:
    open_pos = _find_array_open(text, segments)
    if open_pos is None:
        return None

    target = int(segments[-1])
    count = 0
    depth = 1
    expecting = True
    in_string = False
    pos = open_pos + 1

    while pos < len(text):
        ch = text[pos]
        if in_string:
            if ch == "\\":
                pos += 2
                continue
            if ch == '"':
                in_string = False
            pos += 1
            continue

        if ch in _WHITESPACE:
            pos += 1
            continue

        if depth == 1 and expecting and ch not in ",]":
            if count == target:
                return pos
            count += 1
            expecting = False

        if ch == '"':
            in_string = True
        elif ch in "[{":
            depth += 1
        elif ch in "]}":
            depth -= 1
            if depth == 0:
                return None
        elif ch == "," and depth == 1:
            expecting = True
        pos += 1

    return None


def find_path_line(text: str, pointer: str) -> int | None:
    """Find the 1-based source line of the value a JSON Pointer addresses

    Args:
        text: Raw document text
        pointer: JSON Pointer such as ``/items/2/name``; ``""`` and ``"/"`` are the root

    Returns:
        Line number, or None when the location cannot be resolved
    """
    if not pointer or pointer == "/":
        return 1
    offset = _locate(text, split_pointer(pointer))
    if offset is None:
        return None
    return offset_to_line_column(text, offset)[0]
