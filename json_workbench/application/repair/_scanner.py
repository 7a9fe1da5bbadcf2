# json_workbench/application/repair/_scanner.py

"""String-literal aware scanning helpers for the repair passes

Every repair rewrite must leave the contents of string literals alone, so the
passes work on the text split into (is_string, chunk) segments.
"""

# Standard library imports
from typing import Callable

_CLOSERS = {"{": "}", "[": "]"}
_OPENERS = {"}": "{", "]": "["}


def split_segments(text: str, quotes: str = '"') -> list[tuple[bool, str]]:
    """Split text into string-literal and structural segments

    Args:
        text: Text to split
        quotes: Characters that open a string literal

    Returns:
        List of (is_string, chunk) pairs that concatenate back to ``text``.
        An unterminated literal runs to the end of the text.
    """
    segments: list[tuple[bool, str]] = []
    pos = 0
    length = len(text)
    chunk_start = 0

    while pos < length:
        ch = text[pos]
        if ch not in quotes:
            pos += 1
            continue

        if pos > chunk_start:
            segments.append((False, text[chunk_start:pos]))
        quote = ch
        end = pos + 1
        while end < length and text[end] != quote:
            end += 2 if text[end] == "\\" else 1
        end = min(end + 1, length)
        segments.append((True, text[pos:end]))
        pos = chunk_start = end

    if chunk_start < length:
        segments.append((False, text[chunk_start:]))
    return segments


def map_structural(text: str, transform: Callable[[str], str]) -> str:
    """Apply ``transform`` to everything outside string literals"""
    return "".join(
        chunk if is_string else transform(chunk) for is_string, chunk in split_segments(text)
    )


def balance_brackets(text: str) -> tuple[str, bool]:
    """Close what was left open and drop closers that match nothing

    Args:
        text: Text whose strings are already double-quoted

    Returns:
        Tuple of (balanced text, whether anything changed)
    """
    output: list[str] = []
    stack: list[str] = []
    changed = False
    in_string = False
    escaped = False

    for ch in text:
        if in_string:
            output.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch in _CLOSERS:
            stack.append(ch)
        elif ch in _OPENERS:
            opener = _OPENERS[ch]
            if opener not in stack:
                # Stray closer
                changed = True
                continue
            while stack[-1] != opener:
                output.append(_CLOSERS[stack.pop()])
                changed = True
            stack.pop()
        output.append(ch)

    if in_string:
        if escaped:
            output.pop()
        output.append('"')
        changed = True

    if stack:
        changed = True
        tail = "".join(output).rstrip()
        if tail.endswith(":"):
            tail += " null"
        elif tail.endswith(","):
            tail = tail[:-1]
        output = [tail]
        output.extend(_CLOSERS[opener] for opener in reversed(stack))

    return "".join(output), changed


def has_unbalanced_brackets(text: str) -> bool:
    """Cheap check for unterminated strings or unmatched brackets"""
    depth = 0
    in_string = False
    escaped = False
    for ch in text:
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch in _CLOSERS:
            depth += 1
        elif ch in _OPENERS:
            depth -= 1
            if depth < 0:
                return True
    return in_string or depth != 0
