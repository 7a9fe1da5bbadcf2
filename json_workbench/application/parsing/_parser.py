# json_workbench/application/parsing/_parser.py

"""Recursive descent JSON parser with exact error coordinates

Errors carry the offset, line and column of the first violation, with
messages phrased for people editing documents by hand.
"""

# Standard library imports
from logging import getLogger
from re import compile

# Local imports
from json_workbench.core.domain.results import ParseError
from json_workbench.core.domain.results import ParseResult
from json_workbench.core.exceptions import JsonSyntaxError
from json_workbench.core.types.json import JSONDict
from json_workbench.core.types.json import JSONList
from json_workbench.core.types.json import JSONType
from json_workbench.shared.utils.text_utils import offset_to_line_column

logger = getLogger(__name__)

MAX_NESTING_DEPTH = 256
# Largest integer a double represents exactly (Number.MAX_SAFE_INTEGER)
MAX_SAFE_INTEGER = 2**53 - 1

WHITESPACE = " \t\n\r"
_NUMBER_PATTERN = compile(r"-?(?:0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?")
_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}
_LITERALS: dict[str, tuple[str, JSONType]] = {
    "t": ("true", True),
    "f": ("false", False),
    "n": ("null", None),
}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _describe(ch: str) -> str:
    if ch in "\n\r\t":
        return repr(ch)
    return f"'{ch}'"


class _Parser:
    """Single-use parser over one text"""

    __slots__ = ("text", "pos", "depth")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.depth = 0

    def fail(self, message: str, offset: int | None = None) -> JsonSyntaxError:
        return JsonSyntaxError(message, self.pos if offset is None else offset)

    def unexpected(self) -> JsonSyntaxError:
        if self.pos >= len(self.text):
            return self.fail("Unexpected end of JSON input")
        return self.fail(f"Unexpected token {_describe(self.text[self.pos])}")

    def skip_whitespace(self) -> None:
        text = self.text
        pos = self.pos
        while pos < len(text) and text[pos] in WHITESPACE:
            pos += 1
        self.pos = pos

    def parse_document(self) -> JSONType:
        self.skip_whitespace()
        value = self.parse_value()
        self.skip_whitespace()
        if self.pos < len(self.text):
            raise self.fail(
                f"Unexpected non-whitespace character {_describe(self.text[self.pos])} after JSON"
            )
        return value

    def parse_value(self) -> JSONType:
        if self.pos >= len(self.text):
            raise self.unexpected()
        ch = self.text[self.pos]
        if ch == "{":
            return self.parse_object()
        if ch == "[":
            return self.parse_array()
        if ch == '"':
            return self.parse_string()
        if ch in "-0123456789":
            return self.parse_number()
        if ch in _LITERALS:
            return self.parse_literal()
        raise self.unexpected()

    def enter(self) -> None:
        self.depth += 1
        if self.depth > MAX_NESTING_DEPTH:
            raise self.fail(f"Nesting depth exceeds {MAX_NESTING_DEPTH} levels")

    def parse_object(self) -> JSONDict:
        self.enter()
        self.pos += 1  # consume {
        result: JSONDict = {}
        self.skip_whitespace()
        if self.pos < len(self.text) and self.text[self.pos] == "}":
            self.pos += 1
            self.depth -= 1
            return result

        while True:
            self.skip_whitespace()
            if self.pos >= len(self.text):
                raise self.unexpected()
            if self.text[self.pos] != '"':
                raise self.fail(
                    f"Expected property name or '}}', got {_describe(self.text[self.pos])}"
                )
            key = self.parse_string()
            self.skip_whitespace()
            if self.pos >= len(self.text):
                raise self.unexpected()
            if self.text[self.pos] != ":":
                raise self.fail("Expected ':' after property name")
            self.pos += 1
            self.skip_whitespace()
            # Duplicate keys keep their first position with the last value
            result[key] = self.parse_value()
            self.skip_whitespace()
            if self.pos >= len(self.text):
                raise self.unexpected()
            ch = self.text[self.pos]
            if ch == ",":
                self.pos += 1
                continue
            if ch == "}":
                self.pos += 1
                self.depth -= 1
                return result
            raise self.fail("Expected ',' or '}' after property value")

    def parse_array(self) -> JSONList:
        self.enter()
        self.pos += 1  # consume [
        result: JSONList = []
        self.skip_whitespace()
        if self.pos < len(self.text) and self.text[self.pos] == "]":
            self.pos += 1
            self.depth -= 1
            return result

        while True:
            self.skip_whitespace()
            result.append(self.parse_value())
            self.skip_whitespace()
            if self.pos >= len(self.text):
                raise self.unexpected()
            ch = self.text[self.pos]
            if ch == ",":
                self.pos += 1
                continue
            if ch == "]":
                self.pos += 1
                self.depth -= 1
                return result
            raise self.fail("Expected ',' or ']' after array element")

    def parse_string(self) -> str:
        text = self.text
        self.pos += 1  # consume opening quote
        chunks: list[str] = []
        run_start = self.pos

        while True:
            if self.pos >= len(text):
                raise self.fail("Unterminated string")
            ch = text[self.pos]
            if ch == '"':
                chunks.append(text[run_start : self.pos])
                self.pos += 1
                return "".join(chunks)
            if ch == "\\":
                chunks.append(text[run_start : self.pos])
                chunks.append(self.parse_escape())
                run_start = self.pos
                continue
            if ch < " ":
                raise self.fail("Bad control character in string literal")
            self.pos += 1

    def parse_escape(self) -> str:
        text = self.text
        escape_start = self.pos
        self.pos += 1  # consume backslash
        if self.pos >= len(text):
            raise self.fail("Unterminated string")
        ch = text[self.pos]
        if ch in _SIMPLE_ESCAPES:
            self.pos += 1
            return _SIMPLE_ESCAPES[ch]
        if ch != "u":
            raise self.fail(f"Bad escaped character {_describe(ch)}", escape_start)

        code = self.read_hex4()
        # Combine a surrogate pair; lone surrogates are kept as-is
        if 0xD800 <= code <= 0xDBFF and text.startswith("\\u", self.pos):
            saved = self.pos
            self.pos += 1
            low = self.read_hex4()
            if 0xDC00 <= low <= 0xDFFF:
                return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))
            self.pos = saved
        return chr(code)

    def read_hex4(self) -> int:
        # self.pos sits on the 'u'
        digits = self.text[self.pos + 1 : self.pos + 5]
        if len(digits) < 4 or any(d not in _HEX_DIGITS for d in digits):
            raise self.fail("Bad Unicode escape", self.pos - 1)
        self.pos += 5
        return int(digits, 16)

    def parse_number(self) -> int | float:
        start = self.pos
        match = _NUMBER_PATTERN.match(self.text, start)
        if match is None:
            raise self.fail("No number after minus sign", start + 1)
        end = match.end()
        # Dangling '.' or exponent marker right after the matched prefix
        if end < len(self.text):
            follower = self.text[end]
            if follower == "." and match.group(1) is None and match.group(2) is None:
                raise self.fail("Unterminated fractional number", end + 1)
            if follower in "eE" and match.group(2) is None:
                raise self.fail("Exponent part is missing a number", end + 1)
        lexeme = match.group(0)
        self.pos = end
        if match.group(1) is None and match.group(2) is None:
            number = int(lexeme)
            if abs(number) <= MAX_SAFE_INTEGER:
                return number
        return float(lexeme)

    def parse_literal(self) -> JSONType:
        word, value = _LITERALS[self.text[self.pos]]
        if not self.text.startswith(word, self.pos):
            # Point at the first character that diverges from the literal
            offset = self.pos
            while offset < len(self.text) and offset - self.pos < len(word):
                if self.text[offset] != word[offset - self.pos]:
                    break
                offset += 1
            if offset >= len(self.text):
                raise self.fail("Unexpected end of JSON input", offset)
            raise self.fail(f"Unexpected token {_describe(self.text[offset])}", offset)
        self.pos += len(word)
        return value


def parse_json(text: str) -> ParseResult:
    """Parse JSON text into a value or a position-accurate error

    Parsing stops at the first violation; no recovery is attempted.

    Args:
        text: Raw document text

    Returns:
        ParseResult with either ``value`` or ``error`` populated

    Raises:
        TypeError: If ``text`` is not a string
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_json expects str, got {type(text).__name__}")

    try:
        value = _Parser(text).parse_document()
    except JsonSyntaxError as e:
        line, column = offset_to_line_column(text, e.offset)
        error = ParseError(message=e.message, line=line, column=column, offset=e.offset)
        logger.debug(f"Parse failed: {error}")
        return ParseResult(error=error)

    return ParseResult(value=value)


def loads(text: str) -> JSONType:
    """Parse JSON text, raising on the first violation

    Raises:
        JsonSyntaxError: With the failing offset attached
    """
    return _Parser(text).parse_document()
