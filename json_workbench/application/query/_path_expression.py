# json_workbench/application/query/_path_expression.py

"""Parser for the supported JSONPath subset

Supported syntax::

    $                 root (optional)
    .key  ['key']     child by name
    [0]  [-1]         child by index, negative counts from the end
    .*  [*]           every child
    [0,2]  ['a','b']  union
    [1:5:2]           slice
    ..key  ..*        recursive descent
"""

# Standard library imports
from dataclasses import dataclass
from re import compile

# Local imports
from json_workbench.core.exceptions import QueryExpressionError

_NAME_PATTERN = compile(r"[^.\[\]'\"\s]+")
_INTEGER_PATTERN = compile(r"-?\d+")


@dataclass(slots=True, frozen=True)
class NameSelector:
    name: str


@dataclass(slots=True, frozen=True)
class IndexSelector:
    index: int


@dataclass(slots=True, frozen=True)
class WildcardSelector:
    pass


@dataclass(slots=True, frozen=True)
class SliceSelector:
    start: int | None = None
    stop: int | None = None
    step: int | None = None


type Selector = NameSelector | IndexSelector | WildcardSelector | SliceSelector


@dataclass(slots=True, frozen=True)
class Segment:
    """One step of a path: selectors applied to the current or all descendant nodes"""

    selectors: tuple[Selector, ...]
    descendant: bool = False


class _ExpressionParser:
    __slots__ = ("expression", "pos")

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.pos = 0

    def error(self, reason: str) -> QueryExpressionError:
        return QueryExpressionError(self.expression, reason, self.pos)

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.expression[index] if index < len(self.expression) else ""

    def skip_spaces(self) -> None:
        while self.peek() in (" ", "\t"):
            self.pos += 1

    def parse(self) -> tuple[Segment, ...]:
        segments: list[Segment] = []
        if self.peek() == "$":
            self.pos += 1
        elif self.peek() not in (".", "["):
            # Bare leading name, as in "store.book"
            segments.append(Segment((self.read_dotted(),)))

        while self.pos < len(self.expression):
            if self.expression.startswith("..", self.pos):
                self.pos += 2
                if self.peek() == "[":
                    segments.append(Segment(self.read_brackets(), descendant=True))
                else:
                    segments.append(Segment((self.read_dotted(),), descendant=True))
            elif self.peek() == ".":
                self.pos += 1
                segments.append(Segment((self.read_dotted(),)))
            elif self.peek() == "[":
                segments.append(Segment(self.read_brackets()))
            else:
                raise self.error(f"unexpected character {self.peek()!r}")
        return tuple(segments)

    def read_dotted(self) -> Selector:
        if self.peek() == "*":
            self.pos += 1
            return WildcardSelector()
        return NameSelector(self.read_name())

    def read_name(self) -> str:
        match = _NAME_PATTERN.match(self.expression, self.pos)
        if match is None:
            raise self.error("expected a property name")
        self.pos = match.end()
        return match.group(0)

    def read_brackets(self) -> tuple[Selector, ...]:
        self.pos += 1  # consume [
        selectors: list[Selector] = []
        while True:
            self.skip_spaces()
            selectors.append(self.read_bracket_selector())
            self.skip_spaces()
            ch = self.peek()
            if ch == ",":
                self.pos += 1
                continue
            if ch == "]":
                self.pos += 1
                return tuple(selectors)
            if not ch:
                raise self.error("unclosed bracket")
            raise self.error(f"expected ',' or ']', got {ch!r}")

    def read_bracket_selector(self) -> Selector:
        ch = self.peek()
        if ch in ("'", '"'):
            return NameSelector(self.read_quoted())
        if ch == "*":
            self.pos += 1
            return WildcardSelector()

        start = self.read_optional_integer()
        self.skip_spaces()
        if self.peek() != ":":
            if start is None:
                raise self.error("expected an index, a quoted name, a slice or '*'")
            return IndexSelector(start)

        self.pos += 1
        self.skip_spaces()
        stop = self.read_optional_integer()
        step = None
        self.skip_spaces()
        if self.peek() == ":":
            self.pos += 1
            self.skip_spaces()
            step = self.read_optional_integer()
        return SliceSelector(start, stop, step)

    def read_optional_integer(self) -> int | None:
        match = _INTEGER_PATTERN.match(self.expression, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return int(match.group(0))

    def read_quoted(self) -> str:
        quote = self.peek()
        self.pos += 1
        chars: list[str] = []
        while True:
            ch = self.peek()
            if not ch:
                raise self.error("unterminated quoted name")
            self.pos += 1
            if ch == quote:
                return "".join(chars)
            if ch == "\\":
                escaped = self.peek()
                if not escaped:
                    raise self.error("unterminated quoted name")
                self.pos += 1
                chars.append(escaped)
                continue
            chars.append(ch)


def parse_path_expression(expression: str) -> tuple[Segment, ...]:
    """Parse a path expression into segments

    An empty expression, like ``$``, addresses the root.

    Raises:
        QueryExpressionError: If the expression is malformed
    """
    if not isinstance(expression, str):
        raise TypeError(f"expression must be str, got {type(expression).__name__}")
    stripped = expression.strip()
    if not stripped:
        return ()
    return _ExpressionParser(stripped).parse()
