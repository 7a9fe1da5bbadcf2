# json_workbench/core/domain/results.py

"""Call-scoped result records returned by the engine

Plain slotted dataclasses; values inside them are never copied or re-validated.
"""

# Standard library imports
from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING

# Local imports
from json_workbench.core.domain.enums import DiffType
from json_workbench.core.types.json import JSONType

if TYPE_CHECKING:
    # Local imports
    from json_workbench.core.domain.validation_issue import ValidationIssue


@dataclass(slots=True, frozen=True)
class ParseError:
    """Position-accurate description of the first syntax violation"""

    message: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.message} (line {self.line}, column {self.column})"


@dataclass(slots=True, frozen=True)
class ParseResult:
    """Outcome of a parse

    Validity is tracked by ``error`` alone: a document consisting of the
    ``null`` literal parses to ``value=None`` with no error.
    """

    value: JSONType = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True, frozen=True)
class RepairResult:
    """Outcome of a repair attempt"""

    output: str
    error: str | None = None
    was_repaired: bool = False


@dataclass(slots=True, frozen=True)
class QueryResult:
    """One match of a path expression"""

    path: str
    value: JSONType


@dataclass(slots=True, frozen=True)
class SchemaCheckResult:
    """Combined parse + validate outcome"""

    value: JSONType = None
    parse_error: ParseError | None = None
    issues: list["ValidationIssue"] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return self.parse_error is None and not self.issues


@dataclass(slots=True, frozen=True)
class SearchMatch:
    """A find hit with 1-based line/column coordinates"""

    start: int
    end: int
    line: int
    column: int


@dataclass(slots=True, frozen=True)
class LineDiff:
    """One line of a line diff"""

    line_number: int
    type: DiffType
    content: str


@dataclass(slots=True, frozen=True)
class DiffSummary:
    """Counts of changed lines in a line diff"""

    added: int = 0
    removed: int = 0
    changed: int = 0

    @property
    def total(self) -> int:
        return self.added + self.removed + self.changed
