# json_workbench/core/domain/__init__.py

"""Core domain models and enumerations"""

# Local imports
from json_workbench.core.domain.enums import ComparisonStrategy
from json_workbench.core.domain.enums import DiffType
from json_workbench.core.domain.enums import FilterLogic
from json_workbench.core.domain.enums import FilterOperator
from json_workbench.core.domain.enums import SortDirection
from json_workbench.core.domain.enums import SortType
from json_workbench.core.domain.enums import TaskKind
from json_workbench.core.domain.filter_condition import FilterCondition
from json_workbench.core.domain.results import DiffSummary
from json_workbench.core.domain.results import LineDiff
from json_workbench.core.domain.results import ParseError
from json_workbench.core.domain.results import ParseResult
from json_workbench.core.domain.results import QueryResult
from json_workbench.core.domain.results import RepairResult
from json_workbench.core.domain.results import SchemaCheckResult
from json_workbench.core.domain.results import SearchMatch
from json_workbench.core.domain.validation_issue import ValidationIssue

__all__ = [
    "ComparisonStrategy",
    "DiffSummary",
    "DiffType",
    "FilterCondition",
    "FilterLogic",
    "FilterOperator",
    "LineDiff",
    "ParseError",
    "ParseResult",
    "QueryResult",
    "RepairResult",
    "SchemaCheckResult",
    "SearchMatch",
    "SortDirection",
    "SortType",
    "TaskKind",
    "ValidationIssue",
]
