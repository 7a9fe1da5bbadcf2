# json_workbench/core/domain/enums.py

"""Domain enumerations for the JSON workbench"""

# Standard library imports
from enum import Enum


class SortDirection(Enum):
    """Direction for key and array sorting"""

    ASC = "asc"
    DESC = "desc"


class SortType(Enum):
    """Comparison requested by the caller when sorting arrays"""

    AUTO = "auto"  # Resolved to NUMBER or STRING by inspecting the values
    STRING = "string"
    NUMBER = "number"
    NATURAL = "natural"  # item2 < item10


class ComparisonStrategy(Enum):
    """Concrete comparison used by the sorter once AUTO has been resolved"""

    STRING = "string"
    NUMBER = "number"
    NATURAL = "natural"


class FilterOperator(Enum):
    """Operators available to filter conditions"""

    EQUALS = "equals"
    NOT_EQUALS = "notEquals"
    CONTAINS = "contains"
    NOT_CONTAINS = "notContains"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    IS_EMPTY = "isEmpty"
    IS_NOT_EMPTY = "isNotEmpty"


# Operators that do not read the condition value
VALUELESS_OPERATORS = frozenset({FilterOperator.IS_EMPTY, FilterOperator.IS_NOT_EMPTY})


class FilterLogic(Enum):
    """How the results of several filter conditions are combined"""

    AND = "and"
    OR = "or"


class DiffType(Enum):
    """Classification of a line in a line diff"""

    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


class TaskKind(Enum):
    """Operations the task dispatcher knows how to run"""

    PARSE = "parse"
    REPAIR = "repair"
    FORMAT = "format"
    COMPACT = "compact"
    SMART_FORMAT = "smart-format"
    SORT_KEYS = "sort-keys"
    VALIDATE = "validate"
    LINE_DIFF = "line-diff"
