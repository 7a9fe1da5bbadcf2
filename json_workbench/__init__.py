# json_workbench/__init__.py

"""JSON Workbench Package

A JSON authoring toolchain: a diagnostics-grade parser, a best-effort repair
engine, a template-aware formatter, a schema validator with source-line
mapping, and a path query, sort and filter engine.
"""

# Local imports
# High-level API
from json_workbench.adapters.api import JsonWorkbench

# Engine functions
from json_workbench.application.diff import diff_lines
from json_workbench.application.diff import get_diff_summary
from json_workbench.application.formatting import compact_json
from json_workbench.application.formatting import format_json
from json_workbench.application.formatting import has_template_syntax
from json_workbench.application.formatting import serialize_json
from json_workbench.application.formatting import smart_format_json
from json_workbench.application.formatting import sort_json_keys
from json_workbench.application.parsing import parse_json
from json_workbench.application.query import filter_array
from json_workbench.application.query import get_all_paths
from json_workbench.application.query import query_json_path
from json_workbench.application.query import sort_array
from json_workbench.application.query import sort_object_keys
from json_workbench.application.repair import can_repair_json
from json_workbench.application.repair import repair_json
from json_workbench.application.search import find_matches
from json_workbench.application.validation import SchemaCache
from json_workbench.application.validation import find_path_line
from json_workbench.application.validation import format_path
from json_workbench.application.validation import is_valid_schema
from json_workbench.application.validation import parse_and_validate
from json_workbench.application.validation import validate_json_schema

# Data models
from json_workbench.core.domain import DiffSummary
from json_workbench.core.domain import DiffType
from json_workbench.core.domain import FilterCondition
from json_workbench.core.domain import FilterLogic
from json_workbench.core.domain import FilterOperator
from json_workbench.core.domain import LineDiff
from json_workbench.core.domain import ParseError
from json_workbench.core.domain import ParseResult
from json_workbench.core.domain import QueryResult
from json_workbench.core.domain import RepairResult
from json_workbench.core.domain import SchemaCheckResult
from json_workbench.core.domain import SearchMatch
from json_workbench.core.domain import SortDirection
from json_workbench.core.domain import SortType
from json_workbench.core.domain import ValidationIssue
from json_workbench.core.exceptions import JsonWorkbenchError
from json_workbench.core.exceptions import QueryExpressionError
from json_workbench.core.exceptions import SchemaCompileError

# For users who want lower-level control
from json_workbench.infrastructure.config import ConfigLoader
from json_workbench.infrastructure.dispatch import TaskDispatcher
from json_workbench.infrastructure.dispatch import TaskRequest
from json_workbench.infrastructure.dispatch import TaskResponse
from json_workbench.infrastructure.dispatch import run_task_sync

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Primary API
    "JsonWorkbench",
    # Parsing and repair
    "parse_json",
    "repair_json",
    "can_repair_json",
    # Formatting
    "format_json",
    "compact_json",
    "smart_format_json",
    "sort_json_keys",
    "serialize_json",
    "has_template_syntax",
    # Validation
    "SchemaCache",
    "validate_json_schema",
    "is_valid_schema",
    "parse_and_validate",
    "format_path",
    "find_path_line",
    # Query and transform
    "query_json_path",
    "get_all_paths",
    "sort_array",
    "sort_object_keys",
    "filter_array",
    # Editor helpers
    "find_matches",
    "diff_lines",
    "get_diff_summary",
    # Data models
    "ParseError",
    "ParseResult",
    "RepairResult",
    "QueryResult",
    "SchemaCheckResult",
    "SearchMatch",
    "LineDiff",
    "DiffSummary",
    "DiffType",
    "ValidationIssue",
    "FilterCondition",
    "FilterLogic",
    "FilterOperator",
    "SortDirection",
    "SortType",
    # Errors
    "JsonWorkbenchError",
    "QueryExpressionError",
    "SchemaCompileError",
    # Advanced usage
    "ConfigLoader",
    "TaskDispatcher",
    "TaskRequest",
    "TaskResponse",
    "run_task_sync",
    # Version
    "__version__",
]
