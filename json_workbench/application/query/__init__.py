# json_workbench/application/query/__init__.py

"""Path queries, sorting and filtering over parsed values"""

# Local imports
from json_workbench.application.query._filtering import filter_array
from json_workbench.application.query._filtering import matches_condition
from json_workbench.application.query._path_expression import parse_path_expression
from json_workbench.application.query._query import child_path
from json_workbench.application.query._query import get_all_paths
from json_workbench.application.query._query import query_json_path
from json_workbench.application.query._sorting import get_field_value
from json_workbench.application.query._sorting import resolve_strategy
from json_workbench.application.query._sorting import sort_array
from json_workbench.application.query._sorting import sort_object_keys

__all__ = [
    "child_path",
    "filter_array",
    "get_all_paths",
    "get_field_value",
    "matches_condition",
    "parse_path_expression",
    "query_json_path",
    "resolve_strategy",
    "sort_array",
    "sort_object_keys",
]
