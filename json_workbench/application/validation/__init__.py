# json_workbench/application/validation/__init__.py

"""Schema validation and source-location mapping"""

# Local imports
from json_workbench.application.validation._locator import find_path_line
from json_workbench.application.validation._schema_cache import SchemaCache
from json_workbench.application.validation._schema_cache import get_default_schema_cache
from json_workbench.application.validation._validator import format_path
from json_workbench.application.validation._validator import is_valid_schema
from json_workbench.application.validation._validator import parse_and_validate
from json_workbench.application.validation._validator import validate_json_schema

__all__ = [
    "SchemaCache",
    "find_path_line",
    "format_path",
    "get_default_schema_cache",
    "is_valid_schema",
    "parse_and_validate",
    "validate_json_schema",
]
