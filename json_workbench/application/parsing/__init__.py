# json_workbench/application/parsing/__init__.py

"""Tokenizer/parser: text to value or a precise error"""

# Local imports
from json_workbench.application.parsing._parser import MAX_NESTING_DEPTH
from json_workbench.application.parsing._parser import loads
from json_workbench.application.parsing._parser import parse_json

__all__ = ["MAX_NESTING_DEPTH", "loads", "parse_json"]
