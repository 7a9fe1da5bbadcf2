# json_workbench/adapters/cli/__init__.py

"""CLI adapter for the JSON workbench"""

# Local imports
from json_workbench.adapters.cli.main import main
from json_workbench.adapters.cli.parser import create_argument_parser

__all__ = ["create_argument_parser", "main"]
