# json_workbench/adapters/api/__init__.py

"""API module for the JSON workbench

This module provides the high-level facade over the engine components.
"""

# Local imports
from json_workbench.adapters.api._workbench import JsonWorkbench

__all__ = ["JsonWorkbench"]
