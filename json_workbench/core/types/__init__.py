# json_workbench/core/types/__init__.py

"""Shared type definitions"""

# Local imports
from json_workbench.core.types.json import JSONDict
from json_workbench.core.types.json import JSONList
from json_workbench.core.types.json import JSONPrimitive
from json_workbench.core.types.json import JSONType

__all__ = ["JSONDict", "JSONList", "JSONPrimitive", "JSONType"]
