# json_workbench/application/search/__init__.py

"""Text search over raw documents"""

# Local imports
from json_workbench.application.search._find import find_matches

__all__ = ["find_matches"]
