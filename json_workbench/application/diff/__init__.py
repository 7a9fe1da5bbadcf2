# json_workbench/application/diff/__init__.py

"""Line diff between two documents"""

# Local imports
from json_workbench.application.diff._line_diff import diff_lines
from json_workbench.application.diff._line_diff import get_diff_summary

__all__ = ["diff_lines", "get_diff_summary"]
