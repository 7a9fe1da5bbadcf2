# json_workbench/infrastructure/logging/__init__.py

"""Logging infrastructure for the JSON workbench.

This module provides centralized logging configuration and console diagnostics.
"""

# Local imports
from json_workbench.infrastructure.logging._console import DiagnosticConsole
from json_workbench.infrastructure.logging._setup import get_default_log_path
from json_workbench.infrastructure.logging._setup import log_run_summary
from json_workbench.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["DiagnosticConsole", "setup_logging", "get_default_log_path", "log_run_summary"]
