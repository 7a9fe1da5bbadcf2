# json_workbench/infrastructure/config/__init__.py

"""Configuration infrastructure for the JSON workbench.

This module manages configuration loading, validation, and models.
"""

# Local imports
from json_workbench.infrastructure.config._loader import ConfigLoader
from json_workbench.infrastructure.config._loader import get_config
from json_workbench.infrastructure.config._models import AppConfig
from json_workbench.infrastructure.config._models import DispatchConfig
from json_workbench.infrastructure.config._models import FormattingConfig
from json_workbench.infrastructure.config._models import LoggingConfig
from json_workbench.infrastructure.config._models import QueryConfig
from json_workbench.infrastructure.config._models import ValidationConfig

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "DispatchConfig",
    "FormattingConfig",
    "LoggingConfig",
    "QueryConfig",
    "ValidationConfig",
    "get_config",
]
