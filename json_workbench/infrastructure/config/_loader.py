# json_workbench/infrastructure/config/_loader.py

"""Main configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger
from pathlib import Path

# Local imports
from json_workbench.core.types.json import JSONDict
from json_workbench.infrastructure.config._models import AppConfig
from json_workbench.infrastructure.config._models import DispatchConfig
from json_workbench.infrastructure.config._models import FormattingConfig
from json_workbench.infrastructure.config._models import LoggingConfig
from json_workbench.infrastructure.config._models import QueryConfig
from json_workbench.infrastructure.config._models import ValidationConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration loader exposing each configuration section"""

    def __init__(self, config_path: Path | str | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
        """
        self.config_path = config_path
        self._app_config = AppConfig.load(config_path)

    @classmethod
    def from_config(cls, app_config: AppConfig) -> "ConfigLoader":
        """Wrap an already built configuration"""
        loader = cls.__new__(cls)
        loader.config_path = None
        loader._app_config = app_config
        return loader

    @property
    def app_config(self) -> AppConfig:
        """The validated configuration model"""
        return self._app_config

    @property
    def config(self) -> JSONDict:
        """Full config as dict"""
        return self._app_config.model_dump()

    @property
    def formatting(self) -> FormattingConfig:
        """Formatting configuration"""
        return self._app_config.formatting

    @property
    def validation(self) -> ValidationConfig:
        """Schema validation configuration"""
        return self._app_config.validation

    @property
    def query(self) -> QueryConfig:
        """Query configuration"""
        return self._app_config.query

    @property
    def dispatch(self) -> DispatchConfig:
        """Task dispatch configuration"""
        return self._app_config.dispatch

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: Path | str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config
