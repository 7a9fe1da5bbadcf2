# json_workbench/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from json import load
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

# Local imports
from json_workbench.core.types.json import JSONDict

logger = getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "json_workbench.json"


class FormattingConfig(BaseModel):
    """Formatting configuration"""

    indent: int | str = Field(2, description="Spaces per level, or 'tab'")
    max_line_length: int = Field(80, gt=0, description="Line budget for smart formatting")
    preserve_templates: bool = Field(True, description="Protect template syntax while formatting")
    auto_repair: bool = Field(True, description="Repair malformed input before formatting")

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: int | str) -> int | str:
        """Accept 0-10 spaces or 'tab'"""
        if isinstance(v, str) and v != "tab":
            raise ValueError(f"indent must be a number of spaces or 'tab', got {v!r}")
        if isinstance(v, int) and not 0 <= v <= 10:
            raise ValueError(f"indent {v} is outside the range 0-10")
        return v


class ValidationConfig(BaseModel):
    """Schema validation configuration"""

    cache_size: int = Field(64, ge=1, description="Compiled schemas kept in memory")


class QueryConfig(BaseModel):
    """Query, sort and filter configuration"""

    case_sensitive_filters: bool = Field(
        False, description="Whether text filter operators respect letter case"
    )


class DispatchConfig(BaseModel):
    """Background task dispatch configuration"""

    enabled: bool = Field(True, description="Offload heavy tasks to worker processes")
    timeout_seconds: float = Field(30.0, gt=0, description="Seconds to wait for a worker")
    max_workers: int | None = Field(None, ge=1, description="Number of worker processes")

    @field_validator("max_workers")
    @classmethod
    def validate_workers(cls, v: int | None) -> int | None:
        """Ensure max_workers is reasonable"""
        if v is not None and v > 64:
            raise ValueError("max_workers should not exceed 64")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root application configuration model"""

    formatting: FormattingConfig = Field(default_factory=FormattingConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    dispatch: DispatchConfig = Field(default_factory=DispatchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated AppConfig instance
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)

        # If no path provided, try the default file in the current directory
        if config_path is None:
            config_path = Path(DEFAULT_CONFIG_FILENAME)
            if not config_path.exists():
                return cls()

        if not config_path.exists():
            logger.warning(f"Config file {config_path} not found. Using defaults.")
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = load(f)
            return cls.model_validate(data)
        except Exception as e:
            logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
            return cls()

    def to_dict(self) -> JSONDict:
        """Convert to dictionary"""
        return self.model_dump()
