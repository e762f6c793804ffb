"""Configuration management for slatecheck using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from slatecheck.constants import CONFIG_FILENAME, DEFAULT_MAX_DEPTH, MAX_DEPTH_CEILING


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class ValidatorConfig(BaseModel):
    """Validator configuration section."""
    max_depth: int = Field(alias="maxDepth", default=DEFAULT_MAX_DEPTH)
    strict_dimensions: bool = Field(alias="strictDimensions", default=True)
    recurse_list_items: bool = Field(alias="recurseListItems", default=True)

    @field_validator("max_depth")
    @classmethod
    def validate_max_depth(cls, v):
        if v < 1:
            raise ValueError("max_depth must be >= 1")
        if v > MAX_DEPTH_CEILING:
            raise ValueError(f"max_depth must be <= {MAX_DEPTH_CEILING} to stay within the recursion limit")
        return v

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.INFO

    model_config = ConfigDict(use_enum_values=True)


class SlatecheckConfig(BaseModel):
    """Complete slatecheck configuration model."""
    validator: ValidatorConfig = Field(default_factory=ValidatorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> SlatecheckConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .slatecheck.json

    Returns:
        SlatecheckConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return SlatecheckConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
    else:
        return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .slatecheck.json configuration file by searching up directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILENAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> SlatecheckConfig:
    """Create default configuration."""
    return SlatecheckConfig()
