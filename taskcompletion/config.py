"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.hour_parser import format_twelve_hour, parse_twelve_hour
from .domain.models import LeaveSet, WorkWindow

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DefaultsConfig(BaseModel):
    """Default values used when the command line leaves them out."""
    working_hour_start: str = "09 AM"
    working_hour_end: str = "05 PM"
    required_hours: Optional[int] = None

    @field_validator("working_hour_start", "working_hour_end")
    @classmethod
    def validate_twelve_hour(cls, value: str) -> str:
        """Validate and normalise an "HH AM/PM" string."""
        result = parse_twelve_hour(value)
        if not result.ok:
            raise ValueError(result.error)
        return format_twelve_hour(result.hour)

    @field_validator("required_hours")
    @classmethod
    def validate_required_hours(cls, value: Optional[int]) -> Optional[int]:
        """Ensure the default duration is not negative."""
        if value is not None and value < 0:
            raise ValueError("required_hours must not be negative")
        return value

    @model_validator(mode="after")
    def validate_window(self) -> "DefaultsConfig":
        """Ensure the configured window does not cover the whole day."""
        if self.working_hour_start == self.working_hour_end:
            raise ValueError("working_hour_start and working_hour_end cannot be the same")
        return self

    def get_working_window(self) -> WorkWindow:
        """Get the configured window as a WorkWindow."""
        return WorkWindow(
            start_hour=parse_twelve_hour(self.working_hour_start).hour,
            end_hour=parse_twelve_hour(self.working_hour_end).hour
        )


class AppConfig(BaseModel):
    """Application configuration."""
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    leaves: List[date] = Field(default_factory=list)
    log_level: str = "WARNING"

    @field_validator("leaves")
    @classmethod
    def validate_leaves(cls, value: List[date]) -> List[date]:
        """Deduplicate leave days and keep them in calendar order."""
        return sorted(set(value))

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Ensure the log level is one the logging module knows."""
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value}")
        return level

    def get_log_level(self) -> int:
        """Get the numeric logging level."""
        return getattr(logging, self.log_level)

    def leave_set(self) -> LeaveSet:
        """Get the configured leave days as a LeaveSet."""
        return LeaveSet.from_dates(self.leaves)

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path


def load_config(config_file: Optional[Path] = None) -> AppConfig:
    """
    Load the explicit config file, or the default one if it exists.

    Without an explicit file and without a default config.yaml the built-in
    defaults are used.
    """
    if config_file is not None:
        return AppConfig.load_from_yaml(config_file)

    config_path = get_default_config_path()
    if not config_path.exists():
        return AppConfig()
    return AppConfig.load_from_yaml(config_path)
