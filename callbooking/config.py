"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.models import DEFAULT_ENABLED_WEEK_DAYS, DEFAULT_END_TIME, DEFAULT_START_TIME, WeeklyAvailability
from .domain.time_conversion import convert_time_string_to_minutes


class AvailabilityConfig(BaseModel):
    """Defaults for the weekly availability form."""
    default_start_time: str = DEFAULT_START_TIME
    default_end_time: str = DEFAULT_END_TIME
    enabled_week_days: List[int] = Field(default_factory=lambda: list(DEFAULT_ENABLED_WEEK_DAYS))
    min_interval_minutes: int = 60

    @field_validator("default_start_time", "default_end_time")
    @classmethod
    def validate_time(cls, value: str) -> str:
        """Validate HH:MM format."""
        convert_time_string_to_minutes(value)
        return value

    @field_validator("enabled_week_days")
    @classmethod
    def validate_week_days(cls, value: List[int]) -> List[int]:
        """Ensure weekdays are in valid range and deduplicated."""
        invalid_days = [day for day in value if day not in range(7)]
        if invalid_days:
            raise ValueError(f"enabled_week_days must be between 0 and 6, got {invalid_days}")
        return sorted(set(value))

    @field_validator("min_interval_minutes")
    @classmethod
    def validate_min_interval(cls, value: int) -> int:
        """Ensure the minimum interval is positive."""
        if value <= 0:
            raise ValueError("min_interval_minutes must be greater than zero")
        return value

    @model_validator(mode="after")
    def validate_window_order(self) -> "AvailabilityConfig":
        """Ensure the default window opens before it closes."""
        start = convert_time_string_to_minutes(self.default_start_time)
        end = convert_time_string_to_minutes(self.default_end_time)
        if end <= start:
            raise ValueError("default_end_time must be later than default_start_time")
        return self

    def build_default_week(self) -> WeeklyAvailability:
        """Initial form state for the availability step."""
        return WeeklyAvailability.default(
            start_time=self.default_start_time,
            end_time=self.default_end_time,
            enabled_week_days=self.enabled_week_days,
        )


class AppConfig(BaseModel):
    """Application configuration."""
    api_base_url: str = "http://localhost:3000/api"
    request_timeout_seconds: float = 30
    locale: str = "pt-br"
    timezone: str = "America/Sao_Paulo"
    log_level: str = "INFO"
    availability: AvailabilityConfig = Field(default_factory=AvailabilityConfig)

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        """Ensure the timeout is positive."""
        if value <= 0:
            raise ValueError("request_timeout_seconds must be greater than zero")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard logging level names only."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

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

    @classmethod
    def load_or_default(cls, config_path: Path | None = None) -> "AppConfig":
        """Load the given or default config file, falling back to built-in defaults."""
        path = config_path or get_default_config_path()
        if config_path is None and not path.exists():
            return cls()
        return cls.load_from_yaml(path)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of callbooking/)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
