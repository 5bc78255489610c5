"""
Configuration for the learning progress tracker.
"""

import json
import logging
from typing import Any, Dict, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .core.entities import DEFAULT_ID_LENGTH
from .core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TrackerConfig(BaseModel):
    """Settings of one tracker session."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    log_level: str = "WARNING"
    student_id_length: int = Field(DEFAULT_ID_LENGTH, ge=3, le=32)
    prompt: str = ""

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_config(path: Optional[str] = None, **overrides: Any) -> TrackerConfig:
    """
    Build the configuration from an optional JSON file.

    Keyword overrides that are not None take precedence over file values.
    """
    data: Dict[str, Any] = {}
    if path:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        config = TrackerConfig.model_validate(data)
    except pydantic.ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e}",
            error_code="config",
            details={"errors": e.errors()},
        ) from e

    logger.debug("Loaded configuration %s", config)
    return config
