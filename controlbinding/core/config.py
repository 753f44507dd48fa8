from typing import Optional
import json
import os
from pydantic import BaseModel, field_validator
from loguru import logger

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class BindingSettings(BaseModel):
    """Knobs shared by the controller, the binding contexts and logging."""
    meta_prefix: str = "binding_"
    context_property: str = "bindingDataSource"
    default_mode: str = "OneWay"
    log_level: str = "INFO"

    @field_validator("meta_prefix", "context_property")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return level


def load_settings(filepath: Optional[str] = None) -> BindingSettings:
    """
    Load binding settings from a JSON or TOML file.

    A missing path or file gives the defaults. An unreadable or invalid
    file is logged and also gives the defaults.
    """
    if not filepath or not os.path.isfile(filepath):
        return BindingSettings()
    try:
        if filepath.endswith('.toml'):
            import tomllib
            with open(filepath, "rb") as f:
                raw = tomllib.load(f)
        else:
            with open(filepath, "r", encoding="utf-8") as f:
                raw = json.load(f)
        return BindingSettings.model_validate(raw)
    except Exception as e:
        logger.error(f"Failed to load binding settings from {filepath}: {e}")
        return BindingSettings()
