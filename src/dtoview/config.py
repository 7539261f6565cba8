"""
Settings for the dtoview package.

Settings are resolved in three layers: built-in defaults, an optional YAML
file, then ``DTOVIEW_*`` environment variables. The resolved settings are
validated by pydantic and cached for the process.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dtoview.enums import JsonOption
from dtoview.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "DTOVIEW_"

_settings: Optional["ViewSettings"] = None


class ViewSettings(BaseModel):
    """
    Immutable settings consumed by the JSON codec and logging helpers.
    """

    model_config = ConfigDict(frozen=True)

    # Flags applied when ``to_json`` is called without explicit options
    json_options: int = Field(default=JsonOption.NONE, ge=0)
    json_indent: int = Field(default=4, ge=0)
    log_level: str = "WARNING"

    @field_validator("json_options", mode="before")
    def parse_json_options(cls, v):
        """Accept flag names as well as integer flag values."""
        if isinstance(v, str):
            if v.strip().isdigit():
                return int(v)
            return int(JsonOption.from_names(v))
        if isinstance(v, (list, tuple)):
            return int(JsonOption.from_names(",".join(str(name) for name in v)))
        return v

    @field_validator("json_options")
    def as_json_option(cls, v: int) -> JsonOption:
        return JsonOption(v)

    @field_validator("log_level")
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is known to the logging module."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level


def _read_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as stream:
            data = yaml.safe_load(stream)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Error loading settings file {path}: {str(e)}")
        raise ConfigurationError(f"Failed to load settings file {path}: {str(e)}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {path} must contain a mapping")

    logger.debug(f"Loaded settings file {path}")
    return data


def _read_env(env: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for field_name in ViewSettings.model_fields:
        key = f"{ENV_PREFIX}{field_name.upper()}"
        if key in env:
            overrides[field_name] = env[key]
    return overrides


def load_settings(path: Union[str, Path, None] = None, env: Optional[Mapping[str, str]] = None) -> ViewSettings:
    """
    Resolve settings from defaults, an optional YAML file and the environment.

    Args:
        path: Optional YAML file holding a mapping of setting names to values
        env: Environment mapping; defaults to ``os.environ``

    Returns:
        Validated settings instance.

    Raises:
        ConfigurationError: If the file cannot be read or a value is invalid.
    """
    values: Dict[str, Any] = {}
    if path is not None:
        values.update(_read_yaml(path))
    values.update(_read_env(os.environ if env is None else env))

    try:
        return ViewSettings(**values)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid dtoview settings: {e}",
            context={"fields": sorted(str(err["loc"][0]) for err in e.errors() if err["loc"])},
        ) from e


def get_settings() -> ViewSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings(settings: Optional[ViewSettings] = None) -> None:
    """Replace the cached settings; ``None`` forces a reload on next access."""
    global _settings
    _settings = settings


__all__ = ["ViewSettings", "load_settings", "get_settings", "reset_settings"]
