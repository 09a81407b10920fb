"""
Global Configuration and Defaults.

Holds the fixed limits of the reader and the optional settings file used by
the command line tool.
"""

import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.errors import ConfigError

logger = logging.getLogger(__name__)

# --- Safety Limits ---
# Files larger than this are rejected by the reader (not configurable)
MAX_SIZE = 1 * 1024 * 1024  # 1 MiB

# --- Environment ---
# Forces "windows" or "posix" path semantics regardless of the host
PLATFORM_ENV_VAR = "DOCURI_PLATFORM"

DEFAULT_CONFIG_PATH = Path(".docuri/config.yaml")


class Settings(BaseModel):
    """
    User settings for the docuri CLI.

    Loaded from ``.docuri/config.yaml`` when present. Every field is optional.
    """

    log_level: str = "INFO"
    platform: Literal["auto", "posix", "windows"] = "auto"
    max_workers: Optional[int] = Field(default=None, gt=0)

    model_config = ConfigDict(frozen=True, extra="ignore")


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        config_path: File to read. Defaults to ``.docuri/config.yaml``.

    Returns:
        Settings: Parsed settings, or defaults if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not valid.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        logger.debug(f"No settings file at {path}, using defaults")
        return Settings()

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Can't read settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e
