"""Configuration loading from TOML files and environment variables."""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from cronexpr.config.models import ConfigError, CronConfig
from cronexpr.config.paths import get_config_path

logger = logging.getLogger(__name__)

HORIZON_ENV_VAR = "CRONEXPR_HORIZON_YEARS"


def _get_default_config_paths() -> list[Path]:
    """Get ordered list of default config file locations."""
    return [
        Path("cronexpr.toml"),  # Current directory
        get_config_path(),  # ~/.cronexpr/config.toml (or CRONEXPR_HOME)
    ]


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides to raw config data."""
    if horizon := os.environ.get(HORIZON_ENV_VAR):
        section = config.setdefault("search", {})
        section["horizon_years"] = horizon
    return config


def load_config(path: Path | None = None) -> CronConfig:
    """Load configuration from a TOML file.

    Args:
        path: Explicit path to config file. If None, searches default
            locations and falls back to defaults when none exists.

    Returns:
        Validated CronConfig instance.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        ConfigError: If the config file is not valid TOML or fails validation.
    """
    config_path: Path | None = None

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for default_path in _get_default_config_paths():
            expanded = default_path.expanduser()
            if expanded.exists():
                config_path = expanded
                break

    raw_config: dict[str, Any] = {}
    if config_path is not None:
        try:
            with config_path.open("rb") as f:
                raw_config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
        logger.debug("config_loaded", extra={"config.path": str(config_path)})

    raw_config = _apply_env_overrides(raw_config)

    try:
        return CronConfig.model_validate(raw_config)
    except ValidationError as e:
        source = config_path or "environment"
        raise ConfigError(f"Invalid configuration ({source}): {e}") from e


def get_default_config() -> CronConfig:
    """Get a default configuration."""
    return CronConfig()
