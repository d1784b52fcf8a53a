"""Configuration module."""

from cronexpr.config.loader import get_default_config, load_config
from cronexpr.config.models import (
    ConfigError,
    CronConfig,
    LoggingConfig,
    SearchConfig,
)
from cronexpr.config.paths import get_config_path, get_cronexpr_home

__all__ = [
    "ConfigError",
    "CronConfig",
    "LoggingConfig",
    "SearchConfig",
    "get_config_path",
    "get_cronexpr_home",
    "get_default_config",
    "load_config",
]
