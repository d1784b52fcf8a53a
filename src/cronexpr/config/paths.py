"""Centralized path management for cronexpr.

The base directory can be overridden with the CRONEXPR_HOME environment
variable.

Default locations:
- Linux/macOS: ~/.cronexpr
- Windows: %USERPROFILE%\\.cronexpr
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "CRONEXPR_HOME"


@lru_cache(maxsize=1)
def get_cronexpr_home() -> Path:
    """Get the base directory for cronexpr settings.

    Resolution order:
    1. CRONEXPR_HOME environment variable (if set)
    2. Platform default (~/.cronexpr)
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()

    return Path.home() / ".cronexpr"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_cronexpr_home() / "config.toml"


def get_all_paths() -> dict[str, Path]:
    """Get all standard paths for display."""
    return {
        "home": get_cronexpr_home(),
        "config": get_config_path(),
    }
