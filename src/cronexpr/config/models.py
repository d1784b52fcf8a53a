"""Configuration models using Pydantic."""

from typing import Literal

from pydantic import BaseModel, Field

from cronexpr.scheduler import DEFAULT_HORIZON_YEARS


class SearchConfig(BaseModel):
    """Configuration for run date searches.

    The horizon bounds how far the scheduler scans before giving up on a
    schedule that never fires (e.g. ``0 0 31 2 *``).
    """

    horizon_years: int = Field(default=DEFAULT_HORIZON_YEARS, ge=1, le=100)
    default_count: int = Field(default=5, ge=1)


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


class ConfigError(Exception):
    """Configuration error."""

    pass


class CronConfig(BaseModel):
    """Root configuration model."""

    search: SearchConfig = Field(default_factory=SearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
