"""Shared test fixtures and factories."""

from datetime import datetime

import pytest

from cronexpr.config.paths import ENV_VAR, get_cronexpr_home
from cronexpr.parser import parse
from cronexpr.types import Schedule


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point CRONEXPR_HOME at a temp dir and run from an empty cwd."""
    home = tmp_path / "home"
    monkeypatch.setenv(ENV_VAR, str(home))
    monkeypatch.delenv("CRONEXPR_HORIZON_YEARS", raising=False)
    monkeypatch.delenv("CRONEXPR_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
    get_cronexpr_home.cache_clear()
    yield home
    get_cronexpr_home.cache_clear()


@pytest.fixture
def every_minute() -> Schedule:
    return parse("* * * * *")


@pytest.fixture
def reference_date() -> datetime:
    """Saturday, 2016-12-17 00:00:00."""
    return datetime(2016, 12, 17, 0, 0, 0)


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1"})
