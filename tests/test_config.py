"""Tests for configuration loading and models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from cronexpr.config import (
    ConfigError,
    CronConfig,
    LoggingConfig,
    SearchConfig,
    get_default_config,
    load_config,
)
from cronexpr.config.loader import HORIZON_ENV_VAR


class TestSearchConfig:
    def test_defaults(self):
        config = SearchConfig()
        assert config.horizon_years == 5
        assert config.default_count == 5

    def test_horizon_must_be_positive(self):
        with pytest.raises(ValidationError):
            SearchConfig(horizon_years=0)

    def test_horizon_upper_bound(self):
        with pytest.raises(ValidationError):
            SearchConfig(horizon_years=101)

    def test_count_must_be_positive(self):
        with pytest.raises(ValidationError):
            SearchConfig(default_count=0)


class TestLoggingConfig:
    def test_defaults(self):
        assert LoggingConfig().level == "WARNING"

    def test_rejects_unknown_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")


class TestLoadConfig:
    def test_defaults_without_file(self):
        config = load_config()
        assert config == get_default_config()
        assert config == CronConfig()

    def test_explicit_path(self, tmp_path: Path):
        path = tmp_path / "custom.toml"
        path.write_text("[search]\nhorizon_years = 10\n")

        config = load_config(path)
        assert config.search.horizon_years == 10
        assert config.search.default_count == 5

    def test_explicit_path_missing(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_home_config(self, isolated_home: Path):
        isolated_home.mkdir(parents=True)
        (isolated_home / "config.toml").write_text('[logging]\nlevel = "DEBUG"\n')

        assert load_config().logging.level == "DEBUG"

    def test_current_directory_wins(self, tmp_path: Path, isolated_home: Path):
        isolated_home.mkdir(parents=True)
        (isolated_home / "config.toml").write_text("[search]\ndefault_count = 2\n")
        (tmp_path / "cronexpr.toml").write_text("[search]\ndefault_count = 3\n")

        assert load_config().search.default_count == 3

    def test_invalid_toml(self, tmp_path: Path):
        path = tmp_path / "invalid.toml"
        path.write_text("not valid toml [[[")

        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_values(self, tmp_path: Path):
        path = tmp_path / "bad.toml"
        path.write_text("[search]\nhorizon_years = -1\n")

        with pytest.raises(ConfigError):
            load_config(path)

    def test_env_overrides_horizon(self, monkeypatch, tmp_path: Path):
        path = tmp_path / "custom.toml"
        path.write_text("[search]\nhorizon_years = 10\n")
        monkeypatch.setenv(HORIZON_ENV_VAR, "20")

        assert load_config(path).search.horizon_years == 20

    def test_invalid_env_override(self, monkeypatch):
        monkeypatch.setenv(HORIZON_ENV_VAR, "forever")

        with pytest.raises(ConfigError):
            load_config()
