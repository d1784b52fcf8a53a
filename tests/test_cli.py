"""Tests for CLI commands."""

from cronexpr.cli.app import app


class TestCheckCommand:
    def test_valid_expression(self, cli_runner):
        result = cli_runner.invoke(app, ["check", "*/15 9-17 * * MON-FRI"])

        assert result.exit_code == 0
        assert "Valid: */15 9-17 * * 1-5" in result.stdout
        assert "day_of_week" in result.stdout

    def test_invalid_expression(self, cli_runner):
        result = cli_runner.invoke(app, ["check", "60 * * * *"])

        assert result.exit_code == 1
        assert "Invalid expression" in result.stdout


class TestMatchCommand:
    def test_match(self, cli_runner):
        result = cli_runner.invoke(
            app, ["match", "*/2 * * * *", "--at", "2016-12-17T00:02:00"]
        )

        assert result.exit_code == 0
        assert "matches" in result.stdout

    def test_no_match(self, cli_runner):
        result = cli_runner.invoke(
            app, ["match", "*/7 * * * *", "--at", "2016-12-17T00:06:00"]
        )

        assert result.exit_code == 1
        assert "does not match" in result.stdout

    def test_invalid_timestamp(self, cli_runner):
        result = cli_runner.invoke(app, ["match", "* * * * *", "--at", "yesterday"])

        assert result.exit_code == 1
        assert "Invalid timestamp" in result.stdout


class TestRunCommands:
    def test_next(self, cli_runner):
        result = cli_runner.invoke(
            app, ["next", "* * * * *", "--from", "2016-12-17T00:00:00", "-n", "3"]
        )

        assert result.exit_code == 0
        assert "2016-12-17 00:00:00" in result.stdout
        assert "2016-12-17 00:02:00" in result.stdout
        assert "2016-12-17 00:03:00" not in result.stdout

    def test_previous(self, cli_runner):
        result = cli_runner.invoke(
            app, ["previous", "* * * * *", "--from", "2016-12-17T00:00:00", "-n", "3"]
        )

        assert result.exit_code == 0
        assert "2016-12-16 23:58:00" in result.stdout

    def test_default_count_from_config(self, cli_runner, tmp_path):
        (tmp_path / "cronexpr.toml").write_text("[search]\ndefault_count = 2\n")

        result = cli_runner.invoke(
            app, ["next", "0 * * * *", "--from", "2016-12-17T00:00:00"]
        )

        assert result.exit_code == 0
        assert "2016-12-17 01:00:00" in result.stdout
        assert "2016-12-17 02:00:00" not in result.stdout

    def test_impossible_schedule(self, cli_runner):
        result = cli_runner.invoke(
            app, ["next", "0 0 31 2 *", "--from", "2016-12-17T00:00:00"]
        )

        assert result.exit_code == 1
        assert "No forward match" in result.stdout

    def test_invalid_expression(self, cli_runner):
        result = cli_runner.invoke(app, ["next", "* * * *"])

        assert result.exit_code == 1
        assert "Invalid expression" in result.stdout

    def test_missing_config_file(self, cli_runner, tmp_path):
        result = cli_runner.invoke(
            app, ["next", "* * * * *", "--config", str(tmp_path / "missing.toml")]
        )

        assert result.exit_code == 1
        assert "not found" in result.stdout


class TestConfigCommand:
    def test_paths(self, cli_runner):
        result = cli_runner.invoke(app, ["config", "paths"])

        assert result.exit_code == 0
        assert "config.toml" in result.stdout

    def test_validate(self, cli_runner, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[search]\nhorizon_years = 7\n")

        result = cli_runner.invoke(app, ["config", "validate", "--path", str(path)])

        assert result.exit_code == 0
        assert "valid" in result.stdout.lower()

    def test_validate_invalid(self, cli_runner, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[search]\nhorizon_years = 0\n")

        result = cli_runner.invoke(app, ["config", "validate", "--path", str(path)])

        assert result.exit_code == 1
        assert "validation failed" in result.stdout.lower()

    def test_show_missing(self, cli_runner, tmp_path):
        result = cli_runner.invoke(
            app, ["config", "show", "--path", str(tmp_path / "missing.toml")]
        )

        assert result.exit_code == 1
        assert "not found" in result.stdout

    def test_unknown_action(self, cli_runner):
        result = cli_runner.invoke(app, ["config", "unknown"])

        assert result.exit_code == 1
        assert "Unknown action" in result.stdout
