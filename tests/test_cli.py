"""Tests for the skycast command line."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from click.testing import CliRunner

from skycast import cli
from skycast.controller import QueryController


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
    monkeypatch.delenv("WEATHER_API_KEY", raising=False)
    return CliRunner()


class TestCli:
    def test_missing_key_exits_with_error(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli.main, ["city", "Paris"])

        assert result.exit_code == 1
        assert "API key is missing" in result.output

    def test_city_success_prints_report(self, runner, monkeypatch, current_conditions, point_factory):
        client = MagicMock()
        client.has_credential = True
        client.fetch_current = AsyncMock(return_value=current_conditions)
        client.fetch_forecast_series = AsyncMock(
            return_value=[point_factory("2024-05-01 12:00:00")]
        )
        monkeypatch.setattr(
            cli, "create_controller", lambda env, config: QueryController(client)
        )

        result = runner.invoke(cli.main, ["city", "Paris"])

        assert result.exit_code == 0
        assert "Loading weather data..." in result.output
        assert "Paris, FR" in result.output
        assert "1-Day Forecast:" in result.output

    def test_missing_config_file(self, runner, tmp_path):
        result = runner.invoke(
            cli.main, ["--config", str(tmp_path / "missing.yaml"), "city", "Paris"]
        )

        assert result.exit_code != 0
        assert "Config file not found" in result.output
