"""Tests for CepWeatherSettings environment loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cep_weather import CepWeatherSettings


class TestCepWeatherSettings:
    """Tests for settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("WEATHER_API_KEY", raising=False)

        settings = CepWeatherSettings(_env_file=None)

        assert settings.weather_api_key == ""
        assert settings.location_url_template == "https://viacep.com.br/ws/{cep}/json/"
        assert "{key}" in settings.weather_url_template
        assert "{q}" in settings.weather_url_template
        assert settings.http_timeout_seconds == 10.0
        assert settings.port == 8080

    def test_api_key_from_unprefixed_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """API key is read from WEATHER_API_KEY."""
        monkeypatch.setenv("WEATHER_API_KEY", "env-key")

        assert CepWeatherSettings(_env_file=None).weather_api_key == "env-key"

    def test_prefixed_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CEP_WEATHER_HTTP_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("CEP_WEATHER_PORT", "9000")
        monkeypatch.setenv("CEP_WEATHER_LOCATION_URL_TEMPLATE", "http://cep.local/{cep}")

        settings = CepWeatherSettings(_env_file=None)

        assert settings.http_timeout_seconds == 2.5
        assert settings.port == 9000
        assert settings.location_url_template == "http://cep.local/{cep}"

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValidationError):
            CepWeatherSettings(_env_file=None, http_timeout_seconds=0)

    def test_rejects_out_of_range_port(self) -> None:
        with pytest.raises(ValidationError):
            CepWeatherSettings(_env_file=None, port=70000)

    def test_log_level_is_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CEP_WEATHER_LOG_LEVEL", "debug")

        assert CepWeatherSettings(_env_file=None).log_level == "DEBUG"

    def test_rejects_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unknown level names fail validation instead of at logging setup."""
        monkeypatch.setenv("CEP_WEATHER_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            CepWeatherSettings(_env_file=None)
