"""Process configuration.

Values come from the environment (prefix ``CEP_WEATHER_``) or a local
``.env`` file, are validated once at startup, and are then passed down
explicitly. The weather API key keeps its historical unprefixed name,
``WEATHER_API_KEY``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .http import DEFAULT_TIMEOUT_SECONDS
from .resolvers import DEFAULT_LOCATION_URL_TEMPLATE, DEFAULT_WEATHER_URL_TEMPLATE

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CepWeatherSettings(BaseSettings):
    """Settings for the lookup service."""

    model_config = SettingsConfigDict(
        env_prefix="CEP_WEATHER_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    weather_api_key: str = Field(
        default="",
        validation_alias="WEATHER_API_KEY",
        description="WeatherAPI key substituted into the weather URL.",
    )
    location_url_template: str = Field(
        default=DEFAULT_LOCATION_URL_TEMPLATE,
        min_length=1,
        description="Postal code directory URL with a {cep} placeholder.",
    )
    weather_url_template: str = Field(
        default=DEFAULT_WEATHER_URL_TEMPLATE,
        min_length=1,
        description="Current conditions URL with {key} and {q} placeholders.",
    )
    http_timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Total timeout per upstream request (seconds).",
    )
    host: str = Field(default="0.0.0.0", min_length=1)
    port: int = Field(default=8080, ge=1, le=65535)
    log_level: LogLevel = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value
