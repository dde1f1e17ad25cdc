"""Postal code to temperature lookup pipeline.

The pipeline runs Validating -> ResolvingLocation -> ResolvingTemperature ->
Composed and stops at the first failure. ``WeatherLookup.respond`` is the
single place where outcomes are mapped to HTTP status codes and bodies.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import aiohttp

from .domain import FailureOutcome, WeatherResult, compose
from .http import CepWeatherHttpClient
from .resolvers import LocationResolver, TemperatureResolver
from .settings import CepWeatherSettings
from .validation import validate_postal_code

_LOGGER = logging.getLogger(__name__)

UPSTREAM_FAILURE_MESSAGE = "failed to fetch weather"

_FAILURE_RESPONSES: dict[FailureOutcome, tuple[int, dict[str, Any] | str]] = {
    FailureOutcome.INVALID_INPUT: (422, {"message": "invalid zipcode"}),
    FailureOutcome.LOCATION_NOT_FOUND: (404, {"message": "can not find zipcode"}),
    FailureOutcome.UPSTREAM_FAILURE: (500, UPSTREAM_FAILURE_MESSAGE),
}


@dataclass(frozen=True)
class LookupResponse:
    """Status code and body for the HTTP layer.

    A dict body is sent as JSON, a str body as plain text.
    """

    status: int
    body: dict[str, Any] | str

    @classmethod
    def from_outcome(cls, outcome: WeatherResult | FailureOutcome) -> LookupResponse:
        if isinstance(outcome, WeatherResult):
            return cls(200, outcome.to_dict())
        status, body = _FAILURE_RESPONSES[outcome]
        return cls(status, dict(body) if isinstance(body, dict) else body)


class WeatherLookup:
    """Answer "what is the temperature at this CEP?".

    Usage:
        lookup = WeatherLookup.from_settings(session, settings)
        response = await lookup.respond("01310100")
    """

    def __init__(
        self,
        location_resolver: LocationResolver,
        temperature_resolver: TemperatureResolver,
    ) -> None:
        self._location_resolver = location_resolver
        self._temperature_resolver = temperature_resolver

    @classmethod
    def from_settings(
        cls,
        session: aiohttp.ClientSession,
        settings: CepWeatherSettings,
    ) -> WeatherLookup:
        """Build the pipeline over a caller-owned session."""
        client = CepWeatherHttpClient(session, timeout=settings.http_timeout_seconds)
        return cls(
            LocationResolver(client, url_template=settings.location_url_template),
            TemperatureResolver(
                client,
                settings.weather_api_key,
                url_template=settings.weather_url_template,
            ),
        )

    async def lookup(
        self,
        raw_code: str | None,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> WeatherResult | FailureOutcome:
        """Run the pipeline for ``raw_code``.

        Args:
            raw_code: Postal code exactly as the client sent it.
            cancel_event: Optional abort signal for the upstream requests.

        Returns:
            The composed ``WeatherResult``, or the ``FailureOutcome`` of the
            first stage that failed.
        """
        code = validate_postal_code(raw_code)
        if code is FailureOutcome.INVALID_INPUT:
            _LOGGER.info("Rejected invalid postal code %r", raw_code)
            return code

        locality = await self._location_resolver.resolve(
            code, cancel_event=cancel_event
        )
        if locality is FailureOutcome.LOCATION_NOT_FOUND:
            _LOGGER.info("[%s] Postal code not found", code)
            return locality
        if locality is FailureOutcome.UPSTREAM_FAILURE:
            _LOGGER.warning("[%s] Location lookup failed", code)
            return locality

        reading = await self._temperature_resolver.resolve(
            locality, cancel_event=cancel_event
        )
        if reading is FailureOutcome.UPSTREAM_FAILURE:
            _LOGGER.warning("[%s] Temperature lookup failed for %s", code, locality)
            return reading

        result = compose(reading)
        _LOGGER.debug("[%s] %s: %s C", code, locality, result.temp_c)
        return result

    async def respond(
        self,
        raw_code: str | None,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> LookupResponse:
        """Run the pipeline and map the outcome to a ``LookupResponse``."""
        outcome = await self.lookup(raw_code, cancel_event=cancel_event)
        return LookupResponse.from_outcome(outcome)
