"""Resolvers for the two upstream lookups.

``LocationResolver`` turns a CEP into a locality name through ViaCEP and
``TemperatureResolver`` turns that name into a Celsius reading through
WeatherAPI. Both return their negative outcomes as ``FailureOutcome``
members instead of raising, so callers must handle each kind explicitly.
Neither resolver logs or retries; that is left to the caller.
"""

from __future__ import annotations

import asyncio
import math
from typing import Any
from urllib.parse import quote_plus

from .domain import (
    FailureOutcome,
    Locality,
    LocationNotFound,
    PostalCode,
    UpstreamFailure,
)
from .errors import CepWeatherClientError
from .http import CepWeatherHttpClient

DEFAULT_LOCATION_URL_TEMPLATE = "https://viacep.com.br/ws/{cep}/json/"
DEFAULT_WEATHER_URL_TEMPLATE = (
    "http://api.weatherapi.com/v1/current.json?key={key}&q={q}&lang=pt"
)


# ViaCEP reports unknown codes with "erro": true; older deployments sent "true"
def _is_not_found_flag(flag: Any) -> bool:
    return flag is True or flag == "true"


class LocationResolver:
    """Resolve a postal code to a locality name."""

    def __init__(
        self,
        client: CepWeatherHttpClient,
        *,
        url_template: str = DEFAULT_LOCATION_URL_TEMPLATE,
    ) -> None:
        self._client = client
        self._url_template = url_template

    def _url(self, code: PostalCode) -> str:
        return self._url_template.format(cep=code.value)

    async def resolve(
        self,
        code: PostalCode,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> Locality | LocationNotFound | UpstreamFailure:
        """Look up the locality for ``code``.

        The not-found flag and an empty locality are business results and
        map to LOCATION_NOT_FOUND whatever the HTTP status was. Transport
        errors and bodies of the wrong shape map to UPSTREAM_FAILURE.

        The locality is returned exactly as received.
        """
        try:
            data = await self._client.get_json(
                self._url(code), cancel_event=cancel_event
            )
        except CepWeatherClientError:
            return FailureOutcome.UPSTREAM_FAILURE

        if not isinstance(data, dict):
            return FailureOutcome.UPSTREAM_FAILURE

        locality = data.get("localidade")
        if locality is not None and not isinstance(locality, str):
            return FailureOutcome.UPSTREAM_FAILURE

        if _is_not_found_flag(data.get("erro")) or not locality:
            return FailureOutcome.LOCATION_NOT_FOUND
        return locality


class TemperatureResolver:
    """Resolve a locality name to its current temperature in Celsius.

    The API key is configuration passed in here; this class never reads the
    process environment.
    """

    def __init__(
        self,
        client: CepWeatherHttpClient,
        api_key: str,
        *,
        url_template: str = DEFAULT_WEATHER_URL_TEMPLATE,
    ) -> None:
        self._client = client
        self._api_key = api_key
        self._url_template = url_template

    def _url(self, locality: Locality) -> str:
        return self._url_template.format(key=self._api_key, q=quote_plus(locality))

    async def resolve(
        self,
        locality: Locality,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> float | UpstreamFailure:
        """Fetch the current Celsius reading for ``locality``.

        The upstream status code is not inspected. A well-formed body that
        lacks ``current`` or ``temp_c`` (WeatherAPI's reply to a rejected
        key, for instance) reads as 0.0 rather than a failure.
        """
        try:
            data = await self._client.get_json(
                self._url(locality), cancel_event=cancel_event
            )
        except CepWeatherClientError:
            return FailureOutcome.UPSTREAM_FAILURE

        if not isinstance(data, dict):
            return FailureOutcome.UPSTREAM_FAILURE

        current = data.get("current")
        if current is None:
            return 0.0
        if not isinstance(current, dict):
            return FailureOutcome.UPSTREAM_FAILURE

        temp_c = current.get("temp_c")
        if temp_c is None:
            return 0.0
        # bool is an int subclass but never a valid reading
        if isinstance(temp_c, bool) or not isinstance(temp_c, (int, float)):
            return FailureOutcome.UPSTREAM_FAILURE
        try:
            reading = float(temp_c)
        except OverflowError:
            return FailureOutcome.UPSTREAM_FAILURE
        # NaN and Infinity decode in Python but are not valid JSON numbers
        if not math.isfinite(reading):
            return FailureOutcome.UPSTREAM_FAILURE
        return reading
