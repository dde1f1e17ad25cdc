"""HTTP client for the upstream JSON lookup services."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from .errors import (
    CepWeatherCancelled,
    CepWeatherConnectionError,
    CepWeatherDecodeError,
    CepWeatherTimeout,
)

_LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class CepWeatherHttpClient:
    """Thin wrapper over a caller-owned aiohttp session.

    The response status is never inspected; callers decide what a decoded
    body means. URLs are kept out of log messages because the weather
    service URL embeds the API key.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._session = session
        self._timeout = timeout

    async def get_json(
        self,
        url: str,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> Any:
        """GET ``url`` and return the decoded JSON body.

        Args:
            url: Fully substituted request URL.
            cancel_event: Optional abort signal. Setting it interrupts the
                in-flight request.

        Raises:
            CepWeatherTimeout: If the request times out.
            CepWeatherConnectionError: If the request fails at transport level.
            CepWeatherDecodeError: If the body is not valid JSON.
            CepWeatherCancelled: If ``cancel_event`` was set first.
        """
        if cancel_event is None:
            return await self._fetch_json(url)
        if cancel_event.is_set():
            raise CepWeatherCancelled("Request aborted before it was sent")

        fetch = asyncio.ensure_future(self._fetch_json(url))
        aborted = asyncio.ensure_future(cancel_event.wait())
        try:
            done, _ = await asyncio.wait(
                {fetch, aborted}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            for task in (fetch, aborted):
                if not task.done():
                    task.cancel()

        if fetch in done:
            return fetch.result()
        _LOGGER.debug("Upstream request aborted by caller")
        raise CepWeatherCancelled("Request aborted by caller")

    async def _fetch_json(self, url: str) -> Any:
        try:
            async with self._session.get(
                url,
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                # Neither status nor content type is checked
                return await resp.json(content_type=None)
        except TimeoutError as err:
            _LOGGER.debug("Upstream request timed out after %ss", self._timeout)
            raise CepWeatherTimeout("Upstream request timed out") from err
        except aiohttp.ClientError as err:
            _LOGGER.debug("Upstream request failed: %s", err)
            raise CepWeatherConnectionError("Upstream request failed") from err
        except ValueError as err:
            _LOGGER.debug("Upstream response is not JSON: %s", err)
            raise CepWeatherDecodeError("Upstream response is not valid JSON") from err
