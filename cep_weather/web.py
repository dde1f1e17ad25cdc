"""aiohttp application exposing ``GET /weather?cep=<code>``."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

import aiohttp
from aiohttp import web

from .lookup import WeatherLookup
from .settings import CepWeatherSettings

_LOGGER = logging.getLogger(__name__)

LOOKUP_KEY = web.AppKey("lookup", WeatherLookup)


async def handle_weather(request: web.Request) -> web.Response:
    """Translate the lookup response into an HTTP response."""
    lookup = request.app[LOOKUP_KEY]
    response = await lookup.respond(request.query.get("cep", ""))
    if isinstance(response.body, dict):
        return web.json_response(response.body, status=response.status)
    return web.Response(text=response.body, status=response.status)


def create_app(
    settings: CepWeatherSettings,
    *,
    lookup: WeatherLookup | None = None,
) -> web.Application:
    """Create the web application.

    Without ``lookup`` the app opens one outbound ``ClientSession`` on
    startup, builds the pipeline over it, and closes it on cleanup.
    """
    app = web.Application()
    app.router.add_get("/weather", handle_weather)

    if lookup is not None:
        app[LOOKUP_KEY] = lookup
        return app

    async def upstream_session(app: web.Application) -> AsyncIterator[None]:
        async with aiohttp.ClientSession() as session:
            app[LOOKUP_KEY] = WeatherLookup.from_settings(session, settings)
            _LOGGER.debug("Upstream session opened")
            yield
        _LOGGER.debug("Upstream session closed")

    app.cleanup_ctx.append(upstream_session)
    return app
