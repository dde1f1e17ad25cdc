"""Run the lookup service: ``python -m cep_weather``."""

from __future__ import annotations

import logging

from aiohttp import web

from .settings import CepWeatherSettings
from .web import create_app

_LOGGER = logging.getLogger(__name__)


def main() -> None:
    settings = CepWeatherSettings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not settings.weather_api_key:
        _LOGGER.warning("WEATHER_API_KEY is not set; temperatures will read as 0")
    web.run_app(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        print=None,
    )


if __name__ == "__main__":
    main()
