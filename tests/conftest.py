"""Pytest configuration and fixtures for cep_weather tests."""

from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from cep_weather import CepWeatherHttpClient

_UNSET = object()


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    return MagicMock(spec=aiohttp.ClientSession)


@pytest.fixture
def http_client(mock_session: MagicMock) -> CepWeatherHttpClient:
    """Create an HTTP client over the mock session."""
    return CepWeatherHttpClient(mock_session, timeout=5)


def create_mock_response(
    status: int = 200,
    json_data: Any = _UNSET,
    json_error: Exception | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call (None is a valid body)
        json_error: Exception raised from json() call instead

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status

    if json_error is not None:
        response.json.side_effect = json_error
    elif json_data is not _UNSET:
        response.json.return_value = json_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response


def create_hanging_response() -> AsyncMock:
    """Create a response whose request never completes."""

    async def hang(*_args: Any) -> None:
        await asyncio.Event().wait()

    response = AsyncMock()
    response.__aenter__.side_effect = hang
    response.__aexit__.return_value = None
    return response
