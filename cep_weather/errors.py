"""Transport error types for the upstream lookup services."""

from __future__ import annotations


class CepWeatherClientError(Exception):
    """Base error for upstream request failures."""


class CepWeatherTimeout(CepWeatherClientError):
    """Timeout while waiting for an upstream service."""


class CepWeatherConnectionError(CepWeatherClientError):
    """Network connection to an upstream service failed."""


class CepWeatherDecodeError(CepWeatherClientError):
    """Upstream response body could not be decoded as JSON."""


class CepWeatherCancelled(CepWeatherClientError):
    """Request aborted by the caller before it completed."""
