"""Current temperature lookup by Brazilian postal code (CEP)."""

__version__ = "0.1.0"

from .domain import (
    FailureOutcome,
    Locality,
    PostalCode,
    WeatherResult,
    compose,
)
from .errors import (
    CepWeatherCancelled,
    CepWeatherClientError,
    CepWeatherConnectionError,
    CepWeatherDecodeError,
    CepWeatherTimeout,
)
from .http import CepWeatherHttpClient
from .lookup import LookupResponse, WeatherLookup
from .resolvers import LocationResolver, TemperatureResolver
from .settings import CepWeatherSettings
from .validation import validate_postal_code

__all__ = [
    "CepWeatherCancelled",
    "CepWeatherClientError",
    "CepWeatherConnectionError",
    "CepWeatherDecodeError",
    "CepWeatherHttpClient",
    "CepWeatherSettings",
    "CepWeatherTimeout",
    "FailureOutcome",
    "Locality",
    "LocationResolver",
    "LookupResponse",
    "PostalCode",
    "TemperatureResolver",
    "WeatherLookup",
    "WeatherResult",
    "__version__",
    "compose",
    "validate_postal_code",
]
