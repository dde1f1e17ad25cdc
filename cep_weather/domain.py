"""Value types for a postal-code weather lookup.

Every value here lives for a single request. The only measured fact is the
Celsius reading; the other scales are derived from it by ``compose``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, TypeAlias

Locality: TypeAlias = str


class FailureOutcome(Enum):
    """Terminal failure kinds of the lookup pipeline."""

    INVALID_INPUT = "invalid_input"
    LOCATION_NOT_FOUND = "location_not_found"
    UPSTREAM_FAILURE = "upstream_failure"


InvalidInput: TypeAlias = Literal[FailureOutcome.INVALID_INPUT]
LocationNotFound: TypeAlias = Literal[FailureOutcome.LOCATION_NOT_FOUND]
UpstreamFailure: TypeAlias = Literal[FailureOutcome.UPSTREAM_FAILURE]


@dataclass(frozen=True)
class PostalCode:
    """A validated 8-digit CEP.

    Build it through ``validate_postal_code``; the constructor does not check.
    """

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class WeatherResult:
    """Current temperature in Celsius, Fahrenheit and Kelvin."""

    temp_c: float
    temp_f: float
    temp_k: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for the JSON response body."""
        return {
            "temp_C": self.temp_c,
            "temp_F": self.temp_f,
            "temp_K": self.temp_k,
        }


def compose(reading: float) -> WeatherResult:
    """Derive the three-scale result from a Celsius reading.

    Kelvin uses a flat 273 offset, not 273.15; existing clients depend on it.
    """
    return WeatherResult(
        temp_c=reading,
        temp_f=reading * 1.8 + 32,
        temp_k=reading + 273,
    )
