from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

from .codes import describe


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            raise ValueError("latitude and longitude must be finite numbers")


@dataclass(frozen=True)
class WeatherDetail:
    """A measurement with the unit string reported by upstream."""

    value: float
    unit: str


@dataclass(frozen=True)
class Weather:
    """Normalized weather snapshot for a single point in time.

    ``weather_description`` is derived from ``weather_code`` and is not a
    field, so the two can never disagree.
    """

    date: str
    temperature: WeatherDetail
    feels_like: WeatherDetail
    wind_speed: WeatherDetail
    wind_gust: WeatherDetail
    wind_direction: WeatherDetail
    humidity: WeatherDetail
    pressure: WeatherDetail
    rain: WeatherDetail
    showers: WeatherDetail
    snowfall: WeatherDetail
    weather_code: Optional[int]
    is_day: bool

    @property
    def weather_description(self) -> str:
        return describe(self.weather_code)

    def as_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["weather_description"] = self.weather_description
        return payload


@dataclass(frozen=True)
class ForecastSeries:
    values: Tuple[int, ...]
    unit: str


@dataclass(frozen=True)
class TemperatureForecast:
    """Daily temperatures; ``dates[i]`` and ``temperatures.values[i]`` are the same day."""

    dates: Tuple[str, ...]
    temperatures: ForecastSeries

    def __post_init__(self) -> None:
        if len(self.dates) != len(self.temperatures.values):
            raise ValueError(
                f"dates ({len(self.dates)}) and temperatures ({len(self.temperatures.values)}) differ in length"
            )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "dates": list(self.dates),
            "temperatures": {"values": list(self.temperatures.values), "unit": self.temperatures.unit},
        }


__all__ = ["Coordinate", "ForecastSeries", "TemperatureForecast", "Weather", "WeatherDetail"]
