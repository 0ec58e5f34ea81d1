from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from .base import ForecastProvider, RequestConfig
from ..dates import DateLike, format_request_date
from ..entities import Coordinate, TemperatureForecast, Weather
from ..normalizer import normalize_current, normalize_multi_day, normalize_single_day
from ..settings import Settings

CURRENT_FIELDS = (
    "temperature_2m",
    "apparent_temperature",
    "wind_speed_10m",
    "wind_gusts_10m",
    "wind_direction_10m",
    "relative_humidity_2m",
    "surface_pressure",
    "weather_code",
    "is_day",
    "rain",
    "showers",
    "snowfall",
)

HOURLY_FIELDS = ("temperature_2m", "apparent_temperature")

DAILY_FIELDS = (
    "wind_speed_10m_max",
    "wind_gusts_10m_max",
    "wind_direction_10m_dominant",
    "relative_humidity_2m_max",
    "surface_pressure_max",
    "weather_code",
    "rain_sum",
    "showers_sum",
    "snowfall_sum",
)


class OpenMeteoClient(ForecastProvider):
    base_url = "https://api.open-meteo.com/v1/forecast"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self._log = logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "OpenMeteoClient":
        return cls(
            base_url=settings.api_url,
            request_config=RequestConfig(timeout=settings.timeout),
            **kwargs,
        )

    # Public API ---------------------------------------------------------
    def week_temperature(self, coordinate: Coordinate) -> TemperatureForecast:
        """Daily maximum temperatures for the upcoming week."""
        params = self._params(coordinate, daily="temperature_2m_max")
        data = self._get_json(self.base_url, params, what="weather data")
        return normalize_multi_day(data)

    def current(self, coordinate: Coordinate) -> Weather:
        params = self._params(coordinate, current=",".join(CURRENT_FIELDS))
        data = self._get_json(self.base_url, params, what="current weather")
        return normalize_current(data)

    def daily(self, coordinate: Coordinate, day: DateLike) -> Weather:
        """Snapshot for one calendar day, temperatures averaged over its hours."""
        formatted = format_request_date(day)
        params = self._params(
            coordinate,
            hourly=",".join(HOURLY_FIELDS),
            daily=",".join(DAILY_FIELDS),
            start_date=formatted,
            end_date=formatted,
        )
        data = self._get_json(self.base_url, params, what="daily weather")
        return normalize_single_day(data)

    # helpers ------------------------------------------------------------
    def _params(self, coordinate: Coordinate, **extra: str) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "latitude": coordinate.latitude,
            "longitude": coordinate.longitude,
            "timezone": "auto",
            "wind_speed_unit": "ms",
        }
        params.update(extra)
        return params


@lru_cache(maxsize=1)
def default_client() -> OpenMeteoClient:
    return OpenMeteoClient.from_settings(Settings.from_env())


def get_temperature_forecast(latitude: float, longitude: float) -> TemperatureForecast:
    return default_client().week_temperature(Coordinate(latitude, longitude))


def get_current_weather(latitude: float, longitude: float) -> Weather:
    return default_client().current(Coordinate(latitude, longitude))


def get_daily_weather(latitude: float, longitude: float, date: DateLike) -> Weather:
    return default_client().daily(Coordinate(latitude, longitude), date)


__all__ = [
    "CURRENT_FIELDS",
    "DAILY_FIELDS",
    "HOURLY_FIELDS",
    "OpenMeteoClient",
    "default_client",
    "get_current_weather",
    "get_daily_weather",
    "get_temperature_forecast",
]
