"""Open-Meteo data access with normalization into stable weather shapes."""
from __future__ import annotations

from .codes import describe
from .entities import Coordinate, ForecastSeries, TemperatureForecast, Weather, WeatherDetail
from .numbers import EmptyInputError, mean, round_to_int
from .normalizer import MalformedPayloadError, normalize_current, normalize_multi_day, normalize_single_day
from .providers.openmeteo import (
    OpenMeteoClient,
    get_current_weather,
    get_daily_weather,
    get_temperature_forecast,
)

__all__ = [
    "Coordinate",
    "EmptyInputError",
    "ForecastSeries",
    "MalformedPayloadError",
    "OpenMeteoClient",
    "TemperatureForecast",
    "Weather",
    "WeatherDetail",
    "describe",
    "get_current_weather",
    "get_daily_weather",
    "get_temperature_forecast",
    "mean",
    "normalize_current",
    "normalize_multi_day",
    "normalize_single_day",
    "round_to_int",
]
