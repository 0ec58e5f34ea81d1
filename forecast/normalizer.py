"""Map raw Open-Meteo payloads onto :class:`Weather` and :class:`TemperatureForecast`.

Every function here is pure: the raw mapping is only read, and missing keys
surface as ``KeyError`` to the caller.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from .dates import format_day_month
from .entities import ForecastSeries, TemperatureForecast, Weather, WeatherDetail
from .numbers import EmptyInputError, mean, round_to_int

Payload = Mapping[str, Any]


class MalformedPayloadError(ValueError):
    """Raised when parallel upstream arrays disagree in length."""


def normalize_multi_day(raw: Payload) -> TemperatureForecast:
    daily = raw["daily"]
    units = raw["daily_units"]
    times: Sequence[str] = daily["time"]
    maxima: Sequence[float] = daily["temperature_2m_max"]
    if len(times) != len(maxima):
        raise MalformedPayloadError(
            f"daily.time has {len(times)} entries but temperature_2m_max has {len(maxima)}"
        )
    return TemperatureForecast(
        dates=tuple(format_day_month(day) for day in times),
        temperatures=ForecastSeries(
            values=tuple(round_to_int(value) for value in maxima),
            unit=units["temperature_2m_max"],
        ),
    )


def normalize_current(raw: Payload) -> Weather:
    current = raw["current"]
    units = raw["current_units"]

    def detail(key: str, rounded: bool = False) -> WeatherDetail:
        value = current[key]
        return WeatherDetail(value=round_to_int(value) if rounded else value, unit=units[key])

    return Weather(
        date=current["time"],
        temperature=detail("temperature_2m", rounded=True),
        feels_like=detail("apparent_temperature", rounded=True),
        wind_speed=detail("wind_speed_10m"),
        wind_gust=detail("wind_gusts_10m"),
        wind_direction=detail("wind_direction_10m"),
        humidity=detail("relative_humidity_2m"),
        pressure=detail("surface_pressure"),
        rain=detail("rain"),
        showers=detail("showers"),
        snowfall=detail("snowfall"),
        weather_code=_code(current["weather_code"]),
        is_day=bool(current["is_day"]),
    )


def normalize_single_day(raw: Payload) -> Weather:
    """Collapse one day of data into a snapshot.

    Temperatures are the rounded mean of the hourly samples; everything else
    is the first entry of the matching daily aggregate.
    """
    daily = raw["daily"]
    daily_units = raw["daily_units"]
    hourly = raw["hourly"]
    hourly_units = raw["hourly_units"]

    if not daily["time"]:
        raise EmptyInputError("no daily data returned for the requested date")

    def hourly_mean(key: str) -> WeatherDetail:
        return WeatherDetail(value=round_to_int(mean(_present(hourly[key]))), unit=hourly_units[key])

    def first(key: str) -> WeatherDetail:
        return WeatherDetail(value=daily[key][0], unit=daily_units[key])

    return Weather(
        date=daily["time"][0],
        temperature=hourly_mean("temperature_2m"),
        feels_like=hourly_mean("apparent_temperature"),
        wind_speed=first("wind_speed_10m_max"),
        wind_gust=first("wind_gusts_10m_max"),
        wind_direction=first("wind_direction_10m_dominant"),
        humidity=first("relative_humidity_2m_max"),
        pressure=first("surface_pressure_max"),
        rain=first("rain_sum"),
        showers=first("showers_sum"),
        snowfall=first("snowfall_sum"),
        weather_code=_code(daily["weather_code"][0]),
        is_day=True,
    )


def _code(value: Optional[float]) -> Optional[int]:
    if value is None:
        return None
    return int(value)


def _present(values: Sequence[Optional[float]]) -> List[float]:
    # Open-Meteo reports hours without data as null
    return [value for value in values if value is not None]


__all__ = [
    "MalformedPayloadError",
    "normalize_current",
    "normalize_multi_day",
    "normalize_single_day",
]
