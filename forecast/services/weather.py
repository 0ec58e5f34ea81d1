from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from ..dates import DateLike
from ..entities import Coordinate, TemperatureForecast, Weather
from ..loading import LoadingIndicator
from ..providers.openmeteo import OpenMeteoClient
from ..settings import Settings

T = TypeVar("T")


@dataclass(frozen=True)
class Overview:
    current: Weather
    forecast: TemperatureForecast

    def as_dict(self) -> dict:
        return {"current": self.current.as_dict(), "forecast": self.forecast.as_dict()}


class WeatherService:
    """Caller-side boundary: runs fetches, drives the spinner, logs failures."""

    def __init__(
        self,
        client: OpenMeteoClient,
        *,
        indicator: Optional[LoadingIndicator] = None,
        max_workers: int = 2,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.client = client
        self.indicator = indicator or LoadingIndicator()
        self.max_workers = max_workers
        self._log = logger or logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_settings(cls, settings: Settings) -> "WeatherService":
        return cls(
            OpenMeteoClient.from_settings(settings),
            indicator=LoadingIndicator(delay=settings.loading_delay_ms / 1000),
        )

    # Public API ---------------------------------------------------------
    def load_overview(self, coordinate: Coordinate) -> Overview:
        """Fetch current conditions and the week forecast concurrently."""
        return self._tracked(lambda: self._fetch_overview(coordinate))

    def load_current(self, coordinate: Coordinate) -> Weather:
        return self._tracked(lambda: self.client.current(coordinate))

    def load_week(self, coordinate: Coordinate) -> TemperatureForecast:
        return self._tracked(lambda: self.client.week_temperature(coordinate))

    def load_day(self, coordinate: Coordinate, day: DateLike) -> Weather:
        return self._tracked(lambda: self.client.daily(coordinate, day))

    # Helpers ------------------------------------------------------------
    def _fetch_overview(self, coordinate: Coordinate) -> Overview:
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            current = pool.submit(self.client.current, coordinate)
            forecast = pool.submit(self.client.week_temperature, coordinate)
            wait([current, forecast])
        return Overview(current=current.result(), forecast=forecast.result())

    def _tracked(self, fetch: Callable[[], T]) -> T:
        self.indicator.start()
        try:
            return fetch()
        except Exception as exc:
            self._log.error("Failed to fetch weather: %s", exc, exc_info=exc)
            raise
        finally:
            self.indicator.stop()


__all__ = ["Overview", "WeatherService"]
