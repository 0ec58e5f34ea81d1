from .weather import Overview, WeatherService

__all__ = ["Overview", "WeatherService"]
