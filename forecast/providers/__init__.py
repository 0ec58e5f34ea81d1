from .base import ForecastProvider, RequestConfig, TransportFault
from .openmeteo import OpenMeteoClient

__all__ = ["ForecastProvider", "OpenMeteoClient", "RequestConfig", "TransportFault"]
