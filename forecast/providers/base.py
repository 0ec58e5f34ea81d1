from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import Response


# Connection errors, timeouts, HTTP error statuses and undecodable bodies all
# derive from this; they reach the caller unchanged.
TransportFault = requests.RequestException


@dataclass
class RequestConfig:
    timeout: Optional[float] = None


class ForecastProvider:
    """Base class for HTTP forecast sources: one GET per call, no retries."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or self._build_session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _build_session(self) -> requests.Session:
        return requests.Session()

    def _get_json(self, url: str, params: Dict[str, Any], *, what: str) -> Dict[str, Any]:
        try:
            response = self.session.get(url, params=params, timeout=self.request_config.timeout)
            self._handle_response(response)
            return response.json()
        except TransportFault as exc:
            self._log.error("Failed to fetch %s: %s", what, exc, exc_info=exc)
            raise

    def _handle_response(self, response: Response) -> Response:
        if response.status_code >= 400:
            self._log.warning("Provider returned %s: %s", response.status_code, response.text[:200])
        response.raise_for_status()
        return response


__all__ = ["ForecastProvider", "RequestConfig", "TransportFault"]
