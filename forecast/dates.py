"""Date helpers shared by the request builder and the normalizer."""
from __future__ import annotations

from datetime import date, datetime
from typing import Union

DateLike = Union[date, datetime, str]


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    candidate = value.strip()
    if candidate.endswith("Z"):
        candidate = candidate[:-1] + "+00:00"
    if "T" in candidate or " " in candidate:
        return datetime.fromisoformat(candidate).date()
    return date.fromisoformat(candidate)


def format_request_date(value: DateLike) -> str:
    """Format a day the way the forecast endpoint expects (``YYYY-MM-DD``)."""
    return _as_date(value).strftime("%Y-%m-%d")


def format_day_month(value: DateLike) -> str:
    """Short ``DD/MM`` label used on forecast charts."""
    return _as_date(value).strftime("%d/%m")


__all__ = ["DateLike", "format_day_month", "format_request_date"]
