from __future__ import annotations

import copy
from typing import Any, Callable, Dict, List

import pytest
from requests_mock import Mocker

from forecast.entities import Coordinate
from payloads import CURRENT_PAYLOAD, DAY_PAYLOAD, WEEK_PAYLOAD


class FakeTimer:
    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        self.callback()


class TimerRecorder:
    def __init__(self) -> None:
        self.timers: List[FakeTimer] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def last(self) -> FakeTimer:
        return self.timers[-1]


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture()
def current_payload() -> Dict[str, Any]:
    return copy.deepcopy(CURRENT_PAYLOAD)


@pytest.fixture()
def week_payload() -> Dict[str, Any]:
    return copy.deepcopy(WEEK_PAYLOAD)


@pytest.fixture()
def day_payload() -> Dict[str, Any]:
    return copy.deepcopy(DAY_PAYLOAD)


@pytest.fixture()
def berlin() -> Coordinate:
    return Coordinate(52.52, 13.41)


@pytest.fixture()
def timers() -> TimerRecorder:
    return TimerRecorder()
