"""Debounced loading indicator.

A spinner is only shown when a request is still running once the debounce
window has passed; fast responses never make it flicker.
"""
from __future__ import annotations

import enum
import threading
from typing import Callable, Optional, Protocol


class CancellableTimer(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], CancellableTimer]


def _thread_timer(delay: float, callback: Callable[[], None]) -> CancellableTimer:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    return timer


class LoadingState(enum.Enum):
    IDLE = "idle"
    PENDING = "pending"
    SPINNER_VISIBLE = "spinner_visible"


class LoadingIndicator:
    """Tracks one request at a time with a single owned timer handle."""

    def __init__(self, delay: float = 0.3, timer_factory: Optional[TimerFactory] = None) -> None:
        self.delay = delay
        self._timer_factory = timer_factory or _thread_timer
        self._timer: Optional[CancellableTimer] = None
        self._state = LoadingState.IDLE
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def state(self) -> LoadingState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state is not LoadingState.IDLE

    @property
    def show_spinner(self) -> bool:
        return self._state is LoadingState.SPINNER_VISIBLE

    def start(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._generation += 1
            generation = self._generation
            self._state = LoadingState.PENDING
            self._timer = self._timer_factory(self.delay, lambda: self._expire(generation))
            self._timer.start()

    def stop(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._state = LoadingState.IDLE

    def _expire(self, generation: int) -> None:
        with self._lock:
            # a stale timer from an earlier start() must not touch a newer request
            if generation != self._generation or self._state is not LoadingState.PENDING:
                return
            self._state = LoadingState.SPINNER_VISIBLE
            self._timer = None

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None


__all__ = ["CancellableTimer", "LoadingIndicator", "LoadingState", "TimerFactory"]
