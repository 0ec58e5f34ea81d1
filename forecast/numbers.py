from __future__ import annotations

import math
from typing import Iterable, List


class EmptyInputError(ValueError):
    """Raised when an aggregate is requested over no samples."""


def round_to_int(value: float) -> int:
    """Round to the nearest integer, halves going towards positive infinity."""
    floor = math.floor(value)
    if value - floor >= 0.5:
        return floor + 1
    return floor


def mean(values: Iterable[float]) -> float:
    samples: List[float] = list(values)
    if not samples:
        raise EmptyInputError("cannot average an empty series")
    return sum(samples) / len(samples)


__all__ = ["EmptyInputError", "mean", "round_to_int"]
