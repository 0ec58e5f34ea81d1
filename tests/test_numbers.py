from __future__ import annotations

import pytest

from forecast.numbers import EmptyInputError, mean, round_to_int


@pytest.mark.parametrize(
    "value, expected",
    [
        (2.5, 3),
        (2.4, 2),
        (2.6, 3),
        (22.5, 23),
        (24.3, 24),
        (0.0, 0),
        (-0.5, 0),
        (-1.5, -1),
        (-1.6, -2),
        (-2.4, -2),
    ],
)
def test_round_to_int_rounds_half_up(value: float, expected: int) -> None:
    result = round_to_int(value)
    assert result == expected
    assert isinstance(result, int)


def test_mean_of_samples() -> None:
    assert mean([10, 20, 30]) == 20
    assert mean([1.5]) == 1.5
    assert mean(iter([2.0, 4.0])) == 3.0


def test_mean_of_empty_series_fails() -> None:
    with pytest.raises(EmptyInputError):
        mean([])


def test_empty_input_error_is_value_error() -> None:
    assert issubclass(EmptyInputError, ValueError)
