from __future__ import annotations

import json
import logging

import pytest

from forecast.cli import main
from forecast.settings import DEFAULT_API_URL


@pytest.fixture(autouse=True)
def default_env(monkeypatch):
    for name in ("FORECAST_API_URL", "FORECAST_TIMEOUT", "FORECAST_LOADING_DELAY_MS", "FORECAST_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_current_command_prints_json(requests_mock, current_payload, capsys) -> None:
    requests_mock.get(DEFAULT_API_URL, json=current_payload)

    exit_code = main(["current", "--lat", "52.52", "--lon", "13.41"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["temperature"] == {"value": 23, "unit": "°C"}
    assert payload["weather_description"] == "Clear sky"


def test_week_command(requests_mock, week_payload, capsys) -> None:
    requests_mock.get(DEFAULT_API_URL, json=week_payload)

    assert main(["week", "--lat", "52.52", "--lon", "13.41"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["temperatures"]["values"] == [21, 23, 20, 18, 0, 25, 24]


def test_day_command_sends_date(requests_mock, day_payload, capsys) -> None:
    requests_mock.get(DEFAULT_API_URL, json=day_payload)

    assert main(["day", "--lat", "52.52", "--lon", "13.41", "--date", "2024-05-03"]) == 0
    assert requests_mock.last_request.qs["start_date"] == ["2024-05-03"]
    assert json.loads(capsys.readouterr().out)["temperature"]["value"] == 15


def test_day_command_requires_date() -> None:
    with pytest.raises(SystemExit):
        main(["day", "--lat", "1", "--lon", "2"])


def test_transport_failure_exits_non_zero(requests_mock, capsys) -> None:
    requests_mock.get(DEFAULT_API_URL, status_code=500, text="boom")

    assert main(["current", "--lat", "1", "--lon", "2"]) == 1
    assert "request failed" in capsys.readouterr().err


def test_bad_configuration_exits(monkeypatch, capsys) -> None:
    monkeypatch.setenv("FORECAST_TIMEOUT", "never")

    assert main(["current", "--lat", "1", "--lon", "2"]) == 2
    assert "configuration error" in capsys.readouterr().err


def test_day_without_hourly_data_reports_no_data(requests_mock, day_payload, capsys) -> None:
    day_payload["hourly"]["temperature_2m"] = []
    requests_mock.get(DEFAULT_API_URL, json=day_payload)

    assert main(["day", "--lat", "52.52", "--lon", "13.41", "--date", "2024-05-03"]) == 1
    captured = capsys.readouterr()
    assert "no data" in captured.err
    assert captured.out == ""


def test_week_with_mismatched_arrays_reports_no_data(requests_mock, week_payload, capsys) -> None:
    week_payload["daily"]["temperature_2m_max"].pop()
    requests_mock.get(DEFAULT_API_URL, json=week_payload)

    assert main(["week", "--lat", "52.52", "--lon", "13.41"]) == 1
    assert "no data" in capsys.readouterr().err


def test_missing_field_reports_unexpected_response(requests_mock, current_payload, capsys) -> None:
    del current_payload["current"]["rain"]
    requests_mock.get(DEFAULT_API_URL, json=current_payload)

    assert main(["current", "--lat", "52.52", "--lon", "13.41"]) == 1
    assert "unexpected response" in capsys.readouterr().err


def test_current_failure_goes_through_service_log(requests_mock, capsys, caplog) -> None:
    requests_mock.get(DEFAULT_API_URL, status_code=503, text="unavailable")

    with caplog.at_level(logging.ERROR, logger="WeatherService"):
        assert main(["current", "--lat", "1", "--lon", "2"]) == 1

    assert "Failed to fetch weather" in caplog.text
