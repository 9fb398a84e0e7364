from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests

from tickerweather.errors import NetworkError, ParseError, ProviderError, UpstreamError
from tickerweather.settings import WeatherServiceSettings
from tickerweather.weather.api import CURRENT_FIELDS, WeatherClient
from tickerweather.weather.models import ObservationBundle


@pytest.fixture
def api() -> WeatherClient:
    return WeatherClient(WeatherServiceSettings())


def test_fetch_current_success(api: WeatherClient, forecast_payload: dict[str, Any]) -> None:
    with patch("tickerweather.weather.api.requests.get") as mock_get:
        mock_resp = Mock()
        mock_resp.status_code = 200
        mock_resp.json.return_value = forecast_payload
        mock_get.return_value = mock_resp

        result = api.fetch_current(33.749, -84.38798)

    assert isinstance(result, ObservationBundle)
    assert result.weather_code == 61
    assert result.unit_for("wind_speed_10m") == "km/h"

    args, kwargs = mock_get.call_args
    assert args[0] == "https://api.open-meteo.com/v1/forecast"
    assert kwargs["params"]["latitude"] == 33.749
    assert kwargs["params"]["timezone"] == "auto"
    assert kwargs["params"]["current"].split(",") == list(CURRENT_FIELDS)
    assert kwargs["timeout"] == 10.0


def test_fetch_current_bad_response(api: WeatherClient) -> None:
    with patch("tickerweather.weather.api.requests.get") as mock_get:
        mock_resp = Mock()
        mock_resp.status_code = 400
        mock_resp.text = "Bad Request"
        mock_resp.json.return_value = {"error": True, "reason": "Latitude must be in range"}
        mock_get.return_value = mock_resp

        with pytest.raises(ProviderError) as excinfo:
            api.fetch_current(123.0, 0.0)

    assert "Latitude must be in range" in str(excinfo.value)
    assert excinfo.value.http_status == 500


def test_fetch_current_server_error_without_json(api: WeatherClient) -> None:
    with patch("tickerweather.weather.api.requests.get") as mock_get:
        mock_resp = Mock()
        mock_resp.status_code = 503
        mock_resp.text = "down"
        mock_resp.json.side_effect = ValueError("not json")
        mock_get.return_value = mock_resp

        with pytest.raises(UpstreamError) as excinfo:
            api.fetch_current(0.0, 0.0)

    assert excinfo.value.code == 503
    assert excinfo.value.message == "Provider unavailable"


def test_fetch_current_timeout(api: WeatherClient) -> None:
    with patch("tickerweather.weather.api.requests.get") as mock_get:
        mock_get.side_effect = requests.Timeout("read timed out")
        with pytest.raises(NetworkError):
            api.fetch_current(0.0, 0.0)


@pytest.mark.parametrize("drop", ["current", "temperature_2m", "relative_humidity_2m"])
def test_fetch_current_incomplete_payload(
    api: WeatherClient, forecast_payload: dict[str, Any], drop: str
) -> None:
    if drop == "current":
        del forecast_payload["current"]
    else:
        del forecast_payload["current"][drop]

    with patch("tickerweather.weather.api.requests.get") as mock_get:
        mock_resp = Mock()
        mock_resp.status_code = 200
        mock_resp.json.return_value = forecast_payload
        mock_get.return_value = mock_resp

        with pytest.raises(ParseError):
            api.fetch_current(33.749, -84.38798)


def test_fetch_current_404_is_a_provider_failure(api: WeatherClient) -> None:
    with patch("tickerweather.weather.api.requests.get") as mock_get:
        mock_resp = Mock()
        mock_resp.status_code = 404
        mock_resp.text = "Not Found"
        mock_resp.json.side_effect = ValueError("not json")
        mock_get.return_value = mock_resp

        with pytest.raises(ProviderError) as excinfo:
            api.fetch_current(33.749, -84.38798)

    assert excinfo.value.http_status == 500


@pytest.mark.parametrize("field", ["current", "current_units"])
def test_fetch_current_string_blocks_are_parse_errors(
    api: WeatherClient, forecast_payload: dict[str, Any], field: str
) -> None:
    forecast_payload[field] = "unavailable"

    with patch("tickerweather.weather.api.requests.get") as mock_get:
        mock_resp = Mock()
        mock_resp.status_code = 200
        mock_resp.json.return_value = forecast_payload
        mock_get.return_value = mock_resp

        with pytest.raises(ParseError):
            api.fetch_current(33.749, -84.38798)
