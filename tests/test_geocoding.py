from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests

from tickerweather.errors import NetworkError, ParseError, ProviderError
from tickerweather.settings import WeatherServiceSettings
from tickerweather.weather.geocoding import GeocodingClient


@pytest.fixture
def client() -> GeocodingClient:
    return GeocodingClient(WeatherServiceSettings(timeout=3))


def _response(status: int, body: Any) -> Mock:
    resp = Mock()
    resp.status_code = status
    resp.json.return_value = body
    resp.text = str(body)
    return resp


def test_lookup_returns_first_result(
    client: GeocodingClient, geocoding_payload: dict[str, Any]
) -> None:
    with patch("tickerweather.weather.geocoding.requests.get") as mock_get:
        mock_get.return_value = _response(200, geocoding_payload)

        location = client.lookup("Atlanta")

    assert location is not None
    assert location.name == "Atlanta"
    assert location.latitude == 33.749
    assert location.country == "United States"
    assert location.timezone == "America/New_York"

    _, kwargs = mock_get.call_args
    assert kwargs["params"] == {
        "name": "Atlanta",
        "count": 1,
        "language": "en",
        "format": "json",
    }
    assert kwargs["timeout"] == 3


@pytest.mark.parametrize("body", [{"generationtime_ms": 0.2}, {"results": []}])
def test_lookup_without_results_returns_none(
    client: GeocodingClient, body: dict[str, Any]
) -> None:
    with patch("tickerweather.weather.geocoding.requests.get") as mock_get:
        mock_get.return_value = _response(200, body)
        assert client.lookup("Nowhereville") is None


def test_lookup_defaults_missing_country_and_timezone(client: GeocodingClient) -> None:
    body = {"results": [{"name": "Null Island", "latitude": 0.0, "longitude": 0.0}]}
    with patch("tickerweather.weather.geocoding.requests.get") as mock_get:
        mock_get.return_value = _response(200, body)
        location = client.lookup("Null Island")

    assert location is not None
    assert location.country == ""
    assert location.timezone == ""


def test_lookup_network_error(client: GeocodingClient) -> None:
    with patch("tickerweather.weather.geocoding.requests.get") as mock_get:
        mock_get.side_effect = requests.ConnectionError("no route to host")

        with pytest.raises(NetworkError) as excinfo:
            client.lookup("Atlanta")

    assert isinstance(excinfo.value.original_error, requests.ConnectionError)


def test_lookup_provider_error(client: GeocodingClient) -> None:
    with patch("tickerweather.weather.geocoding.requests.get") as mock_get:
        mock_get.return_value = _response(400, {"error": True, "reason": "Parameter count invalid"})

        with pytest.raises(ProviderError) as excinfo:
            client.lookup("Atlanta")

    assert excinfo.value.code == 400
    assert "Parameter count invalid" in str(excinfo.value)


def test_lookup_provider_404_is_a_provider_failure(client: GeocodingClient) -> None:
    with patch("tickerweather.weather.geocoding.requests.get") as mock_get:
        mock_get.return_value = _response(404, {})
        with pytest.raises(ProviderError) as excinfo:
            client.lookup("Atlanta")

    assert excinfo.value.code == 404
    assert excinfo.value.http_status == 500


def test_lookup_invalid_json(client: GeocodingClient) -> None:
    resp = Mock(status_code=200, text="<html>")
    resp.json.side_effect = ValueError("No JSON")
    with patch("tickerweather.weather.geocoding.requests.get", return_value=resp):
        with pytest.raises(ParseError):
            client.lookup("Atlanta")


def test_lookup_malformed_result(client: GeocodingClient) -> None:
    body = {"results": [{"name": "Atlanta"}]}
    with patch("tickerweather.weather.geocoding.requests.get") as mock_get:
        mock_get.return_value = _response(200, body)
        with pytest.raises(ParseError):
            client.lookup("Atlanta")
