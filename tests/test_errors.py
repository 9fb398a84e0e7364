import pytest

from tickerweather.errors import (
    NetworkError,
    NotFoundError,
    ParseError,
    ProviderError,
    ProxyError,
    UpstreamError,
    ValidationError,
)


def test_proxy_error_str_and_flags() -> None:
    err = ProxyError(code=404, message="Not Found")
    assert str(err) == "[404] Not Found"
    assert err.is_client_error is True
    assert err.is_server_error is False


@pytest.mark.parametrize(
    "err, status",
    [
        (ValidationError("City name is required"), 400),
        (NotFoundError("City not found"), 404),
        (ProviderError(502, "Bad gateway"), 500),
        (NetworkError("boom"), 500),
        (ParseError("bad json"), 500),
    ],
)
def test_http_status(err: ProxyError, status: int) -> None:
    assert err.http_status == status


@pytest.mark.parametrize(
    "code, expected_type",
    [
        (404, NotFoundError),
        (400, ProviderError),
        (429, ProviderError),
        (500, ProviderError),
        (503, ProviderError),
    ],
)
def test_from_status_creates_expected_error(
    code: int, expected_type: type[ProxyError]
) -> None:
    err = ProxyError.from_status(code, "test error")
    assert isinstance(err, expected_type)
    assert err.code == code
    assert "test error" in str(err)


def test_network_error_wraps_exception() -> None:
    try:
        raise ConnectionError("BOOM")
    except ConnectionError as e:
        err = NetworkError(message="Connection error", original_error=e)
        assert isinstance(err, UpstreamError)
        assert str(err) == "[0] Connection error"
        assert isinstance(err.original_error, Exception)


def test_parse_error_wraps_exception() -> None:
    try:
        raise ValueError("bad parse")
    except ValueError as e:
        err = ParseError(message="Parse error", original_error=e)
        assert isinstance(err, UpstreamError)
        assert str(err) == "[0] Parse error"
        assert isinstance(err.original_error, Exception)
