import pytest

from cityweather.weather.errors import (
    EMPTY_RESPONSE_MESSAGE,
    NETWORK_ERROR_MESSAGE,
    ErrorKind,
    WeatherError,
)
from cityweather.weather.result import FetchResult


@pytest.mark.parametrize(
    "code, expected_kind",
    [
        (404, ErrorKind.CITY_NOT_FOUND),
        (401, ErrorKind.API_KEY_ERROR),
        (429, ErrorKind.RATE_LIMIT_EXCEEDED),
        (400, ErrorKind.SERVER_ERROR),
        (403, ErrorKind.SERVER_ERROR),
        (500, ErrorKind.SERVER_ERROR),
        (503, ErrorKind.SERVER_ERROR),
        (302, ErrorKind.SERVER_ERROR),
    ],
)
def test_from_status_creates_expected_kind(code: int, expected_kind: ErrorKind) -> None:
    err = WeatherError.from_status(code)
    assert err.kind is expected_kind
    assert err.status == code


def test_server_error_message_names_status() -> None:
    err = WeatherError.from_status(502)
    assert "502" in err.message
    assert str(err) == err.message


def test_network_error_has_fixed_message() -> None:
    err = WeatherError.network()
    assert err.kind is ErrorKind.NETWORK_ERROR
    assert err.message == NETWORK_ERROR_MESSAGE
    assert err.status is None


def test_empty_response_and_location_errors() -> None:
    assert WeatherError.empty_response(200).message == EMPTY_RESPONSE_MESSAGE
    err = WeatherError.location("Location permission not granted")
    assert err.kind is ErrorKind.LOCATION_ERROR
    assert err.message == "Location permission not granted"


def test_errors_compare_by_value() -> None:
    assert WeatherError.from_status(404) == WeatherError.from_status(404)
    assert WeatherError.from_status(404) != WeatherError.from_status(401)


def test_fetch_result_success_and_failure() -> None:
    ok = FetchResult.success(3)
    assert ok.ok is True
    assert ok.unwrap() == 3
    assert ok.map(lambda v: v * 2).unwrap() == 6

    err = WeatherError.from_status(429)
    failed: FetchResult[int] = FetchResult.failure(err)
    assert failed.ok is False
    assert failed.map(lambda v: v * 2).error is err
    with pytest.raises(WeatherError):
        failed.unwrap()


def test_fetch_result_requires_exactly_one_side() -> None:
    with pytest.raises(ValueError):
        FetchResult()
    with pytest.raises(ValueError):
        FetchResult(value=1, error=WeatherError.network())
