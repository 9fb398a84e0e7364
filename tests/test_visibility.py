import pytest

from tickerweather.weather.utils.visibility import estimate_visibility


def test_clear_below_threshold_is_baseline() -> None:
    assert estimate_visibility(50, 0) == 10000


def test_humidity_at_threshold_is_not_derated() -> None:
    assert estimate_visibility(70, 0) == 10000


def test_fog_with_high_humidity() -> None:
    assert estimate_visibility(90, 45) == 800


def test_thunderstorm_at_saturation() -> None:
    assert estimate_visibility(100, 95) == 2100


@pytest.mark.parametrize(
    "humidity, code, expected",
    [
        (80, 61, 5400),  # 10000 * 0.9 * 0.6
        (60, 80, 6000),
        (60, 71, 4000),
        (60, 96, 3000),
        (60, 48, 1000),
        (71, 3, 9900),
        (85, 999, 8500),  # unmapped code: humidity only
    ],
)
def test_condition_multipliers(humidity: int, code: int, expected: int) -> None:
    assert estimate_visibility(humidity, code) == expected


def test_out_of_domain_humidity_is_not_clamped() -> None:
    # factor reaches zero at 170 % and goes negative beyond it
    assert estimate_visibility(170, 0) == 0
    assert estimate_visibility(200, 0) == -3000


def test_estimate_is_repeatable() -> None:
    assert estimate_visibility(88, 73) == estimate_visibility(88, 73)
