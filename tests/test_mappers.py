from __future__ import annotations

import pytest

from weather_search.mappers import (
    COMPASS_POINTS,
    WEATHER_CODES,
    WeatherIcon,
    compass_direction,
    describe_weather_code,
    weather_icon,
)


def test_known_codes_are_described() -> None:
    assert describe_weather_code(0) == "Clear sky"
    assert describe_weather_code(1) == "Mainly clear"
    assert describe_weather_code(65) == "Heavy rain"
    assert describe_weather_code(99) == "Thunderstorm with heavy hail"


@pytest.mark.parametrize("code", [4, 50, 98, 100, -1, None])
def test_unmapped_codes_fall_back_to_unknown(code) -> None:
    assert describe_weather_code(code) == "Unknown"


def test_description_is_total_over_wmo_range() -> None:
    for code in range(0, 100):
        description = describe_weather_code(code)
        assert description
        if code not in WEATHER_CODES:
            assert description == "Unknown"


@pytest.mark.parametrize(
    ("code", "icon"),
    [
        (0, WeatherIcon.CLEAR),
        (1, WeatherIcon.PARTLY_CLOUDY),
        (3, WeatherIcon.PARTLY_CLOUDY),
        (4, WeatherIcon.FOG),
        (48, WeatherIcon.FOG),
        (49, WeatherIcon.RAIN),
        (67, WeatherIcon.RAIN),
        (68, WeatherIcon.SNOW),
        (86, WeatherIcon.SNOW),
        (87, WeatherIcon.THUNDERSTORM),
        (99, WeatherIcon.THUNDERSTORM),
    ],
)
def test_icon_bands(code: int, icon: WeatherIcon) -> None:
    assert weather_icon(code) is icon


def test_every_icon_has_a_symbol() -> None:
    for icon in WeatherIcon:
        assert icon.symbol


@pytest.mark.parametrize(
    ("degrees", "label"),
    [
        (0, "N"),
        (22.5, "NNE"),
        (90, "E"),
        (180, "S"),
        (270, "W"),
        (337.5, "NNW"),
        (359, "N"),
        (360, "N"),
        (720, "N"),
        (11.25, "NNE"),
        (11.0, "N"),
        (-90, "W"),
    ],
)
def test_compass_direction(degrees: float, label: str) -> None:
    assert compass_direction(degrees) == label


def test_compass_has_sixteen_points_starting_north() -> None:
    assert len(COMPASS_POINTS) == 16
    assert COMPASS_POINTS[0] == "N"
    assert [compass_direction(i * 22.5) for i in range(16)] == list(COMPASS_POINTS)
