from __future__ import annotations

from datetime import date

import pytest

from anz_weather.common.granularity import Granularity
from anz_weather.errors import InvalidCoordinate, InvalidParameter, MissingParameter
from anz_weather.weather.params import (
    default_date_range,
    parse_weather_query,
    split_list,
    validate_date_range,
)


def test_minimal_query_uses_defaults() -> None:
    params = parse_weather_query({"lat": "-36.8509", "lon": "174.7645"})

    assert params.coords.lat == -36.8509
    assert params.coords.lon == 174.7645
    assert params.granularity == Granularity.hourly
    assert params.variables is None
    assert params.start is None and params.end is None


def test_full_query() -> None:
    params = parse_weather_query(
        {
            "lat": "-33.8688",
            "lon": "151.2093",
            "gran": "daily",
            "vars": "temperature_2m_max,,precipitation_sum",
            "start": "2025-01-01",
            "end": "2025-01-07",
        }
    )

    assert params.granularity == Granularity.daily
    assert params.variables == ["temperature_2m_max", "precipitation_sum"]
    opts = params.forecast_options()
    assert opts.start_date == "2025-01-01"
    assert opts.end_date == "2025-01-07"


@pytest.mark.parametrize(
    "query",
    [{"lon": "174.7"}, {"lat": "-36.8"}, {"lat": "", "lon": "174.7"}, {}],
)
def test_missing_coordinates(query: dict) -> None:
    with pytest.raises(MissingParameter):
        parse_weather_query(query)


@pytest.mark.parametrize("lat", ["invalid", "nan", "inf", "-1e999", "12,5"])
def test_non_finite_or_non_numeric_coordinates(lat: str) -> None:
    with pytest.raises(InvalidCoordinate):
        parse_weather_query({"lat": lat, "lon": "174.7645"})


def test_unknown_granularity() -> None:
    with pytest.raises(InvalidParameter) as exc:
        parse_weather_query({"lat": "-36.8", "lon": "174.7", "gran": "weekly"})
    assert "gran" in exc.value.error


def test_malformed_date() -> None:
    with pytest.raises(InvalidParameter):
        parse_weather_query({"lat": "-36.8", "lon": "174.7", "start": "21/01/2025"})


def test_split_list() -> None:
    assert split_list(None) is None
    assert split_list("") == []
    assert split_list(" a, ,b ") == ["a", "b"]


def test_default_date_range() -> None:
    assert default_date_range(date(2025, 1, 28), days=7) == ("2025-01-28", "2025-02-04")


def test_date_range_limits() -> None:
    assert validate_date_range("2025-01-01", "2025-01-31") == ("2025-01-01", "2025-01-31")
    assert validate_date_range("2025-01-05", "2025-01-05") == ("2025-01-05", "2025-01-05")

    with pytest.raises(InvalidParameter, match="before end"):
        validate_date_range("2025-01-10", "2025-01-01")
    with pytest.raises(InvalidParameter, match="31 days"):
        validate_date_range("2025-01-01", "2025-02-01")
    with pytest.raises(InvalidParameter):
        validate_date_range("not-a-date", "2025-01-01")
