from __future__ import annotations

import math

import pytest

from anz_weather.common.geo import Coordinates, is_valid_region
from anz_weather.common.locations import PRESETS, all_location_ids, get_location, is_valid_location_id


@pytest.mark.parametrize(
    "lat,lon",
    [
        (-36.8509, 174.7645),  # Auckland
        (-33.8688, 151.2093),  # Sydney
        (-41.2865, 174.7762),  # Wellington
        (-43.6, 113.3),  # AU corners
        (-10.7, 153.6),
        (-47.3, 166.4),  # NZ corners
        (-34.4, 178.6),
    ],
)
def test_points_inside_either_region(lat: float, lon: float) -> None:
    assert is_valid_region(Coordinates(lat=lat, lon=lon))


@pytest.mark.parametrize(
    "lat,lon",
    [
        (0, 0),
        (35.6762, 139.6503),  # Tokyo
        (-43.61, 130.0),
        (-20.0, 153.61),
        (-47.31, 170.0),
        (-40.0, 160.0),  # Tasman Sea, between the boxes
        (-40.0, 178.61),
    ],
)
def test_points_outside_both_regions(lat: float, lon: float) -> None:
    assert not is_valid_region(Coordinates(lat=lat, lon=lon))


def test_non_finite_coordinates_are_rejected() -> None:
    assert not is_valid_region(Coordinates(lat=math.nan, lon=150.0))
    assert not is_valid_region(Coordinates(lat=-30.0, lon=math.inf))


def test_every_preset_is_inside_the_region() -> None:
    for location_id in all_location_ids():
        location = get_location(location_id)
        assert location is not None
        assert is_valid_region(location.coords), location_id


def test_location_lookup() -> None:
    assert get_location("auckland") == PRESETS["auckland"]
    assert get_location("tokyo") is None
    assert is_valid_location_id("wellington")
    assert not is_valid_location_id("perth")
    assert all_location_ids() == ["auckland", "sydney", "melbourne", "brisbane", "wellington"]
