import math
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict

# (lat_min, lat_max, lon_min, lon_max), boundaries inclusive.
REGION_BOUNDS: Dict[str, Tuple[float, float, float, float]] = {
    "australia": (-43.6, -10.7, 113.3, 153.6),
    "new_zealand": (-47.3, -34.4, 166.4, 178.6),
}


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float


def _in_box(lat: float, lon: float, box: Tuple[float, float, float, float]) -> bool:
    lat_min, lat_max, lon_min, lon_max = box
    return lat_min <= lat <= lat_max and lon_min <= lon <= lon_max


def is_valid_region(coords: Coordinates) -> bool:
    """True when the point falls inside the Australia or New Zealand box."""
    lat, lon = coords.lat, coords.lon
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False
    return any(_in_box(lat, lon, box) for box in REGION_BOUNDS.values())
