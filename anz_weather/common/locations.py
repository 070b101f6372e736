from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from anz_weather.common.geo import Coordinates


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    lat: float
    lon: float

    @property
    def coords(self) -> Coordinates:
        return Coordinates(lat=self.lat, lon=self.lon)


PRESETS: Dict[str, Location] = {
    "auckland": Location(label="Auckland, NZ", lat=-36.8509, lon=174.7645),
    "sydney": Location(label="Sydney, AU", lat=-33.8688, lon=151.2093),
    "melbourne": Location(label="Melbourne, AU", lat=-37.8136, lon=144.9631),
    "brisbane": Location(label="Brisbane, AU", lat=-27.4698, lon=153.0251),
    "wellington": Location(label="Wellington, NZ", lat=-41.2865, lon=174.7762),
}

DEFAULT_LOCATION_ID = "auckland"


def get_location(location_id: str) -> Optional[Location]:
    return PRESETS.get(location_id)


def all_location_ids() -> List[str]:
    return list(PRESETS.keys())


def is_valid_location_id(location_id: str) -> bool:
    return location_id in PRESETS
