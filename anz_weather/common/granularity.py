from enum import Enum
from typing import Dict, List


class Granularity(str, Enum):
    hourly = "hourly"
    daily = "daily"


DEFAULT_VARIABLES: Dict[Granularity, List[str]] = {
    Granularity.hourly: ["temperature_2m", "precipitation", "windspeed_10m"],
    Granularity.daily: [
        "temperature_2m_max",
        "temperature_2m_min",
        "precipitation_sum",
        "windspeed_10m_max",
    ],
}


def default_variables(granularity: Granularity) -> List[str]:
    return list(DEFAULT_VARIABLES[granularity])


def parse_granularity(value: str) -> Granularity:
    """Parse ``hourly``/``daily`` (case-insensitive); raises ValueError otherwise."""
    v = str(value or "").strip().lower()
    try:
        return Granularity(v)
    except ValueError:
        raise ValueError(f"gran must be 'hourly' or 'daily', got {value!r}") from None
