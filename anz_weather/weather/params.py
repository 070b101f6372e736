import math
from datetime import date, timedelta
from typing import List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from anz_weather.common.geo import Coordinates
from anz_weather.common.granularity import Granularity, parse_granularity
from anz_weather.errors import InvalidCoordinate, InvalidParameter, MissingParameter
from anz_weather.forecast.url import ForecastOptions


class RequestParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    coords: Coordinates
    granularity: Granularity = Granularity.hourly
    variables: Optional[List[str]] = None
    start: Optional[str] = None
    end: Optional[str] = None

    def forecast_options(self) -> ForecastOptions:
        return ForecastOptions(variables=self.variables, start_date=self.start, end_date=self.end)


def split_list(raw: Optional[str]) -> Optional[List[str]]:
    """``"a,,b"`` -> ``["a", "b"]``; absent stays None, ``""`` becomes ``[]``."""
    if raw is None:
        return None
    return [v.strip() for v in raw.split(",") if v.strip()]


def _coordinate(raw: str) -> float:
    try:
        v = float(raw)
    except (TypeError, ValueError):
        raise InvalidCoordinate() from None
    if not math.isfinite(v):
        raise InvalidCoordinate()
    return v


def parse_iso_date(name: str, raw: str) -> date:
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        raise InvalidParameter(f"Invalid parameter: {name} must be a YYYY-MM-DD date") from None


def _optional_date(query: Mapping[str, str], name: str) -> Optional[str]:
    raw = query.get(name)
    if not raw:
        return None
    return parse_iso_date(name, raw).isoformat()


def parse_weather_query(query: Mapping[str, str]) -> RequestParameters:
    lat_raw = (query.get("lat") or "").strip()
    lon_raw = (query.get("lon") or "").strip()
    if not lat_raw or not lon_raw:
        raise MissingParameter()

    coords = Coordinates(lat=_coordinate(lat_raw), lon=_coordinate(lon_raw))

    try:
        granularity = parse_granularity(query.get("gran") or Granularity.hourly.value)
    except ValueError as e:
        raise InvalidParameter(f"Invalid parameter: {e}") from None

    return RequestParameters(
        coords=coords,
        granularity=granularity,
        variables=split_list(query.get("vars")),
        start=_optional_date(query, "start"),
        end=_optional_date(query, "end"),
    )


def default_date_range(today: Optional[date] = None, days: int = 7) -> Tuple[str, str]:
    start = today or date.today()
    return start.isoformat(), (start + timedelta(days=days)).isoformat()


def validate_date_range(start: str, end: str, max_days: int = 30) -> Tuple[str, str]:
    """Check ``start <= end`` and a span of at most ``max_days`` days."""
    d0 = parse_iso_date("start", start)
    d1 = parse_iso_date("end", end)
    if d0 > d1:
        raise InvalidParameter("Invalid parameter: start date must be before end date")
    span = (d1 - d0).days
    if span > max_days:
        raise InvalidParameter(
            f"Invalid parameter: date range exceeds maximum of {max_days} days ({span} days)"
        )
    return d0.isoformat(), d1.isoformat()
