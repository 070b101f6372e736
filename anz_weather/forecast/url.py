from typing import List, Optional, Tuple
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field

from anz_weather.common.geo import Coordinates, is_valid_region
from anz_weather.common.granularity import Granularity, default_variables
from anz_weather.errors import OutOfRegion
from anz_weather.settings import S


class RegionOutOfBounds(OutOfRegion):
    """Raised by the URL builder for coordinates outside both regions."""


class ForecastOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    variables: Optional[List[str]] = Field(
        default=None, description="Upstream variable names; None => granularity defaults"
    )
    start_date: Optional[str] = Field(default=None, description="YYYY-MM-DD")
    end_date: Optional[str] = Field(default=None, description="YYYY-MM-DD")
    timezone: Optional[str] = Field(default=None, description="IANA name or 'auto'")


def _coord_str(v: float) -> str:
    # -33.0 -> "-33", -36.8509 -> "-36.8509"
    return str(int(v)) if float(v).is_integer() else repr(float(v))


def build_forecast_url(
    coords: Coordinates,
    granularity: Granularity,
    options: Optional[ForecastOptions] = None,
    *,
    base_url: Optional[str] = None,
) -> str:
    if not is_valid_region(coords):
        raise RegionOutOfBounds()

    opts = options or ForecastOptions()
    gran = Granularity(granularity)
    variables = default_variables(gran) if opts.variables is None else list(opts.variables)

    params: List[Tuple[str, str]] = [
        ("latitude", _coord_str(coords.lat)),
        ("longitude", _coord_str(coords.lon)),
        ("timezone", opts.timezone or S.default_timezone),
        (gran.value, ",".join(variables)),
    ]
    if opts.start_date:
        params.append(("start_date", opts.start_date))
    if opts.end_date:
        params.append(("end_date", opts.end_date))

    base = (base_url or S.open_meteo_base_url).rstrip("?")
    return f"{base}?{urlencode(params)}"
