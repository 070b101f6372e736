import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from anz_weather.common.granularity import Granularity, default_variables
from anz_weather.common.locations import DEFAULT_LOCATION_ID, get_location
from anz_weather.errors import WeatherApiError
from anz_weather.http.retry import Sleep
from anz_weather.weather.alerts import detect_all_alerts, rainy_days_this_month, to_series
from anz_weather.weather.params import RequestParameters
from anz_weather.weather.service import fetch_weather

logger = logging.getLogger(__name__)


async def _city_weather(
    city_id: str,
    granularity: Granularity,
    variables: List[str],
    start: str,
    end: str,
    client: httpx.AsyncClient,
    sleep: Optional[Sleep] = None,
) -> Optional[Dict[str, Any]]:
    location = get_location(city_id)
    if location is None:
        logger.warning("Skipping unknown city %r", city_id)
        return None

    params = RequestParameters(
        coords=location.coords,
        granularity=granularity,
        variables=variables,
        start=start,
        end=end,
    )
    try:
        data = await fetch_weather(params, client, sleep=sleep)
    except WeatherApiError as e:
        logger.warning("Skipping %s: %s (%s)", city_id, e.error, e.extra or "")
        return None

    out: Dict[str, Any] = {"id": city_id, "label": location.label, "data": data}
    if granularity == Granularity.daily:
        out["alerts"] = [a.model_dump(mode="json") for a in detect_all_alerts(data)]
        out["rainy_days_this_month"] = rainy_days_this_month(data)
    else:
        out["series"] = {v: to_series(data, v) for v in variables}
    return out


async def build_dashboard(
    cities: Optional[List[str]],
    granularity: Granularity,
    variables: Optional[List[str]],
    start: str,
    end: str,
    client: httpx.AsyncClient,
    *,
    sleep: Optional[Sleep] = None,
) -> Dict[str, Any]:
    """Fetch every requested preset city concurrently; failures are dropped."""
    city_ids = cities or [DEFAULT_LOCATION_ID]
    vars_ = default_variables(granularity) if variables is None else variables

    results = await asyncio.gather(
        *(_city_weather(c, granularity, vars_, start, end, client, sleep) for c in city_ids),
        return_exceptions=True,
    )

    cities_out: List[Dict[str, Any]] = []
    for city_id, r in zip(city_ids, results):
        if isinstance(r, Exception):
            logger.warning("Skipping %s: %r", city_id, r)
        elif isinstance(r, BaseException):
            raise r
        elif r is not None:
            cities_out.append(r)

    return {
        "granularity": granularity.value,
        "variables": vars_,
        "start": start,
        "end": end,
        "cities": cities_out,
    }
