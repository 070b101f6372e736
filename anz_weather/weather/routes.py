from typing import Any, Dict

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from anz_weather.common.granularity import Granularity, parse_granularity
from anz_weather.common.locations import PRESETS
from anz_weather.errors import InvalidParameter
from anz_weather.http.client import get_http_client
from anz_weather.settings import S
from anz_weather.weather.dashboard import build_dashboard
from anz_weather.weather.params import default_date_range, parse_weather_query, split_list, validate_date_range
from anz_weather.weather.service import fetch_weather


router = APIRouter()


def _cache_headers() -> Dict[str, str]:
    return {"Cache-Control": f"public, max-age={S.cache_max_age_seconds}"}


@router.get("/api/weather")
async def weather(request: Request, client: httpx.AsyncClient = Depends(get_http_client)) -> JSONResponse:
    params = parse_weather_query(request.query_params)
    data = await fetch_weather(params, client)
    return JSONResponse(content=data, headers=_cache_headers())


@router.get("/api/locations")
async def locations() -> Dict[str, Any]:
    return {
        "ok": True,
        "locations": [{"id": k, **v.model_dump()} for k, v in PRESETS.items()],
    }


@router.get("/api/dashboard")
async def dashboard(request: Request, client: httpx.AsyncClient = Depends(get_http_client)) -> JSONResponse:
    q = request.query_params

    try:
        granularity = parse_granularity(q.get("gran") or Granularity.hourly.value)
    except ValueError as e:
        raise InvalidParameter(f"Invalid parameter: {e}") from None

    default_start, default_end = default_date_range(days=S.default_range_days)
    start, end = validate_date_range(
        q.get("start") or default_start,
        q.get("end") or default_end,
        max_days=S.max_date_range_days,
    )

    out = await build_dashboard(
        split_list(q.get("city")),
        granularity,
        split_list(q.get("vars")) or None,
        start,
        end,
        client,
    )
    return JSONResponse(content={"ok": True, **out}, headers=_cache_headers())
