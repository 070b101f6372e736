import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from anz_weather.errors import WeatherApiError
from anz_weather.http import client as http_client
from anz_weather.settings import S
from anz_weather.weather.routes import router as weather_router


logging.basicConfig(level=S.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

logger.info("CORS config: origins=%s regex=%s", S.cors_origins, S.cors_origin_regex)


# ----------------------------
# App
# ----------------------------

app = FastAPI(title="ANZ Weather API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=(["*"] if ("*" in S.cors_origins) else S.cors_origins),
    allow_origin_regex=S.cors_origin_regex,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.exception_handler(WeatherApiError)
async def weather_api_error(request: Request, exc: WeatherApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.error)
    else:
        logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.error)
    return JSONResponse(status_code=exc.status_code, content=exc.body())


# ----------------------------
# Startup / shutdown
# ----------------------------

@app.on_event("startup")
async def startup() -> None:
    await http_client.init_http_client()


@app.on_event("shutdown")
async def shutdown() -> None:
    await http_client.close_http_client()


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {
        "ok": http_client.http_client is not None,
        "upstream": S.open_meteo_base_url,
        "retry_max_attempts": S.retry_max_attempts,
        "cache_max_age_seconds": S.cache_max_age_seconds,
    }


app.include_router(weather_router)
