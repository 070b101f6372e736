import logging
from typing import Any, Dict, Optional

import httpx

from anz_weather.common.geo import is_valid_region
from anz_weather.errors import OutOfRegion, SchemaMismatch, UpstreamUnavailable
from anz_weather.forecast.schema import SchemaError, validate_payload
from anz_weather.forecast.url import build_forecast_url
from anz_weather.http.retry import RetryError, Sleep, fetch_with_retry
from anz_weather.settings import S
from anz_weather.weather.params import RequestParameters

logger = logging.getLogger(__name__)


async def fetch_weather(
    params: RequestParameters,
    client: httpx.AsyncClient,
    *,
    sleep: Optional[Sleep] = None,
) -> Dict[str, Any]:
    """Validate, fetch (with retry) and schema-check one forecast request.

    Returns the upstream payload unchanged. Raises a ``WeatherApiError``
    subclass for every failure; nothing goes out on the network for
    out-of-region coordinates.
    """
    if not is_valid_region(params.coords):
        raise OutOfRegion()

    url = build_forecast_url(params.coords, params.granularity, params.forecast_options())

    try:
        response = await fetch_with_retry(
            client,
            url,
            S.retry_max_attempts,
            base_delay=S.retry_base_delay_seconds,
            sleep=sleep,
        )
    except RetryError as e:
        logger.error("Upstream unavailable for %s: %s", url, e)
        if e.last_response is not None:
            raise UpstreamUnavailable("Upstream error", status=e.last_response.status_code) from e
        cause = e.__cause__ or e
        raise UpstreamUnavailable(message=str(cause) or repr(cause)) from e
    except httpx.RequestError as e:
        # Decoding failures and redirect loops; never retried.
        logger.error("Upstream request for %s failed: %r", url, e)
        raise UpstreamUnavailable(message=str(e) or repr(e)) from e

    try:
        payload = response.json()
    except ValueError as e:
        logger.error("Upstream returned non-JSON body for %s", url)
        raise UpstreamUnavailable(message=f"Upstream returned invalid JSON: {e}") from e

    try:
        return validate_payload(params.granularity, payload)
    except SchemaError as e:
        logger.error("Upstream %s response failed validation: %s", params.granularity.value, e)
        raise SchemaMismatch(details=e.issues) from e
