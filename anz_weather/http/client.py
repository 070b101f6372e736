from typing import Optional

import httpx

from anz_weather.settings import S


http_client: Optional[httpx.AsyncClient] = None


async def init_http_client() -> None:
    global http_client

    http_client = httpx.AsyncClient(
        timeout=S.upstream_timeout_seconds,
        follow_redirects=True,
        headers={"Accept": "application/json"},
    )


async def close_http_client() -> None:
    global http_client
    if http_client is not None:
        await http_client.aclose()
        http_client = None


def get_http_client() -> httpx.AsyncClient:
    if http_client is None:
        raise RuntimeError("HTTP client not initialized")
    return http_client
