import asyncio
import logging
from typing import Awaitable, Callable, Optional

import httpx

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class RetryError(Exception):
    """All attempts failed.

    ``last_response`` is set when the final attempt got an error status;
    when it raised a transport error instead, that error is ``__cause__``.
    """

    def __init__(self, attempts: int, last_response: Optional[httpx.Response] = None):
        self.attempts = attempts
        self.last_response = last_response
        if last_response is not None:
            msg = f"All {attempts} attempts failed (last status {last_response.status_code})"
        else:
            msg = f"All {attempts} attempts failed"
        super().__init__(msg)


def backoff_delay(attempt: int, base_delay: float = 1.0) -> float:
    """Delay after failed attempt ``attempt`` (0-indexed): 1s, 2s, 4s, ..."""
    return base_delay * (2 ** attempt)


async def fetch_with_retry(
    client: httpx.AsyncClient,
    url: str,
    max_attempts: int = 3,
    *,
    base_delay: float = 1.0,
    sleep: Optional[Sleep] = None,
) -> httpx.Response:
    sleep = sleep or asyncio.sleep
    max_attempts = max(1, int(max_attempts))

    last_response: Optional[httpx.Response] = None
    last_error: Optional[httpx.TransportError] = None

    for attempt in range(max_attempts):
        try:
            response = await client.get(url)
        except httpx.TransportError as e:
            last_response, last_error = None, e
            logger.warning("Upstream attempt %d/%d failed: %r", attempt + 1, max_attempts, e)
        else:
            if not response.is_error:
                return response
            last_response, last_error = response, None
            logger.warning(
                "Upstream attempt %d/%d returned HTTP %d", attempt + 1, max_attempts, response.status_code
            )

        if attempt < max_attempts - 1:
            await sleep(backoff_delay(attempt, base_delay))

    raise RetryError(max_attempts, last_response) from last_error
