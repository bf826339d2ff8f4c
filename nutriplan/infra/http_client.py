"""Shared outbound HTTP helpers for the provider adapters."""
import logging
from typing import Any, Optional

import httpx

from nutriplan.domain.errors import ProviderUnavailable
from nutriplan.utilities.config import PROVIDER_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


def create_http_client(timeout: Optional[float] = None, **kwargs) -> httpx.AsyncClient:
    """Return an AsyncClient with a bounded timeout for every provider call."""
    seconds = PROVIDER_TIMEOUT_SECONDS if timeout is None else timeout
    return httpx.AsyncClient(timeout=httpx.Timeout(seconds), **kwargs)


async def request_json(client: httpx.AsyncClient, provider: str, method: str, url: str, **kwargs) -> Any:
    """Send one request and return the decoded JSON body.

    Transport errors (timeouts included), non-2xx answers and bodies that are
    not JSON all raise ProviderUnavailable.
    """
    try:
        response = await client.request(method, url, **kwargs)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise ProviderUnavailable(provider, f"HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise ProviderUnavailable(provider, f"{type(e).__name__}: {e}") from e
    try:
        return response.json()
    except ValueError as e:
        raise ProviderUnavailable(provider, "response is not valid JSON") from e
