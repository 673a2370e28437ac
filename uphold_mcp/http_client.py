import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from uphold_mcp.errors import UpholdApiError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "http-client/1.0.0"


@dataclass(frozen=True)
class HttpClientConfig:
    base_url: str
    user_agent: Optional[str] = None
    # Lets callers route requests through a custom httpx transport (tests use MockTransport).
    transport: Optional[httpx.AsyncBaseTransport] = None


async def request(endpoint: str, config: HttpClientConfig) -> Any:
    """GET ``config.base_url + endpoint`` and return the decoded JSON body.

    The endpoint is appended verbatim, so path segments must already be
    percent-encoded. Any non-2xx answer raises :class:`UpholdApiError`.
    """
    url = f"{config.base_url}{endpoint}"
    headers = {
        "Content-Type": "application/json",
        "User-Agent": config.user_agent or DEFAULT_USER_AGENT,
    }
    async with httpx.AsyncClient(transport=config.transport) as client:
        async with client.stream("GET", url, headers=headers) as resp:
            if not resp.is_success:
                try:
                    await resp.aread()
                    error_text = resp.text
                except (httpx.HTTPError, httpx.StreamError):
                    logger.debug("Could not read error body from %s", url, exc_info=True)
                    error_text = "Unknown error"
                raise UpholdApiError(
                    f"API error: {resp.status_code} {resp.reason_phrase} - {error_text}",
                    resp.status_code,
                    endpoint,
                )
            await resp.aread()
            return resp.json()
