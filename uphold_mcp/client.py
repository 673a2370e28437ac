from typing import List, Optional
from urllib.parse import quote

import httpx

from uphold_mcp.errors import ConfigurationError
from uphold_mcp.http_client import HttpClientConfig, request
from uphold_mcp.schemas import Asset, Country, Ticker

# Characters encodeURIComponent leaves alone on top of quote()'s own safe set.
_COMPONENT_SAFE = "!~*'()"


def encode_path_segment(value: str) -> str:
    return quote(value, safe=_COMPONENT_SAFE)


class UpholdClient:
    """Client for Uphold's public, unauthenticated REST endpoints.

    See https://docs.uphold.com/ for the payloads.
    """

    def __init__(self, base_url: Optional[str], user_agent: Optional[str] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        if not base_url or not base_url.strip():
            raise ConfigurationError("UPHOLD_API_BASE_URL environment variable is required")
        self.config = HttpClientConfig(base_url=base_url, user_agent=user_agent, transport=transport)

    async def get_assets(self) -> List[Asset]:
        """All supported assets, crypto and fiat."""
        return await request("/assets", self.config)

    async def get_countries(self) -> List[Country]:
        return await request("/countries", self.config)

    async def get_all_tickers(self) -> List[Ticker]:
        return await request("/ticker", self.config)

    async def get_ticker_by_currency(self, currency: str) -> List[Ticker]:
        """Tickers for ``currency`` (e.g. 'USD', 'BTC') against every other currency."""
        return await request(f"/ticker/{encode_path_segment(currency)}", self.config)

    async def get_ticker_pair(self, pair: str) -> Ticker:
        """Ticker for a single pair such as 'BTCUSD'."""
        return await request(f"/ticker/{encode_path_segment(pair)}", self.config)
