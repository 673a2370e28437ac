import json
import logging
from typing import Any, Awaitable, Callable

from mcp.types import CallToolResult, TextContent

from uphold_mcp.client import UpholdClient
from uphold_mcp.errors import UpholdApiError
from uphold_mcp.schemas import TickerByCurrencyParams, TickerPairParams
from uphold_mcp.server import ToolServer, error_result

logger = logging.getLogger(__name__)


def to_json_text(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


async def fetch_as_result(subject: str, fetch: Callable[[], Awaitable[Any]]) -> CallToolResult:
    """Run ``fetch`` and wrap its JSON payload, or its failure, as a tool result."""
    try:
        data = await fetch()
    except UpholdApiError as e:
        logger.warning("Uphold API call for %s failed: %s", subject, e.message)
        return error_result(f"Failed to fetch {subject}: {e.message}")
    except Exception as e:
        logger.exception("Unexpected error fetching %s", subject)
        return error_result(f"Unexpected error: {e}")
    return CallToolResult(content=[TextContent(type="text", text=to_json_text(data))])


def register_assets_tool(server: ToolServer, client: UpholdClient) -> None:
    async def get_assets() -> CallToolResult:
        return await fetch_as_result("assets", client.get_assets)

    server.register_tool(
        "get-assets",
        "Get all supported assets on Uphold. Returns a list of all cryptocurrencies and fiat "
        "currencies available for trading, including their codes, names, status, and type.",
        get_assets,
    )


def register_countries_tool(server: ToolServer, client: UpholdClient) -> None:
    async def get_countries() -> CallToolResult:
        return await fetch_as_result("countries", client.get_countries)

    server.register_tool(
        "get-countries",
        "Get all supported countries on Uphold. Returns a list of countries where Uphold services "
        "are available, including country codes, names, and local currencies.",
        get_countries,
    )


def register_ticker_tools(server: ToolServer, client: UpholdClient, include_all_tickers: bool = True) -> None:
    if include_all_tickers:
        async def get_all_tickers() -> CallToolResult:
            return await fetch_as_result("tickers", client.get_all_tickers)

        server.register_tool(
            "get-all-tickers",
            "Get exchange rates for all currency pairs on Uphold. Returns ask and bid prices for "
            "every available trading pair. Useful for getting a complete market overview.",
            get_all_tickers,
        )

    async def get_ticker_by_currency(params: TickerByCurrencyParams) -> CallToolResult:
        return await fetch_as_result(
            f"ticker for {params.currency}",
            lambda: client.get_ticker_by_currency(params.currency),
        )

    server.register_tool(
        "get-ticker-by-currency",
        "Get exchange rates for a specific currency against all other currencies on Uphold. "
        "For example, get all BTC trading pairs or all USD trading pairs.",
        get_ticker_by_currency,
        TickerByCurrencyParams,
    )

    async def get_ticker_pair(params: TickerPairParams) -> CallToolResult:
        return await fetch_as_result(
            f"ticker for pair {params.pair}",
            lambda: client.get_ticker_pair(params.pair),
        )

    server.register_tool(
        "get-ticker-pair",
        "Get the exchange rate for a specific currency pair on Uphold. Returns the ask and bid "
        "prices for the pair. The pair format is the two currency codes concatenated (e.g., "
        "'BTCUSD' for Bitcoin to US Dollar).",
        get_ticker_pair,
        TickerPairParams,
    )


def register_tools(server: ToolServer, client: UpholdClient, include_all_tickers: bool = True) -> None:
    register_assets_tool(server, client)
    register_countries_tool(server, client)
    register_ticker_tools(server, client, include_all_tickers=include_all_tickers)
