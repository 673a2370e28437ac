import asyncio
import logging
import sys
from typing import Optional

from uphold_mcp import __version__
from uphold_mcp.client import UpholdClient
from uphold_mcp.config import Settings, settings as default_settings
from uphold_mcp.server import ToolServer
from uphold_mcp.tools import register_tools

logger = logging.getLogger("uphold_mcp")


def configure_logging(level: str) -> None:
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")
    # stdout carries the protocol; logs go to stderr only.
    logging.basicConfig(
        level=numeric_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def create_server(settings: Settings) -> ToolServer:
    client = UpholdClient(settings.UPHOLD_API_BASE_URL, user_agent=settings.USER_AGENT)
    server = ToolServer(settings.APP_NAME, __version__)
    register_tools(server, client, include_all_tickers=settings.ENABLE_ALL_TICKERS)
    return server


async def serve(settings: Settings) -> None:
    server = create_server(settings)

    def on_connected():
        logger.info("Uphold MCP Server started successfully")
        logger.info("Available tools: %s", ", ".join(server.tool_names))

    await server.run_stdio(on_connected)


def main(settings: Optional[Settings] = None) -> None:
    settings = settings or default_settings
    try:
        configure_logging(settings.LOG_LEVEL)
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Uphold MCP Server shutting down")
    except Exception:
        logger.exception("Fatal error starting Uphold MCP Server")
        sys.exit(1)


if __name__ == "__main__":
    main()
