import pytest
from mcp.types import CallToolResult, TextContent

from uphold_mcp.server import ToolCallFailed, ToolServer, error_result


async def ok():
    return CallToolResult(content=[TextContent(type="text", text="[]")])


async def broken():
    return error_result("Failed to fetch assets: boom")


def test_duplicate_registration():
    server = ToolServer("test", "0.0.1")
    server.register_tool("get-assets", "Assets", ok)
    with pytest.raises(ValueError, match="already registered"):
        server.register_tool("get-assets", "Assets again", ok)


@pytest.mark.asyncio
async def test_dispatch_returns_content_on_success():
    server = ToolServer("test", "0.0.1")
    server.register_tool("get-assets", "Assets", ok)

    content = await server._dispatch("get-assets", None)

    assert [c.text for c in content] == ["[]"]


@pytest.mark.asyncio
async def test_dispatch_raises_error_text():
    server = ToolServer("test", "0.0.1")
    server.register_tool("get-assets", "Assets", broken)

    with pytest.raises(ToolCallFailed) as excinfo:
        await server._dispatch("get-assets", None)

    assert str(excinfo.value) == "Failed to fetch assets: boom"
