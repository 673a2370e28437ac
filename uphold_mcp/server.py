"""Thin tool host on top of the MCP low-level server.

Tools are registered with a name, a description, an optional pydantic model
describing their parameters, and an async handler that always returns a
``CallToolResult``.
"""
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ToolHandler = Callable[..., Awaitable[CallToolResult]]

EMPTY_INPUT_SCHEMA: Dict[str, Any] = {"type": "object", "properties": {}}


class ToolCallFailed(Exception):
    """Carries the text of an error result through the MCP dispatcher."""


def error_result(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=True)


@dataclass
class RegisteredTool:
    name: str
    description: str
    handler: ToolHandler
    params_model: Optional[Type[BaseModel]] = None

    def definition(self) -> Tool:
        schema = self.params_model.model_json_schema() if self.params_model else dict(EMPTY_INPUT_SCHEMA)
        return Tool(name=self.name, description=self.description, inputSchema=schema)


class ToolServer:
    def __init__(self, name: str, version: str):
        self.name = name
        self.version = version
        self._tools: Dict[str, RegisteredTool] = {}
        self._server = Server(name, version=version)
        self._server.list_tools()(self.list_tools)
        # Argument checking happens in call_tool against the pydantic model.
        self._server.call_tool(validate_input=False)(self._dispatch)

    def register_tool(self, name: str, description: str, handler: ToolHandler,
                      params_model: Optional[Type[BaseModel]] = None) -> None:
        if name in self._tools:
            raise ValueError(f"Tool already registered: {name}")
        self._tools[name] = RegisteredTool(name, description, handler, params_model)
        logger.debug("Registered tool %s", name)

    @property
    def tool_names(self) -> List[str]:
        return list(self._tools)

    async def list_tools(self) -> List[Tool]:
        return [tool.definition() for tool in self._tools.values()]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> CallToolResult:
        tool = self._tools.get(name)
        if tool is None:
            return error_result(f"Unknown tool: {name}")
        if tool.params_model is None:
            return await tool.handler()
        try:
            params = tool.params_model.model_validate(arguments or {})
        except ValidationError as e:
            return error_result(f"Invalid arguments for {name}: {e}")
        return await tool.handler(params)

    async def _dispatch(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        # The low-level server turns a raised exception into an isError result
        # whose only text segment is str(exc).
        result = await self.call_tool(name, arguments)
        if result.isError:
            raise ToolCallFailed(result.content[0].text)
        return list(result.content)

    async def run_stdio(self, on_connected: Optional[Callable[[], None]] = None) -> None:
        async with stdio_server() as (read_stream, write_stream):
            if on_connected is not None:
                on_connected()
            await self._server.run(read_stream, write_stream, self._server.create_initialization_options())
