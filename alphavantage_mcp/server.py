"""MCP stdio server — lists registered tools and routes calls to the executor."""
import logging
from typing import Any, List

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from . import __version__
from .config import settings
from .tools import execute_tool, list_tools as registered_tools, ToolResult

logger = logging.getLogger(__name__)

app = Server("alpha_vantage", version=__version__)


def to_call_tool_result(result: ToolResult) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=c["text"]) for c in result.content],
        isError=result.is_error,
    )


@app.list_tools()
async def list_tools() -> List[Tool]:
    return [
        Tool(name=t.name, description=t.description, inputSchema=t.input_schema())
        for t in registered_tools()
    ]


# Arguments reach the handlers as sent; the schemas are descriptive only
@app.call_tool(validate_input=False)
async def call_tool(name: str, arguments: Any) -> CallToolResult:
    result = await execute_tool(name, arguments or {}, settings.alphavantage_api_key)
    return to_call_tool_result(result)


async def serve() -> None:
    """Run the MCP server over stdin/stdout until the client disconnects."""
    logger.info(f"Alpha Vantage MCP server {__version__} starting on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())
