"""Tool executor — dispatches a tool call by name to its registered handler."""
import logging
import time
from typing import Any, Dict, Optional

from .registry import get_tool, ToolResult

logger = logging.getLogger(__name__)


class MissingApiKeyError(RuntimeError):
    """No Alpha Vantage API key configured; no tool can be served."""


async def execute_tool(tool_name: str, args: Optional[Dict[str, Any]], api_key: str) -> ToolResult:
    """Execute a registered tool by name.

    Handlers convert their own failures into error results, so whatever they
    return is passed back unchanged.
    """
    if not api_key:
        raise MissingApiKeyError("ALPHAVANTAGE_API_KEY is not set")

    tool = get_tool(tool_name)
    if not tool:
        logger.warning(f"Unknown tool: {tool_name}")
        return ToolResult.error(f"Tool {tool_name} not found.")

    args = dict(args or {})
    args.pop("api_key", None)
    arg_str = ", ".join(f"{k}={v!r}" for k, v in args.items())
    logger.info(f"Executing tool: {tool_name}({arg_str})")
    t0 = time.monotonic()

    result = await tool.handler(api_key=api_key, **args)

    elapsed = time.monotonic() - t0
    logger.info(f"Tool {tool_name}: {elapsed:.1f}s -> {'error' if result.is_error else 'ok'}")
    return result
