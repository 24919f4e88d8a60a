"""Tool system — registry and executor."""
from .registry import register_tool, get_tool, list_tools, ToolResult, ToolParam, ToolDef
from .executor import execute_tool, MissingApiKeyError

# Auto-import builtin tools to trigger @register_tool decorators
from .builtin import *  # noqa
