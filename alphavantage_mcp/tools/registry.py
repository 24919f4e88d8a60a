"""Tool registry — decorator-based tool registration and lookup."""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Awaitable, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class ToolParam:
    name: str
    type: str = "string"
    description: str = ""
    required: bool = True
    enum: Optional[List[str]] = None
    pattern: Optional[str] = None

    def schema(self) -> Dict[str, Any]:
        prop: Dict[str, Any] = {"type": self.type, "description": self.description}
        if self.enum:
            prop["enum"] = list(self.enum)
        if self.pattern:
            prop["pattern"] = self.pattern
        return prop


@dataclass
class ToolResult:
    content: List[Dict[str, str]] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def ok(cls, text: str) -> "ToolResult":
        return cls(content=[{"type": "text", "text": text}])

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls(content=[{"type": "text", "text": text}], is_error=True)

    @property
    def text(self) -> str:
        """All text blocks joined by newline."""
        return "\n".join(c["text"] for c in self.content if c.get("type") == "text")


@dataclass
class ToolDef:
    name: str
    description: str
    params: List[ToolParam]
    handler: Callable[..., Awaitable[ToolResult]]

    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema describing the tool arguments (documentation only, not enforced)."""
        return {
            "type": "object",
            "properties": {p.name: p.schema() for p in self.params},
            "required": [p.name for p in self.params if p.required],
        }


# Insertion order is the listing order
_tools: Dict[str, ToolDef] = {}


def register_tool(
    name: str,
    description: str = "",
    params: Optional[List[ToolParam]] = None,
):
    """Decorator to register a tool function."""
    def decorator(func):
        tool = ToolDef(
            name=name,
            description=description or func.__doc__ or "",
            params=params or [],
            handler=func,
        )
        _tools[name] = tool
        logger.debug(f"Registered tool: {name}")
        return func
    return decorator


def get_tool(name: str) -> Optional[ToolDef]:
    return _tools.get(name)


def list_tools() -> List[ToolDef]:
    return list(_tools.values())
