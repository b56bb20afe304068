"""MCP server base classes."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel


class ToolParameter(BaseModel):
    """A parameter for a tool."""

    name: str
    type: str
    description: str
    required: bool = True
    default: Any = None


class ToolDef(BaseModel):
    """Definition of a tool that can be called by an MCP host."""

    name: str
    description: str
    parameters: list[ToolParameter]

    def _param_to_json_schema(self, param: ToolParameter) -> dict:
        """Convert a ToolParameter to JSON schema format."""
        schema = {
            "type": param.type,
            "description": param.description,
        }
        if param.default is not None:
            schema["default"] = param.default
        return schema

    def input_schema(self) -> dict:
        """Build the JSON schema for the tool's arguments."""
        return {
            "type": "object",
            "properties": {p.name: self._param_to_json_schema(p) for p in self.parameters},
            "required": [p.name for p in self.parameters if p.required],
        }

    def to_mcp_format(self) -> dict:
        """Convert to the shape used by an MCP `tools/list` response."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


class ToolResult(BaseModel):
    """Result of a tool call."""

    success: bool
    data: Any = None
    error: str | None = None

    def to_string(self) -> str:
        """Convert result to string for the calling host."""
        if not self.success:
            return f"Error: {self.error}"
        if isinstance(self.data, str):
            return self.data
        return str(self.data)


class MCPServer(ABC):
    """Abstract base class for MCP servers."""

    @abstractmethod
    def list_tools(self) -> list[ToolDef]:
        """List all available tools."""
        pass

    @abstractmethod
    def call_tool(self, name: str, args: dict[str, Any]) -> ToolResult:
        """Call a tool by name with arguments."""
        pass

    def get_tool(self, name: str) -> ToolDef | None:
        """Get a tool definition by name."""
        for tool in self.list_tools():
            if tool.name == name:
                return tool
        return None

    def close(self) -> None:
        """Clean up resources."""
        pass
