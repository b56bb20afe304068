"""Serve an MCPServer over stdio using the MCP Python SDK."""

import logging
from typing import Any

import anyio
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from ..config import SERVER_NAME, SERVER_VERSION
from .base import MCPServer, ToolDef, ToolResult

logger = logging.getLogger(__name__)


def to_sdk_tool(tool: ToolDef) -> types.Tool:
    """Convert a ToolDef to the SDK's Tool model."""
    return types.Tool(**tool.to_mcp_format())


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    """Convert a ToolResult to a protocol-level CallToolResult.

    Failures are still successful protocol responses, flagged with isError.
    """
    text = result.to_string() if result.success else (result.error or "")
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=not result.success,
    )


def build_app(
    server: MCPServer,
    name: str = SERVER_NAME,
    version: str = SERVER_VERSION,
) -> Server:
    """Register the server's tools on a low-level SDK Server."""
    app = Server(name, version=version)

    @app.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [to_sdk_tool(tool) for tool in server.list_tools()]

    # Argument checking is left to the MCPServer so it can word its own errors
    @app.call_tool(validate_input=False)
    async def call_tool(tool_name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        logger.info(f"Calling tool {tool_name}")
        result = server.call_tool(tool_name, arguments or {})
        if not result.success:
            logger.info(f"Tool {tool_name} failed: {result.error}")
        return to_call_tool_result(result)

    return app


async def _run(app: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())


def serve(server: MCPServer) -> None:
    """Run the request/response loop on stdin/stdout until EOF."""
    app = build_app(server)
    logger.info(f"Starting {app.name} on stdio")
    try:
        anyio.run(_run, app)
    finally:
        server.close()
