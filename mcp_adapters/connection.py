"""
The slice of an MCP client session this package talks to.

mcp.ClientSession satisfies it as-is. Connection lifecycle, transport
selection and retries belong to whoever owns the session.
"""

from __future__ import annotations

from typing import Any, Protocol

from mcp.types import CallToolResult, ListToolsResult, ReadResourceResult


class McpConnection(Protocol):
    """An initialised connection to one MCP server."""

    async def list_tools(self) -> ListToolsResult:
        """Return the tools the server currently advertises."""
        ...

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None = None
    ) -> CallToolResult:
        """Call a tool by name. Raises on transport-level failure."""
        ...

    async def read_resource(self, uri: Any) -> ReadResourceResult:
        """Fetch the contents of a resource by URI."""
        ...


def protocol_field(obj: Any, camel: str, snake: str, default: Any = None) -> Any:
    """
    Read a protocol field under either spelling.

    MCP payloads use camelCase (`isError`, `mimeType`, `inputSchema`);
    some SDK releases expose the same fields in snake_case.
    """
    value = getattr(obj, camel, None)
    if value is None:
        value = getattr(obj, snake, None)
    return default if value is None else value
