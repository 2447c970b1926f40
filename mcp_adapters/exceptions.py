"""
Error taxonomy for the MCP → LangChain adapter layer.

Every error raised on the conversion and invocation path derives from
McpToolError, which is a LangChain ToolException. A caller can tell
"the tool said no" (UpstreamToolError) from "the plumbing broke"
(InvocationError / InvalidResultError) with isinstance checks alone.
"""

from __future__ import annotations

from langchain_core.tools import ToolException


class McpToolError(ToolException):
    """Base class for errors raised while loading or calling an MCP tool."""

    def __init__(self, message: str, server_name: str = "", tool_name: str = ""):
        super().__init__(message)
        self.server_name = server_name
        self.tool_name = tool_name


class InvalidResultError(McpToolError):
    """The server's response does not have the shape of a tool call result."""

    def __init__(self, server_name: str, tool_name: str, detail: str):
        super().__init__(
            f"MCP tool '{tool_name}' on server '{server_name}' returned an "
            f"invalid result - {detail}",
            server_name,
            tool_name,
        )
        self.detail = detail


class UpstreamToolError(McpToolError):
    """
    The remote tool reported failure (isError=true).

    `message` holds the tool's own error text, suitable for showing
    directly to a user or an agent loop.
    """

    def __init__(self, server_name: str, tool_name: str, message: str):
        super().__init__(
            f"MCP tool '{tool_name}' on server '{server_name}' returned an "
            f"error: {message}",
            server_name,
            tool_name,
        )
        self.message = message


class InvocationError(McpToolError):
    """The call could not be completed, or produced an unrecognised content kind."""


class ToolLoadError(McpToolError):
    """A tool advertised by the server could not be turned into a local tool."""

    def __init__(self, server_name: str, tool_name: str, cause: BaseException):
        super().__init__(
            f"Failed to load tool \"{tool_name}\" from server '{server_name}': {cause}",
            server_name,
            tool_name,
        )
        self.cause = cause


class SchemaConversionError(ValueError):
    """A tool's declared input schema cannot be converted to a validation model."""
