"""
Invocation of a single MCP tool.

A McpToolInvoker is bound to one (server, tool, connection) triple when
the catalog is loaded. Its `invoke` method is what the LangChain tool
awaits:

    invoker = McpToolInvoker("math", "add", session)
    content, artifacts = await invoker.invoke(a=2, b=3)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from mcp_adapters.connection import McpConnection
from mcp_adapters.exceptions import InvocationError, UpstreamToolError
from mcp_adapters.results import ToolOutput, convert_call_tool_result
from mcp_adapters.trace import TraceLog, default_trace


@dataclass(frozen=True)
class McpToolInvoker:
    """
    Calls one remote tool and converts its result.

    Holds no per-call state, so one invoker can serve concurrent calls.
    When `input_model` is set, arguments are checked against it and then
    sent exactly as supplied.
    """

    server_name: str
    tool_name: str
    connection: McpConnection = field(repr=False)
    trace: TraceLog = field(default_factory=default_trace, repr=False, compare=False)
    input_model: type[BaseModel] | None = field(default=None, repr=False, compare=False)

    async def invoke(self, **arguments: Any) -> ToolOutput:
        """
        Call the tool with `arguments` and return (content, artifacts).

        Raises:
            ValidationError: arguments do not match input_model
            InvocationError: the call itself failed
            UpstreamToolError / InvalidResultError: see convert_call_tool_result
        """
        if self.input_model is not None:
            self.input_model.model_validate(arguments)

        try:
            self.trace.info(
                f"Calling tool {self.tool_name}({json.dumps(arguments, default=str)})"
            )
            result = await self.connection.call_tool(self.tool_name, arguments)
        except Exception as e:
            self.trace.error(f"Error calling tool {self.tool_name}: {e}")
            if isinstance(e, UpstreamToolError):
                raise
            raise InvocationError(
                f"Error calling tool {self.tool_name}: {e}",
                self.server_name,
                self.tool_name,
            ) from e

        return await convert_call_tool_result(
            self.server_name, self.tool_name, result, self.connection
        )
