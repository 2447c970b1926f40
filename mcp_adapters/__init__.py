"""
MCP tool adapters: MCP server tools as LangChain tools.

Architecture:
    ┌────────────────┐  list / call / read  ┌─────────────────┐
    │   LangChain    │ ──────────────────── │   MCP server    │
    │ StructuredTool │    ClientSession     │ (any transport) │
    └────────────────┘                      └─────────────────┘

load_mcp_tools() reads a server's catalog and wraps each tool in a
StructuredTool. Calling that tool sends tools/call over the session and
converts the result into LangChain's (content, artifact) pair:

    content    a string for a single text block, otherwise a list of
               text / image_url fragments
    artifact   the result's embedded resources, read from the server
               when a block only references one by URI

The session itself (transport, lifecycle) is owned by the caller.
"""

import logging

from mcp_adapters.config import FailPolicy, default_fail_policy
from mcp_adapters.connection import McpConnection
from mcp_adapters.content import classify_content, resolve_resource
from mcp_adapters.exceptions import (
    InvalidResultError,
    InvocationError,
    McpToolError,
    SchemaConversionError,
    ToolLoadError,
    UpstreamToolError,
)
from mcp_adapters.invoker import McpToolInvoker
from mcp_adapters.loader import load_all_mcp_tools, load_mcp_tools, mcp_to_langchain_tool
from mcp_adapters.results import convert_call_tool_result
from mcp_adapters.schema import json_schema_to_model
from mcp_adapters.trace import TraceLog

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FailPolicy",
    "default_fail_policy",
    "McpConnection",
    "classify_content",
    "resolve_resource",
    "convert_call_tool_result",
    "json_schema_to_model",
    "McpToolInvoker",
    "mcp_to_langchain_tool",
    "load_mcp_tools",
    "load_all_mcp_tools",
    "TraceLog",
    "McpToolError",
    "InvalidResultError",
    "UpstreamToolError",
    "InvocationError",
    "ToolLoadError",
    "SchemaConversionError",
]
