"""
Conversion of an MCP CallToolResult into LangChain's content-and-artifact pair.

    content, artifacts = await convert_call_tool_result("math", "add", result, session)

`content` is a plain string when the tool answered with exactly one text
block, otherwise a list of message fragments. `artifacts` holds the
tool's resource blocks, fetched from the server where needed.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Union

from mcp.types import CallToolResult, EmbeddedResource

from mcp_adapters.connection import McpConnection, protocol_field
from mcp_adapters.content import classify_content, resolve_resource
from mcp_adapters.exceptions import InvalidResultError, UpstreamToolError

logger = logging.getLogger(__name__)

ToolContent = Union[str, list[dict[str, Any]]]
ToolOutput = tuple[ToolContent, list[EmbeddedResource]]

MESSAGE_KINDS = ("text", "image")
RESOURCE_KIND = "resource"


def error_text(content: list[Any]) -> str:
    """Join the text of an error result's blocks, one line per block."""
    return "\n".join(
        block.text if isinstance(getattr(block, "text", None), str) else ""
        for block in content
    )


async def convert_call_tool_result(
    server_name: str,
    tool_name: str,
    result: CallToolResult | None,
    connection: McpConnection,
) -> ToolOutput:
    """
    Validate a tool call result and split it into content and artifacts.

    Args:
        server_name: Server the tool lives on (used in error messages)
        tool_name: Tool that produced the result
        result: The raw result returned by the connection
        connection: Used to fetch resources that are only referenced by URI

    Returns:
        (content, artifacts)

    Raises:
        InvalidResultError: result missing, or content not a list
        UpstreamToolError: the tool reported isError=true
        InvocationError: a text/image block could not be classified
    """
    if result is None:
        raise InvalidResultError(
            server_name, tool_name, "tool call response was None"
        )

    content = getattr(result, "content", None)
    if not isinstance(content, (list, tuple)):
        raise InvalidResultError(
            server_name,
            tool_name,
            f"expected a list of content, but was {type(content).__name__}",
        )

    if protocol_field(result, "isError", "is_error", False):
        raise UpstreamToolError(server_name, tool_name, error_text(content))

    fragments: list[dict[str, Any]] = []
    resources: list[EmbeddedResource] = []
    for block in content:
        kind = getattr(block, "type", None)
        if kind in MESSAGE_KINDS:
            fragments.append(classify_content(block, server_name, tool_name))
        elif kind == RESOURCE_KIND:
            resources.append(block)
        else:
            logger.info(
                f"Skipping '{kind}' content returned by tool {tool_name} "
                f"on server {server_name}"
            )

    resolved = await _resolve_all(resources, connection)
    artifacts = [part for parts in resolved for part in parts]

    if len(fragments) == 1 and fragments[0]["type"] == "text":
        return fragments[0]["text"], artifacts

    return fragments, artifacts


async def _resolve_all(
    resources: list[EmbeddedResource],
    connection: McpConnection,
) -> list[list[EmbeddedResource]]:
    """
    Resolve every resource block concurrently, keeping block order.

    If one read fails, the reads still in flight are cancelled before
    the error propagates.
    """
    tasks = [
        asyncio.ensure_future(resolve_resource(resource, connection))
        for resource in resources
    ]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
