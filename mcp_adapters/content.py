"""
Per-block content handling for MCP tool results.

Two pieces live here:

  classify_content   text / image block → LangChain message fragment
  resolve_resource   resource block     → one or more artifact blocks,
                     fetching the resource from the server when the
                     block only references it by URI
"""

from __future__ import annotations

from typing import Any

from mcp.types import EmbeddedResource, ImageContent, TextContent

from mcp_adapters.connection import McpConnection, protocol_field
from mcp_adapters.exceptions import InvocationError


def classify_content(
    content: TextContent | ImageContent,
    server_name: str,
    tool_name: str,
) -> dict[str, Any]:
    """
    Convert a text or image block into a message content fragment.

    Images become data URIs; the base64 payload is passed through
    without validation.

    Raises:
        InvocationError: if the block is of any other kind.
    """
    kind = getattr(content, "type", None)

    if kind == "text":
        return {"type": "text", "text": content.text}

    if kind == "image":
        mime_type = protocol_field(content, "mimeType", "mime_type")
        return {
            "type": "image_url",
            "image_url": {"url": f"data:{mime_type};base64,{content.data}"},
        }

    raise InvocationError(
        f"MCP tool '{tool_name}' on server '{server_name}' returned an "
        f"invalid result - expected a text or image content, but was {kind}",
        server_name,
        tool_name,
    )


def is_resource_reference(resource: EmbeddedResource) -> bool:
    """True when the block names a URI but carries no inline payload."""
    return (
        not getattr(resource, "blob", None)
        and not getattr(resource, "text", None)
        and bool(getattr(resource, "uri", None))
    )


async def resolve_resource(
    resource: EmbeddedResource,
    connection: McpConnection,
) -> list[EmbeddedResource]:
    """
    Turn a resource block into its final artifact blocks.

    Inline blocks (and blocks with nothing to fetch) come back unchanged.
    Reference blocks are read from the server; each part of the response
    is wrapped as its own resource block, in response order. Read errors
    propagate to the caller.
    """
    if not is_resource_reference(resource):
        return [resource]

    response = await connection.read_resource(resource.resource.uri)
    return [
        EmbeddedResource(type="resource", resource=part)
        for part in response.contents
    ]
