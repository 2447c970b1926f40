"""
Loading MCP tool catalogs as LangChain tools.

Usage:
    from mcp_adapters import load_mcp_tools, load_all_mcp_tools

    # All tools from one server session
    tools = await load_mcp_tools("math", session)

    # Skip tools whose schema can't be converted instead of failing
    tools = await load_mcp_tools("math", session, "lenient")

    # Several servers at once, names prefixed "<server>__<tool>"
    tools = await load_all_mcp_tools(
        {"math": math_session, "files": files_session},
        prefix_tool_names=True,
    )

Each returned tool is a StructuredTool using the "content_and_artifact"
response format: awaiting it with a tool call yields a ToolMessage whose
content is the tool's text/image output and whose artifact is the list
of resource blocks.
"""

from __future__ import annotations

from collections.abc import Mapping

from langchain_core.tools import BaseTool, StructuredTool
from mcp.types import Tool as McpTool

from mcp_adapters.config import FailPolicy, default_fail_policy
from mcp_adapters.connection import McpConnection, protocol_field
from mcp_adapters.exceptions import ToolLoadError
from mcp_adapters.invoker import McpToolInvoker
from mcp_adapters.schema import input_schema_dict, json_schema_to_model
from mcp_adapters.trace import TraceLog, default_trace


def mcp_to_langchain_tool(
    server_name: str,
    tool: McpTool,
    connection: McpConnection,
    name: str | None = None,
    trace: TraceLog | None = None,
) -> StructuredTool:
    """
    Create a LangChain StructuredTool that proxies calls to an MCP tool.

    Args:
        server_name: Which server the tool lives on
        tool: The tool descriptor advertised by the server
        connection: Session used for the call and for resource reads
        name: Local tool name, if different from the remote one
        trace: Diagnostics sink for the bound invoker

    Returns:
        A StructuredTool bound to (server_name, tool.name, connection).

    Raises:
        SchemaConversionError: if the tool's input schema is malformed.
    """
    declared = protocol_field(tool, "inputSchema", "input_schema")
    input_model = json_schema_to_model(declared, f"{tool.name}_input")

    invoker = McpToolInvoker(
        server_name=server_name,
        tool_name=tool.name,
        connection=connection,
        trace=trace or default_trace(),
        input_model=input_model,
    )

    return StructuredTool(
        name=name or tool.name,
        description=getattr(tool, "description", None) or "",
        args_schema=input_schema_dict(declared),
        coroutine=invoker.invoke,
        response_format="content_and_artifact",
        metadata={"mcp_server": server_name, "mcp_tool": tool.name},
    )


async def load_mcp_tools(
    server_name: str,
    connection: McpConnection,
    fail_policy: FailPolicy | str | bool | None = None,
    name_prefix: str | None = None,
    trace: TraceLog | None = None,
) -> list[BaseTool]:
    """
    Fetch a server's tool catalog and wrap every tool as a LangChain tool.

    Tools without a name are dropped silently. Under FailPolicy.STRICT the
    first tool that fails to build aborts the load with ToolLoadError;
    under FailPolicy.LENIENT it is logged and skipped.

    Args:
        server_name: Identity of the server, used in errors and metadata
        connection: An initialised session with that server
        fail_policy: FailPolicy, its string value, or a boolean
                     (True = strict). Defaults to the environment setting.
        name_prefix: Prepended to every local tool name
        trace: Diagnostics sink (defaults to the package logger)

    Returns:
        The tools that were built, in catalog order.
    """
    policy = default_fail_policy() if fail_policy is None else FailPolicy.coerce(fail_policy)
    trace = trace or default_trace()

    response = await connection.list_tools()
    catalog = getattr(response, "tools", None) or []
    trace.info(f"Found {len(catalog)} MCP tools")

    tools: list[BaseTool] = []
    for tool in catalog:
        tool_name = getattr(tool, "name", None)
        if not tool_name:
            continue

        local_name = f"{name_prefix}{tool_name}" if name_prefix else tool_name
        try:
            lc_tool = mcp_to_langchain_tool(
                server_name, tool, connection, name=local_name, trace=trace
            )
        except Exception as e:
            trace.error(f"Failed to load tool \"{tool_name}\": {e}")
            if policy is FailPolicy.STRICT:
                raise ToolLoadError(server_name, tool_name, e) from e
            continue

        trace.info(f"Successfully loaded tool: {lc_tool.name}")
        tools.append(lc_tool)

    return tools


async def load_all_mcp_tools(
    connections: Mapping[str, McpConnection],
    fail_policy: FailPolicy | str | bool | None = None,
    prefix_tool_names: bool = False,
    trace: TraceLog | None = None,
) -> list[BaseTool]:
    """
    Load the catalogs of several servers into one flat list.

    Servers are loaded in mapping order. With prefix_tool_names, each local
    name becomes "<server>__<tool>" so tools from different servers can't
    collide; the remote call still uses the server's own tool name.
    """
    tools: list[BaseTool] = []
    for server_name, connection in connections.items():
        prefix = f"{server_name}__" if prefix_tool_names else None
        tools.extend(
            await load_mcp_tools(
                server_name,
                connection,
                fail_policy,
                name_prefix=prefix,
                trace=trace,
            )
        )
    return tools

