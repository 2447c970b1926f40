"""Test doubles for MCP sessions and trace sinks."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace
from typing import Any

from mcp.types import CallToolResult, ReadResourceResult


class FakeConnection:
    """
    Stands in for mcp.ClientSession.

    Records every call_tool / read_resource so tests can assert how much
    network traffic a conversion caused.
    """

    def __init__(
        self,
        tools: list[Any] | None = None,
        results: dict[str, Any] | None = None,
        resources: dict[str, list[Any]] | None = None,
        delays: dict[str, float] | None = None,
        call_error: BaseException | None = None,
    ):
        self.tools = tools or []
        self.results = results or {}
        self.resources = resources or {}
        self.delays = delays or {}
        self.call_error = call_error
        self.list_calls = 0
        self.calls: list[tuple[str, dict[str, Any] | None]] = []
        self.reads: list[str] = []

    async def list_tools(self):
        self.list_calls += 1
        return SimpleNamespace(tools=self.tools)

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None):
        self.calls.append((name, arguments))
        if self.call_error is not None:
            raise self.call_error
        return self.results[name]

    async def read_resource(self, uri: Any) -> ReadResourceResult:
        key = str(uri)
        self.reads.append(key)
        await asyncio.sleep(self.delays.get(key, 0))
        return ReadResourceResult(contents=self.resources.get(key, []))


class RecordingTrace:
    """Collects trace records instead of logging them."""

    def __init__(self):
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, msg: str) -> None:
        self.infos.append(msg)

    def error(self, msg: str) -> None:
        self.errors.append(msg)


def call_result(*content: Any, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=list(content), isError=is_error)
