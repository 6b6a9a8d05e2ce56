"""Tests for the MCP handlers registered on the server."""

from __future__ import annotations

import pytest
from mcp import types

from gnomad_mcp.gnomad_client import RemoteQueryResult
from gnomad_mcp.server import handle_call_tool, handle_list_tools, server


class TestServer:
    def test_identity(self) -> None:
        assert server.name == "gnomad-mcp-server"
        assert server.version == "1.0.0"

    def test_handlers_registered(self) -> None:
        assert types.ListToolsRequest in server.request_handlers
        assert types.CallToolRequest in server.request_handlers

    @pytest.mark.asyncio
    async def test_list_tools(self) -> None:
        tools = await handle_list_tools()
        assert len(tools) == 9
        assert tools[0].name == "search"

    @pytest.mark.asyncio
    async def test_call_tool_delegates(self, gnomad_api) -> None:
        gnomad_api.return_value = RemoteQueryResult(data={"transcript": {"transcript_id": "ENST00000269305"}})
        result = await handle_call_tool("get_transcript", {"transcript_id": "ENST00000269305"})
        assert '"transcript_id": "ENST00000269305"' in result[0].text

    @pytest.mark.asyncio
    async def test_call_tool_never_raises(self, gnomad_api) -> None:
        result = await handle_call_tool("nope", None)
        assert result[0].text == "Error: Invalid arguments provided"
