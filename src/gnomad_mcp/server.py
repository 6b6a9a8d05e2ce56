"""MCP Server definition — static tool catalog plus a single dispatcher.

The low-level server is used instead of FastMCP because the catalog is fixed
metadata and the dispatcher owns argument validation, so every failure keeps
the ``"Error: ..."`` text format.
"""

from __future__ import annotations

from typing import Any

from mcp import types
from mcp.server.lowlevel import Server

from gnomad_mcp import catalog, tools

SERVER_NAME = "gnomad-mcp-server"
SERVER_VERSION = "1.0.0"

server = Server(
    SERVER_NAME,
    version=SERVER_VERSION,
    instructions=(
        "gnomAD MCP server. Provides search, gene, variant, transcript, region, "
        "coverage, structural and mitochondrial variant lookups against the "
        "gnomAD GraphQL API."
    ),
)


@server.list_tools()
async def handle_list_tools() -> list[types.Tool]:
    return catalog.list_tools()


@server.call_tool(validate_input=False)
async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
    return await tools.call_tool(name, arguments)
