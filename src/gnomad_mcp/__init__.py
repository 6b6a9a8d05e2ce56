"""gnomad-mcp: MCP server exposing gnomAD GraphQL queries as tools."""

from __future__ import annotations

import logging
import os
import sys

import anyio
from mcp.server.stdio import stdio_server

from gnomad_mcp.server import server

log = logging.getLogger("gnomad-mcp")


def _log_level() -> int:
    """Resolve LOG_LEVEL to a logging level, falling back to INFO for unknown names."""
    level = logging.getLevelName(os.environ.get("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


async def _serve() -> None:
    async with stdio_server() as (read_stream, write_stream):
        log.info("gnomAD MCP server started")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """CLI entry point — starts the MCP server over stdio."""
    # stdout carries the protocol, so logs go to stderr.
    logging.basicConfig(
        level=_log_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    anyio.run(_serve)
