"""Stdio transport for local CLI usage."""

import logging

from fastmcp import FastMCP

logger = logging.getLogger(__name__)


async def connect_stdio(mcp: FastMCP, log: logging.Logger | None = None) -> None:
    """Serve ``mcp`` over stdin/stdout until the client disconnects."""
    log = log or logger
    log.info("Stdio transport ready")
    await mcp.run_async(transport="stdio")
