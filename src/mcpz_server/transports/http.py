"""Streamable HTTP transport on Starlette + uvicorn.

The MCP endpoint is always mounted at /mcp. Extra routes (for example the
file retrieval mount) are matched before it.
"""

import errno
import logging
import socket
from collections.abc import Sequence

import uvicorn
from fastmcp import FastMCP
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.routing import BaseRoute, Mount

from ..errors import ConfigurationError

MCP_PATH = "/mcp"

logger = logging.getLogger(__name__)


def create_http_app(
    mcp: FastMCP,
    *,
    routes: Sequence[BaseRoute] = (),
    cors_origins: Sequence[str] = ("*",),
) -> Starlette:
    """Build the ASGI app serving ``mcp`` at /mcp plus any extra routes.

    The MCP app runs stateless: no sessions, so GET/DELETE on /mcp are refused.
    """
    mcp_app = mcp.http_app(path=MCP_PATH, stateless_http=True)

    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=list(cors_origins),
            allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type", "mcp-session-id"],
            expose_headers=["Mcp-Session-Id"],
        )
    ]

    return Starlette(
        routes=[*routes, Mount("/", app=mcp_app)],
        middleware=middleware,
        lifespan=mcp_app.lifespan,
    )


def _bind(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as e:
        sock.close()
        if e.errno == errno.EADDRINUSE:
            raise ConfigurationError(
                f"Port {port} is already in use. This usually means another process is using this port, "
                f"or a previous instance didn't shut down cleanly. Try running: lsof -ti :{port} | xargs kill -9"
            ) from e
        raise
    return sock


async def connect_http(
    mcp: FastMCP,
    *,
    port: int,
    host: str = "127.0.0.1",
    routes: Sequence[BaseRoute] = (),
    cors_origins: Sequence[str] = ("*",),
    log: logging.Logger | None = None,
    log_level: str = "info",
) -> None:
    """Serve ``mcp`` over HTTP until the server stops.

    Raises:
        ConfigurationError: If the port is already in use
    """
    log = log or logger
    app = create_http_app(mcp, routes=routes, cors_origins=cors_origins)
    sock = _bind(host, port)

    server = uvicorn.Server(uvicorn.Config(app, log_level=log_level.lower()))
    log.info("HTTP transport ready on port %s at %s", port, MCP_PATH)
    await server.serve(sockets=[sock])
