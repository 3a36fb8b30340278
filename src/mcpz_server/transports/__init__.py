"""Transport helpers: config parsing, stdio and streamable HTTP."""

from .http import MCP_PATH, connect_http, create_http_app
from .parse_config import parse_config, resolve_transport
from .sanitize_url import sanitize_url
from .stdio import connect_stdio

__all__ = [
    "MCP_PATH",
    "connect_http",
    "connect_stdio",
    "create_http_app",
    "parse_config",
    "resolve_transport",
    "sanitize_url",
]
