"""mcpz-server - support utilities for Model Context Protocol servers.

Independent building blocks for MCP servers that speak stdio or
streamable HTTP. This is not a framework: the hosting application wires
the pieces together itself.

Key Features:
- Named-file storage with ID-prefixed stored names and zero metadata
- file:// or http:// retrieval URIs depending on the transport
- Starlette retrieval endpoint with path traversal protection
- Transport selection from CLI flags and environment variables
- Tool/resource/prompt modules, middleware composition and logger injection
"""

__version__ = "0.1.0"
__author__ = "mcpz Contributors"
__license__ = "MIT"

# Public API exports
from .errors import ConfigurationError, FileServingError, GenerationError
from .file_serving import (
    create_file_serving_router,
    format_stored_name,
    get_file_uri,
    parse_stored_name,
    reserve_file,
    resolve_resource_store_path,
    write_file,
)
from .lib import find_config_path
from .middleware import (
    LoggingMiddleware,
    MiddlewareLayer,
    ModuleCollections,
    compose_middleware,
    create_logging_middleware,
    get_request_logger,
)
from .models import (
    ErrorBranch,
    FileReservation,
    FileServingConfig,
    FileServingRouterOptions,
    FileUriConfig,
    ParsedTransportConfig,
    StoredName,
    TransportConfig,
    create_actionable_error,
)
from .register_modules import (
    PromptModule,
    ResourceModule,
    ToolModule,
    register_prompts,
    register_resources,
    register_tools,
)
from .transports import connect_http, connect_stdio, create_http_app, parse_config, sanitize_url

__all__ = [
    "ConfigurationError",
    "ErrorBranch",
    "FileReservation",
    "FileServingConfig",
    "FileServingError",
    "FileServingRouterOptions",
    "FileUriConfig",
    "GenerationError",
    "LoggingMiddleware",
    "MiddlewareLayer",
    "ModuleCollections",
    "ParsedTransportConfig",
    "PromptModule",
    "ResourceModule",
    "StoredName",
    "ToolModule",
    "TransportConfig",
    "compose_middleware",
    "connect_http",
    "connect_stdio",
    "create_actionable_error",
    "create_file_serving_router",
    "create_http_app",
    "create_logging_middleware",
    "find_config_path",
    "format_stored_name",
    "get_file_uri",
    "get_request_logger",
    "parse_config",
    "parse_stored_name",
    "register_prompts",
    "register_resources",
    "register_tools",
    "reserve_file",
    "resolve_resource_store_path",
    "sanitize_url",
    "write_file",
    "__version__",
]
