"""Export server built from mcpz-server utilities.

A small FastMCP server that stores text exports in the resource store and
hands back URIs for them: file:// over stdio, http:// through the retrieval
endpoint over HTTP.
"""

import asyncio
import logging
import mimetypes
import os
import sys
from typing import Any

from fastmcp import FastMCP
from starlette.routing import Mount

from .config import Settings, settings
from .file_serving import create_file_serving_router, get_file_uri, parse_stored_name, write_file
from .logging_setup import configure_logging
from .middleware import ModuleCollections, compose_middleware, create_logging_middleware, get_request_logger
from .models import FileServingRouterOptions, TransportConfig, create_actionable_error
from .register_modules import ResourceModule, ToolModule, register_resources, register_tools
from .transports import connect_http, connect_stdio, parse_config, sanitize_url

logger = logging.getLogger(__name__)


class ExportServer:
    """FastMCP server for storing and retrieving exported files."""

    def __init__(
        self,
        name: str | None = None,
        transport: TransportConfig | None = None,
        app_settings: Settings | None = None,
    ):
        """Initialize the export server."""
        self.settings = app_settings or settings
        self.transport = transport or TransportConfig(type="stdio")
        self.file_config = self.settings.file_serving_config()
        self.uri_config = self.settings.file_uri_config()
        self.mcp = FastMCP(name or self.settings.mcp_server_name)

        modules = compose_middleware(
            ModuleCollections(tools=self._tool_modules(), resources=self._resource_modules()),
            [create_logging_middleware(logger).layer()],
        )
        register_tools(self.mcp, modules.tools)
        register_resources(self.mcp, modules.resources)

    def _tool_modules(self) -> list[ToolModule]:
        file_config = self.file_config
        uri_config = self.uri_config
        transport = self.transport

        async def export_text(filename: str, content: str) -> dict[str, Any]:
            """Store text under the given filename and return a URI for it.

            Args:
                filename: Original filename, e.g. "report.md"
                content: UTF-8 text to store

            Returns:
                Stored name and retrieval URI, or an error branch
            """
            if not filename or os.sep in filename or "/" in filename:
                return create_actionable_error(
                    f"Invalid filename: {filename!r}",
                    "INVALID_ARGUMENT",
                    "Pass a plain filename without directory components.",
                ).model_dump(exclude_none=True)

            reservation = write_file(content.encode("utf-8"), filename, file_config)
            get_request_logger().info("Exported %s as %s", filename, reservation.stored_name)
            return {
                "type": "success",
                "stored_name": reservation.stored_name,
                "uri": get_file_uri(reservation.stored_name, transport, uri_config),
            }

        async def parse_export(stored_name: str) -> dict[str, Any]:
            """Recover the ID and original filename of a stored export."""
            return parse_stored_name(stored_name, file_config.delimiter).model_dump()

        return [
            ToolModule(name="export_text", handler=export_text),
            ToolModule(name="parse_export", handler=parse_export),
        ]

    def _resource_modules(self) -> list[ResourceModule]:
        store_settings = self.settings

        def store_info() -> dict[str, Any]:
            """Where exports are stored and how they are named."""
            return {
                "resource_store_uri": store_settings.resource_store_uri,
                "delimiter": store_settings.file_delimiter,
                "endpoint": store_settings.files_endpoint,
            }

        return [
            ResourceModule(
                name="store_info",
                uri="exports://store",
                handler=store_info,
                mime_type="application/json",
            )
        ]

    def guess_content_type(self, stored_name: str) -> str:
        """Content-Type from the original filename's extension."""
        original = parse_stored_name(stored_name, self.file_config.delimiter).filename
        return mimetypes.guess_type(original)[0] or "application/octet-stream"

    def file_routes(self) -> list[Mount]:
        """Retrieval endpoint mounted at the configured endpoint."""
        router = create_file_serving_router(
            self.file_config,
            FileServingRouterOptions(
                content_type=self.guess_content_type,
                content_disposition=self.settings.content_disposition,
            ),
            logger,
        )
        return [Mount(self.settings.files_endpoint, app=router)]

    async def serve(self) -> None:
        """Serve over the configured transport."""
        if self.transport.type == "http" and self.transport.port:
            base = self.settings.files_base_url or f"http://localhost:{self.transport.port}"
            logger.info("Serving files at %s%s", sanitize_url(base), self.settings.files_endpoint)
            await connect_http(
                self.mcp,
                port=self.transport.port,
                host=self.settings.http_host,
                routes=self.file_routes(),
                cors_origins=self.settings.http_cors_origins,
                log=logger,
                log_level=self.settings.log_level,
            )
        else:
            await connect_stdio(self.mcp, logger)

    def run(self) -> None:
        """Run the server until it stops."""
        asyncio.run(self.serve())


def main() -> None:
    """Main entry point: ``--port``/``PORT`` selects HTTP, stdio otherwise."""
    configure_logging(settings.log_level, settings.log_format)
    parsed = parse_config(sys.argv[1:], os.environ)
    ExportServer(transport=parsed.transport).run()


if __name__ == "__main__":
    main()
