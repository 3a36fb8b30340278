"""File serving utilities for MCP servers.

Servers that generate files (PDFs, CSVs, images) store them under an
ID-prefixed name and hand clients a URI: ``file://`` over stdio, ``http://``
through the retrieval router over HTTP. The original filename lives in the
stored name itself, so no metadata files are written.

- ``reserve_file()`` - reserve a location for streaming writes
- ``write_file()`` - write a complete buffer
- ``get_file_uri()`` - file:// or http:// URI for the active transport
- ``parse_stored_name()`` - recover ID and original filename
- ``create_file_serving_router()`` - Starlette router with path traversal protection

Example:
    config = FileServingConfig(resource_store_uri="file:///tmp/files")
    reservation = write_file(pdf_bytes, "report.pdf", config)
    uri = get_file_uri(reservation.stored_name, transport,
                       FileUriConfig(resource_store_uri="file:///tmp/files", base_url=base_url))
"""

from .names import format_stored_name, parse_stored_name
from .router import create_file_serving_router
from .store import reserve_file, resolve_resource_store_path, write_file
from .uri import get_file_uri

__all__ = [
    "create_file_serving_router",
    "format_stored_name",
    "get_file_uri",
    "parse_stored_name",
    "reserve_file",
    "resolve_resource_store_path",
    "write_file",
]
