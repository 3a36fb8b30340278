"""Data models for mcpz-server.

Pydantic models for transport descriptors, file serving configuration,
reservations and actionable error branches.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, Field

# Tilde is valid on all common filesystems, URL-safe and rare in real filenames
DEFAULT_DELIMITER = "~"
DEFAULT_ENDPOINT = "/files"
MAX_ID_ATTEMPTS = 100


def DEFAULT_GENERATE_ID() -> str:  # noqa: N802
    """Random UUID4 string; never contains the default delimiter."""
    return str(uuid4())


TransportType = Literal["stdio", "http"]
ContentDisposition = Literal["inline", "attachment"]
ErrorCode = Literal["INVALID_ARGUMENT", "NOT_FOUND", "PERMISSION", "AUTH", "INTERNAL"]


class TransportConfig(BaseModel):
    """Single transport a server runs with. The MCP path is always /mcp."""

    type: TransportType = Field(..., description="Transport kind (stdio or http)")
    port: int | None = Field(None, description="HTTP port, unused for stdio")


class ParsedTransportConfig(BaseModel):
    """Result of parsing CLI arguments and environment variables."""

    transport: TransportConfig = Field(..., description="Selected transport")
    port: int | None = Field(None, description="Port extracted from CLI or PORT env var")


class FileServingConfig(BaseModel):
    """Where generated files live and how their stored names are built.

    Example:
        FileServingConfig(resource_store_uri="file:///tmp/files", delimiter="_",
                          generate_id=lambda: secrets.token_hex(6))
        # stored names look like: 3f9a0c11b2d4_data.json
    """

    resource_store_uri: str = Field(..., description="Bare path or file:// URI of the store directory")
    delimiter: str = Field(default=DEFAULT_DELIMITER, description="Separator between ID and original filename")
    generate_id: Callable[[], str] = Field(
        default=DEFAULT_GENERATE_ID, description="ID generator; IDs containing the delimiter are rejected"
    )


class FileUriConfig(BaseModel):
    """Configuration for building retrieval URIs."""

    resource_store_uri: str = Field(..., description="Bare path or file:// URI of the store directory")
    base_url: str | None = Field(None, description="e.g. 'https://example.com' or 'http://localhost:3000'")
    endpoint: str | None = Field(None, description="Mount prefix of the retrieval endpoint (default: /files)")


class FileServingRouterOptions(BaseModel):
    """Response header options for the retrieval endpoint."""

    content_type: str | Callable[[str], str] = Field(
        ..., description="Fixed Content-Type or a function of the stored filename"
    )
    content_disposition: ContentDisposition = Field(
        default="attachment", description="'attachment' forces download, 'inline' lets the browser display it"
    )


class FileReservation(BaseModel):
    """Result of reserving or writing a file.

    stored_name format: {id}{delimiter}{filename}, e.g. 'abc123~report.pdf'.
    """

    id: str = Field(..., description="Generated identifier")
    stored_name: str = Field(..., description="On-disk filename")
    full_path: Path = Field(..., description="Absolute destination path")


class StoredName(BaseModel):
    """ID and original filename recovered from a stored name."""

    id: str
    filename: str


class ErrorBranch(BaseModel):
    """Error branch of a discriminated tool result."""

    type: Literal["error"] = "error"
    error: str = Field(..., description="Human-readable error message")
    code: ErrorCode | None = Field(None, description="Machine-readable error code")
    help: str | None = Field(None, description="Guidance on how to recover")
    debug: dict[str, Any] | None = Field(None, description="Additional diagnostic context")


def create_actionable_error(error: str, code: ErrorCode, help: str | None = None) -> ErrorBranch:  # noqa: A002
    """Create an error branch carrying recovery guidance."""
    return ErrorBranch(error=error, code=code, help=help)
