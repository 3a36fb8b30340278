"""Retrieval URIs for stored files."""

from ..errors import ConfigurationError
from ..models import DEFAULT_ENDPOINT, FileUriConfig, TransportConfig
from .store import FILE_URI_PREFIX, resolve_resource_store_path


def get_file_uri(stored_name: str, transport: TransportConfig | None, config: FileUriConfig) -> str:
    """Build the URI a client uses to fetch a stored file.

    Stdio (or no transport) gets a ``file://`` URI on the local filesystem.
    HTTP gets ``{base_url}{endpoint}/{stored_name}``, with ``base_url``
    defaulting to ``http://localhost:{port}`` and ``endpoint`` to ``/files``.

    Examples:
        get_file_uri("abc123~report.pdf", None, FileUriConfig(resource_store_uri="file:///tmp/files"))
        # => 'file:///tmp/files/abc123~report.pdf'

        get_file_uri("abc123~report.pdf", TransportConfig(type="http", port=3000),
                     FileUriConfig(resource_store_uri="file:///tmp/files"))
        # => 'http://localhost:3000/files/abc123~report.pdf'

    Raises:
        ConfigurationError: For HTTP transport with neither base_url nor port
    """
    if transport is None or transport.type == "stdio":
        full_path = resolve_resource_store_path(config.resource_store_uri) / stored_name
        return f"{FILE_URI_PREFIX}{full_path}"

    if not config.base_url and not transport.port:
        raise ConfigurationError(
            "get_file_uri: HTTP transport requires either base_url or port. This is a configuration error."
        )

    base = config.base_url or f"http://localhost:{transport.port}"
    endpoint = config.endpoint or DEFAULT_ENDPOINT
    return f"{base}{endpoint}/{stored_name}"
