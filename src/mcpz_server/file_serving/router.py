"""Starlette router serving stored files by name."""

import logging
from pathlib import Path
from urllib.parse import quote

from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Route, Router

from ..models import FileServingConfig, FileServingRouterOptions
from .names import parse_stored_name
from .store import TEMP_PREFIX, resolve_resource_store_path

# Characters encodeURIComponent leaves alone on top of quote()'s defaults
_URI_COMPONENT_SAFE = "!*'()"


def _not_found() -> Response:
    return PlainTextResponse("File not found", status_code=404)


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except (ValueError, OSError):
        return False


def create_file_serving_router(
    config: FileServingConfig,
    options: FileServingRouterOptions,
    logger: logging.Logger | None = None,
) -> Router:
    """Create a router with a single ``GET /{filename}`` route.

    Mount it under any prefix:

        router = create_file_serving_router(
            FileServingConfig(resource_store_uri="file:///tmp/exports", delimiter="_"),
            FileServingRouterOptions(content_type=guess_type, content_disposition="inline"),
        )
        app = Starlette(routes=[Mount("/exports", app=router)])

    Responses, in order of precedence: 400 for an empty filename, 403 when
    the resolved path escapes the store directory, 404 when no such file
    exists (in-progress temporary files and names the filesystem rejects
    included), 200 with the file bytes, 500 for anything unexpected. The
    Content-Disposition filename is the original filename recovered from
    the stored name, percent-encoded.
    """
    log = logger or logging.getLogger(__name__)
    store_root = resolve_resource_store_path(config.resource_store_uri).resolve()
    content_type = options.content_type
    disposition = options.content_disposition

    async def serve_file(request: Request) -> Response:
        try:
            filename = request.path_params.get("filename", "")
            if not filename:
                return PlainTextResponse("Bad request: filename parameter is required", status_code=400)

            # Names the filesystem rejects (NUL bytes, over-long components) cannot be stored files
            try:
                file_path = (store_root / filename).resolve()
            except (ValueError, OSError):
                return _not_found()

            # Containment is checked on the fully resolved path, before existence
            if not file_path.is_relative_to(store_root):
                log.warning("Rejected path outside resource store: %r", filename)
                return PlainTextResponse("Access denied", status_code=403)

            if file_path.name.startswith(TEMP_PREFIX) or not _is_file(file_path):
                return _not_found()

            data = await run_in_threadpool(file_path.read_bytes)

            stored_name = Path(filename).name
            original = parse_stored_name(stored_name, config.delimiter).filename
            media_type = content_type(stored_name) if callable(content_type) else content_type
            encoded = quote(original, safe=_URI_COMPONENT_SAFE)

            return Response(
                content=data,
                media_type=media_type,
                headers={"Content-Disposition": f'{disposition}; filename="{encoded}"'},
            )
        except Exception:
            log.exception("Failed to serve file %r", request.path_params.get("filename"))
            return PlainTextResponse("Internal server error", status_code=500)

    return Router(routes=[Route("/{filename:path}", serve_file, methods=["GET"])])
