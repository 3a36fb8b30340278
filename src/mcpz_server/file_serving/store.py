"""Store location resolution, file reservation and buffered writes."""

import logging
import os
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import ConfigurationError, GenerationError
from ..models import MAX_ID_ATTEMPTS, FileReservation, FileServingConfig
from .names import format_stored_name

logger = logging.getLogger(__name__)

FILE_URI_PREFIX = "file://"
# In-progress writes; never served
TEMP_PREFIX = ".tmp-"


def resolve_resource_store_path(resource_store_uri: str) -> Path:
    """Turn a store location into an absolute directory path.

    Accepts a bare path or a ``file://`` URI; relative paths resolve against
    the current working directory. Pure: the directory is not checked.

    Raises:
        ConfigurationError: If the location is empty or uses another scheme
    """
    if not resource_store_uri:
        raise ConfigurationError("File serving requires a resource_store_uri.")

    if resource_store_uri.startswith(FILE_URI_PREFIX):
        return Path(os.path.abspath(resource_store_uri[len(FILE_URI_PREFIX):]))

    if "://" in resource_store_uri:
        raise ConfigurationError(
            f"Unsupported resource_store_uri scheme: {resource_store_uri}. Only file:// URIs are supported."
        )

    return Path(os.path.abspath(resource_store_uri))


def _generate_validated_id(delimiter: str, generate_id: Callable[[], str]) -> str:
    for _ in range(MAX_ID_ATTEMPTS):
        candidate = generate_id()
        if delimiter not in candidate:
            return candidate

    raise GenerationError(
        f"Failed to generate ID without delimiter '{delimiter}' after {MAX_ID_ATTEMPTS} attempts. "
        "Consider using a different delimiter or custom ID generator."
    )


def reserve_file(original_filename: str, config: FileServingConfig) -> FileReservation:
    """Reserve a location for a file without writing it.

    Creates the store directory if needed, then allocates an ID. The caller
    writes to ``full_path`` itself, e.g. when streaming a CSV export:

        reservation = reserve_file("export.csv", config)
        with open(reservation.full_path, "w", newline="") as fh:
            csv.writer(fh).writerows(rows)

    Raises:
        ConfigurationError: If the store location is invalid
        GenerationError: If no delimiter-free ID was produced within the attempt ceiling
    """
    output_dir = resolve_resource_store_path(config.resource_store_uri)
    output_dir.mkdir(parents=True, exist_ok=True)

    file_id = _generate_validated_id(config.delimiter, config.generate_id)
    stored_name = format_stored_name(file_id, original_filename, config.delimiter)
    full_path = output_dir / stored_name

    logger.debug("Reserved %s for %s", stored_name, original_filename)
    return FileReservation(id=file_id, stored_name=stored_name, full_path=full_path)


def _default_file_mode() -> int:
    # os.umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_file(data: bytes, original_filename: str, config: FileServingConfig) -> FileReservation:
    """Reserve a location and write a complete buffer to it.

    The bytes land in a temporary file in the store directory and are moved
    onto the reserved path once flushed, so readers never see a partial file.
    The stored file gets the umask-derived mode of a plainly created file.
    I/O errors propagate unchanged and leave no temporary file behind.
    """
    reservation = reserve_file(original_filename, config)
    target_dir = reservation.full_path.parent

    tmp = tempfile.NamedTemporaryFile("wb", delete=False, dir=target_dir, prefix=TEMP_PREFIX)
    tmp_path = Path(tmp.name)
    try:
        with tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_path, _default_file_mode())
        os.replace(tmp_path, reservation.full_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise

    logger.debug("Wrote %d bytes to %s", len(data), reservation.full_path)
    return reservation
