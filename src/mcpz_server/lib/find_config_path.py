"""Locate an MCP config file by walking up the directory tree."""

import os
from pathlib import Path

DEFAULT_CONFIG_NAME = ".mcp.json"


def _is_path_like(value: str) -> bool:
    return os.path.isabs(value) or "/" in value or "\\" in value


def find_config_path(
    config: str = DEFAULT_CONFIG_NAME,
    cwd: str | Path | None = None,
    stop_dir: str | Path | None = None,
) -> Path:
    """Find a config file.

    A ``config`` containing a path separator is taken as a path (a directory
    means ``<dir>/.mcp.json``). A bare filename is searched for in ``cwd``
    and each parent, up to and including ``stop_dir`` (default: home).

    Raises:
        FileNotFoundError: If no config file is found
    """
    start = Path(cwd) if cwd is not None else Path.cwd()
    stop = Path(stop_dir) if stop_dir is not None else Path.home()

    if _is_path_like(config):
        resolved = Path(config) if os.path.isabs(config) else start / config
        resolved = Path(os.path.abspath(resolved))
        if not resolved.exists():
            raise FileNotFoundError(f"Config file not found: {resolved}")
        if resolved.is_dir():
            candidate = resolved / DEFAULT_CONFIG_NAME
            if not candidate.exists():
                raise FileNotFoundError(f"Config file not found: {candidate}")
            return candidate
        return resolved

    current = Path(os.path.abspath(start))
    stop = Path(os.path.abspath(stop))

    while True:
        candidate = current / config
        if candidate.exists():
            return candidate

        # Stop at the filesystem root, at stop_dir, or once outside stop_dir's subtree
        if current == current.parent or current == stop or not current.is_relative_to(stop):
            break
        current = current.parent

    raise FileNotFoundError(f"Config file not found: {config}\n\nSearched from {start} up to {stop}")
