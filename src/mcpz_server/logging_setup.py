"""Logging configuration.

Records go to stderr: stdout carries JSON-RPC messages under the stdio transport.
"""

import logging
import sys

PACKAGE_LOGGER = "mcpz_server"


def configure_logging(level: str = "INFO", fmt: str | None = None) -> None:
    """Install a stderr handler on the root logger."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=fmt or "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
