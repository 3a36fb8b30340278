"""Transport selection from CLI arguments and environment variables.

Each server runs with exactly one transport:
- stdio: default for local CLI usage (or forced with --stdio)
- http: enabled with --port or the PORT environment variable
"""

import argparse
from collections.abc import Mapping, Sequence

from ..errors import ConfigurationError
from ..models import ParsedTransportConfig, TransportConfig


def _build_parser() -> argparse.ArgumentParser:
    # Servers add their own flags (--gmail, --sheets, ...), so unknown options must pass through
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    parser.add_argument("--stdio", action="store_true", default=False)
    parser.add_argument("--port", type=str, default=None)
    return parser


def _to_port(value: str, source: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"Invalid port from {source}: {value!r}") from e


def resolve_transport(port: int | None, stdio: bool = False) -> TransportConfig:
    """Pick stdio when forced or when there is no port, HTTP otherwise."""
    if stdio or not port:
        return TransportConfig(type="stdio")
    return TransportConfig(type="http", port=port)


def parse_config(args: Sequence[str], env: Mapping[str, str]) -> ParsedTransportConfig:
    """Parse transport configuration.

    Args:
        args: CLI arguments without the program name (typically sys.argv[1:])
        env: Environment variables (typically os.environ)

    Returns:
        ParsedTransportConfig; the CLI port overrides PORT

    Examples:
        parse_config(["--port=3000"], {})
        # => transport=TransportConfig(type='http', port=3000), port=3000

        parse_config([], {"PORT": "3000"})
        # => transport=TransportConfig(type='http', port=3000), port=3000

    Raises:
        ConfigurationError: If a port is not an integer
    """
    values, _unknown = _build_parser().parse_known_args(list(args))

    cli_port = _to_port(values.port, "--port") if values.port is not None else None
    env_port = _to_port(env["PORT"], "PORT") if env.get("PORT") else None
    port = cli_port if cli_port is not None else env_port

    return ParsedTransportConfig(transport=resolve_transport(port, values.stdio), port=port)
