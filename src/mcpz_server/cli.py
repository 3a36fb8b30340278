"""Command-line interface for mcpz-server.

Runs the export server and gives shell access to the resource store:
writing files into it, decoding stored names and building retrieval URIs.
"""

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from .config import settings
from .errors import FileServingError
from .file_serving import get_file_uri, parse_stored_name, resolve_resource_store_path, write_file
from .logging_setup import configure_logging
from .server import ExportServer
from .transports import resolve_transport

app = typer.Typer(
    name="mcpz-server",
    help="mcpz-server - file serving utilities for MCP servers"
)
console = Console()
# stdout carries the protocol under stdio transport
err_console = Console(stderr=True)


def _fail(error: FileServingError) -> NoReturn:
    err_console.print(f"[bold red]✗ {error.message}[/bold red] ({error.code})")
    raise typer.Exit(code=1)


@app.command()
def serve(
    port: int | None = typer.Option(None, "--port", "-p", envvar="PORT", help="Serve over HTTP on this port"),
    stdio: bool = typer.Option(False, "--stdio", help="Force stdio transport"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Start the export MCP server."""
    configure_logging("DEBUG" if debug else settings.log_level, settings.log_format)
    transport = resolve_transport(port, stdio)

    err_console.print("[bold green]Starting export MCP server[/bold green]")
    err_console.print(f"Transport: {transport.type}")
    if transport.type == "http":
        err_console.print(f"HTTP Server: http://{settings.http_host}:{port}/mcp")
        err_console.print(f"Files: http://{settings.http_host}:{port}{settings.files_endpoint}")
    else:
        err_console.print("STDIO Transport: Ready for MCP client connection")

    try:
        ExportServer(transport=transport).run()
    except FileServingError as e:
        _fail(e)


@app.command()
def write(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="File to store"),
    name: str | None = typer.Option(None, "--name", "-n", help="Original filename (default: source name)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Report an http:// URI for this port"),
) -> None:
    """Store a file in the resource store and print its URI."""
    original = name or source.name
    try:
        reservation = write_file(source.read_bytes(), original, settings.file_serving_config())
        uri = get_file_uri(reservation.stored_name, resolve_transport(port), settings.file_uri_config())
    except FileServingError as e:
        _fail(e)

    table = Table(title="Stored File")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("ID", reservation.id)
    table.add_row("Stored Name", reservation.stored_name)
    table.add_row("Path", str(reservation.full_path))
    table.add_row("URI", uri)

    console.print(table)


@app.command()
def parse(
    stored_name: str = typer.Argument(..., help="Stored filename to decode"),
) -> None:
    """Decode a stored name into ID and original filename."""
    parsed = parse_stored_name(stored_name, settings.file_delimiter)

    table = Table(title="Stored Name")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("ID", parsed.id)
    table.add_row("Filename", parsed.filename)
    if settings.file_delimiter not in stored_name:
        table.add_row("Note", f"No '{settings.file_delimiter}' delimiter found")

    console.print(table)


@app.command()
def uri(
    stored_name: str = typer.Argument(..., help="Stored filename"),
    port: int | None = typer.Option(None, "--port", "-p", help="Build an http:// URI for this port"),
) -> None:
    """Print the retrieval URI of a stored file."""
    try:
        typer.echo(get_file_uri(stored_name, resolve_transport(port), settings.file_uri_config()))
    except FileServingError as e:
        _fail(e)


@app.command()
def config() -> None:
    """Show current configuration."""
    table = Table(title="Settings")
    table.add_column("Setting", style="cyan", min_width=25)
    table.add_column("Value", style="green")

    table.add_row("App Name", settings.app_name)
    table.add_row("App Version", settings.app_version)
    table.add_row("MCP Server Name", settings.mcp_server_name)
    table.add_row("Resource Store URI", settings.resource_store_uri)
    try:
        table.add_row("Resource Store Path", str(resolve_resource_store_path(settings.resource_store_uri)))
    except FileServingError as e:
        table.add_row("Resource Store Path", f"[red]{e.message}[/red]")
    table.add_row("Delimiter", settings.file_delimiter)
    table.add_row("Files Endpoint", settings.files_endpoint)
    table.add_row("Files Base URL", settings.files_base_url or "Not set")
    table.add_row("Content Disposition", settings.content_disposition)
    table.add_row("HTTP Host", settings.http_host)
    table.add_row("Log Level", settings.log_level)

    console.print(table)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
