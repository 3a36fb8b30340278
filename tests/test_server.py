"""Tests for the export server."""

from pathlib import Path

from starlette.applications import Starlette
from starlette.testclient import TestClient

from mcpz_server.config import Settings
from mcpz_server.models import TransportConfig
from mcpz_server.server import ExportServer


def _handler(server: ExportServer, name: str):
    return next(module.handler for module in server._tool_modules() if module.name == name)


class TestExportServer:
    """Test ExportServer."""

    async def test_registers_tools_and_resources(self, test_settings: Settings):
        server = ExportServer(app_settings=test_settings)

        tools = await server.mcp.get_tools()
        resources = await server.mcp.get_resources()

        assert {"export_text", "parse_export"} <= set(tools)
        assert "exports://store" in resources

    async def test_export_text_over_stdio(self, test_settings: Settings, store_dir: Path):
        server = ExportServer(app_settings=test_settings)

        result = await _handler(server, "export_text")("notes.md", "# Notes")

        assert result["type"] == "success"
        assert result["uri"] == f"file://{store_dir}/{result['stored_name']}"
        assert (store_dir / result["stored_name"]).read_text() == "# Notes"

    async def test_export_text_over_http(self, test_settings: Settings):
        server = ExportServer(transport=TransportConfig(type="http", port=3000), app_settings=test_settings)

        result = await _handler(server, "export_text")("notes.md", "# Notes")

        assert result["uri"] == f"http://localhost:3000/files/{result['stored_name']}"

    async def test_export_text_rejects_paths(self, test_settings: Settings, store_dir: Path):
        server = ExportServer(app_settings=test_settings)

        result = await _handler(server, "export_text")("../escape.md", "x")

        assert result["type"] == "error"
        assert result["code"] == "INVALID_ARGUMENT"
        assert not store_dir.exists()

    async def test_parse_export(self, test_settings: Settings):
        server = ExportServer(app_settings=test_settings)

        result = await _handler(server, "parse_export")("abc~a~b.txt")

        assert result == {"id": "abc", "filename": "a~b.txt"}

    def test_guess_content_type(self, test_settings: Settings):
        server = ExportServer(app_settings=test_settings)

        assert server.guess_content_type("abc~report.pdf") == "application/pdf"
        assert server.guess_content_type("abc~blob") == "application/octet-stream"

    async def test_file_routes_serve_exports(self, test_settings: Settings):
        server = ExportServer(transport=TransportConfig(type="http", port=3000), app_settings=test_settings)
        result = await _handler(server, "export_text")("notes.txt", "hello")

        client = TestClient(Starlette(routes=server.file_routes()))
        response = client.get(f"/files/{result['stored_name']}")

        assert response.status_code == 200
        assert response.text == "hello"
        assert response.headers["content-type"].startswith("text/plain")
        assert response.headers["content-disposition"] == 'attachment; filename="notes.txt"'
