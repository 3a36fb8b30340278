"""Pytest configuration and shared fixtures for mcpz-server tests."""

from collections.abc import Generator
from pathlib import Path

import pytest
from starlette.applications import Starlette
from starlette.routing import Mount
from starlette.testclient import TestClient

from mcpz_server.config import Settings
from mcpz_server.file_serving import create_file_serving_router
from mcpz_server.models import FileServingConfig, FileServingRouterOptions, FileUriConfig


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    """Resource store directory (not created)."""
    return tmp_path / "store"


@pytest.fixture
def store_uri(store_dir: Path) -> str:
    """file:// URI of the resource store."""
    return f"file://{store_dir}"


@pytest.fixture
def file_config(store_uri: str) -> FileServingConfig:
    """Default file serving configuration."""
    return FileServingConfig(resource_store_uri=store_uri)


@pytest.fixture
def uri_config(store_uri: str) -> FileUriConfig:
    """URI configuration without base URL."""
    return FileUriConfig(resource_store_uri=store_uri)


@pytest.fixture
def test_settings(store_uri: str) -> Settings:
    """Create test configuration settings."""
    return Settings(
        debug=True,
        resource_store_uri=store_uri,
        files_endpoint="/files",
        log_level="DEBUG",
    )


@pytest.fixture
def make_client(file_config: FileServingConfig):
    """Build a test client with the retrieval router mounted at /files."""

    def _make(
        options: FileServingRouterOptions | None = None,
        config: FileServingConfig | None = None,
    ) -> TestClient:
        router = create_file_serving_router(
            config or file_config,
            options or FileServingRouterOptions(content_type="application/pdf"),
        )
        return TestClient(Starlette(routes=[Mount("/files", app=router)]))

    return _make


@pytest.fixture
def client(make_client) -> Generator[TestClient, None, None]:
    """Test client with default router options."""
    with make_client() as test_client:
        yield test_client
