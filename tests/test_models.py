"""Tests for mcpz-server data models and settings."""

import pytest
from pydantic import ValidationError

from mcpz_server.config import Settings
from mcpz_server.models import (
    DEFAULT_DELIMITER,
    DEFAULT_GENERATE_ID,
    ErrorBranch,
    FileServingConfig,
    FileServingRouterOptions,
    FileUriConfig,
    TransportConfig,
    create_actionable_error,
)


class TestFileServingConfig:
    """Test FileServingConfig defaults."""

    def test_defaults(self):
        config = FileServingConfig(resource_store_uri="/tmp/files")

        assert config.delimiter == DEFAULT_DELIMITER
        assert config.generate_id is DEFAULT_GENERATE_ID

    def test_default_generator(self):
        generated = DEFAULT_GENERATE_ID()

        assert len(generated) == 36
        assert DEFAULT_DELIMITER not in generated
        assert generated != DEFAULT_GENERATE_ID()

    def test_store_location_required(self):
        with pytest.raises(ValidationError):
            FileServingConfig()


class TestFileServingRouterOptions:
    """Test FileServingRouterOptions."""

    def test_static_content_type(self):
        options = FileServingRouterOptions(content_type="application/pdf")

        assert options.content_type == "application/pdf"
        assert options.content_disposition == "attachment"

    def test_callable_content_type(self):
        def pick(filename: str) -> str:
            return "text/csv"

        options = FileServingRouterOptions(content_type=pick, content_disposition="inline")

        assert options.content_type is pick
        assert options.content_disposition == "inline"

    def test_invalid_disposition(self):
        with pytest.raises(ValidationError):
            FileServingRouterOptions(content_type="text/plain", content_disposition="download")


class TestTransportConfig:
    """Test TransportConfig."""

    def test_stdio_has_no_port(self):
        assert TransportConfig(type="stdio").port is None

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            TransportConfig(type="sse")


class TestActionableError:
    """Test create_actionable_error."""

    def test_with_help(self):
        branch = create_actionable_error("Not found", "NOT_FOUND", "Check the ID")

        assert branch == ErrorBranch(error="Not found", code="NOT_FOUND", help="Check the ID")
        assert branch.type == "error"

    def test_without_help(self):
        dumped = create_actionable_error("Boom", "INTERNAL").model_dump(exclude_none=True)
        assert dumped == {"type": "error", "error": "Boom", "code": "INTERNAL"}


class TestSettings:
    """Test Settings validation."""

    def test_defaults(self):
        settings = Settings()

        assert settings.file_delimiter == "~"
        assert settings.files_endpoint == "/files"
        assert settings.content_disposition == "attachment"

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_endpoint_trailing_slash_stripped(self):
        assert Settings(files_endpoint="/exports/").files_endpoint == "/exports"

    def test_endpoint_must_be_absolute(self):
        with pytest.raises(ValidationError):
            Settings(files_endpoint="files")

    def test_invalid_disposition(self):
        with pytest.raises(ValidationError):
            Settings(content_disposition="download")

    def test_builds_file_configs(self, test_settings: Settings, store_uri: str):
        file_config = test_settings.file_serving_config()
        uri_config = test_settings.file_uri_config()

        assert file_config == FileServingConfig(resource_store_uri=store_uri)
        assert uri_config == FileUriConfig(resource_store_uri=store_uri, base_url=None, endpoint="/files")

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("RESOURCE_STORE_URI", "file:///srv/files")
        monkeypatch.setenv("FILE_DELIMITER", "_")

        settings = Settings()

        assert settings.resource_store_uri == "file:///srv/files"
        assert settings.file_delimiter == "_"
