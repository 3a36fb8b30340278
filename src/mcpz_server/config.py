"""Configuration management for mcpz-server.

Handles environment-based configuration with layered loading:
1. .env.template (base defaults)
2. .env.local (personal overrides)
3. Environment variables (highest priority)

Only the CLI and the demo server read these settings; the library
functions always take explicit configuration objects.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_DELIMITER, DEFAULT_ENDPOINT, FileServingConfig, FileUriConfig


class Settings(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        # Load from multiple env files in order
        env_file=[".env.template", ".env.local"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    app_name: str = Field(default="mcpz-server", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")

    # MCP Server Settings
    mcp_server_name: str = Field(default="mcpz-export", description="MCP server identifier")

    # File Serving
    resource_store_uri: str = Field(default="file://./data/files", description="Store directory (path or file:// URI)")
    file_delimiter: str = Field(default=DEFAULT_DELIMITER, description="Separator between ID and original filename")
    files_endpoint: str = Field(default=DEFAULT_ENDPOINT, description="Mount prefix of the retrieval endpoint")
    files_base_url: str | None = Field(default=None, description="Public base URL for retrieval URIs")
    content_disposition: str = Field(default="attachment", description="attachment or inline")

    # HTTP Server Settings (for HTTP transport)
    http_host: str = Field(default="127.0.0.1", description="HTTP server host")
    http_cors_origins: list[str] = Field(default=["*"], description="CORS allowed origins")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="Log format")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("files_endpoint")
    @classmethod
    def validate_files_endpoint(cls, v: str) -> str:
        """Endpoint must be an absolute path without a trailing slash."""
        if not v.startswith("/"):
            raise ValueError("files_endpoint must start with '/'")
        return v.rstrip("/") or DEFAULT_ENDPOINT

    @field_validator("content_disposition")
    @classmethod
    def validate_content_disposition(cls, v: str) -> str:
        """Validate content disposition."""
        valid_dispositions = {"attachment", "inline"}
        if v.lower() not in valid_dispositions:
            raise ValueError(f"content_disposition must be one of {valid_dispositions}")
        return v.lower()

    def file_serving_config(self) -> FileServingConfig:
        """Build the storage configuration."""
        return FileServingConfig(resource_store_uri=self.resource_store_uri, delimiter=self.file_delimiter)

    def file_uri_config(self) -> FileUriConfig:
        """Build the URI configuration."""
        return FileUriConfig(
            resource_store_uri=self.resource_store_uri,
            base_url=self.files_base_url,
            endpoint=self.files_endpoint,
        )


# Global settings instance
settings = Settings()
