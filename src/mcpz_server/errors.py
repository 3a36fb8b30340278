"""Exception types raised by mcpz-server utilities."""


class FileServingError(Exception):
    """Base class for file storage and retrieval failures."""

    code = "file_serving_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(FileServingError):
    """Invalid or incomplete setup: bad store location, missing URI base, bad port."""

    code = "configuration_error"


class GenerationError(FileServingError):
    """The ID generator kept producing values that contain the delimiter."""

    code = "generation_error"
