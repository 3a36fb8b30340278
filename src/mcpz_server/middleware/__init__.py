from .composer import MiddlewareLayer, ModuleCollections, compose_middleware
from .logging import LoggingMiddleware, create_logging_middleware, get_request_logger

__all__ = [
    "LoggingMiddleware",
    "MiddlewareLayer",
    "ModuleCollections",
    "compose_middleware",
    "create_logging_middleware",
    "get_request_logger",
]
