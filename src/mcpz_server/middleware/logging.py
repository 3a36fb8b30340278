"""Logging middleware.

Binds a logger for the duration of each handler call. Handlers fetch it
with ``get_request_logger()`` instead of taking it as a parameter, which
keeps their signatures (and therefore their MCP schemas) untouched.

Example:
    logging_middleware = create_logging_middleware(logger)
    modules = compose_middleware(modules, [auth_layer, logging_middleware.layer()])
"""

import functools
import inspect
import logging
from collections.abc import Callable
from contextvars import ContextVar
from typing import Any, TypeVar

from ..logging_setup import PACKAGE_LOGGER
from .composer import MiddlewareLayer

_request_logger: ContextVar[logging.Logger | None] = ContextVar("mcpz_request_logger", default=None)

M = TypeVar("M")


def get_request_logger() -> logging.Logger:
    """Logger bound by the logging middleware, or the package logger outside a wrapped call."""
    return _request_logger.get() or logging.getLogger(PACKAGE_LOGGER)


def _bind_logger(handler: Callable[..., Any], logger: logging.Logger) -> Callable[..., Any]:
    if inspect.iscoroutinefunction(handler):

        @functools.wraps(handler)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            token = _request_logger.set(logger)
            try:
                return await handler(*args, **kwargs)
            finally:
                _request_logger.reset(token)

        return async_wrapper

    @functools.wraps(handler)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        token = _request_logger.set(logger)
        try:
            return handler(*args, **kwargs)
        finally:
            _request_logger.reset(token)

    return wrapper


class LoggingMiddleware:
    """Wraps tool, resource and prompt modules so their handlers see ``logger``."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def _wrap(self, module: M) -> M:
        return module.model_copy(update={"handler": _bind_logger(module.handler, self.logger)})

    def with_tool_logging(self, module: M) -> M:
        return self._wrap(module)

    def with_resource_logging(self, module: M) -> M:
        return self._wrap(module)

    def with_prompt_logging(self, module: M) -> M:
        return self._wrap(module)

    def layer(self) -> MiddlewareLayer:
        """This middleware as a layer for ``compose_middleware``."""
        return MiddlewareLayer(
            with_tool=self.with_tool_logging,
            with_resource=self.with_resource_logging,
            with_prompt=self.with_prompt_logging,
        )


def create_logging_middleware(logger: logging.Logger) -> LoggingMiddleware:
    return LoggingMiddleware(logger)
