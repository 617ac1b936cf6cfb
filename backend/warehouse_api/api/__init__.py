"""API package."""

from warehouse_api.api.error_handlers import register_exception_handlers
from warehouse_api.api.middleware import LoggingMiddleware
from warehouse_api.api.routes import router

__all__ = [
    "router",
    "LoggingMiddleware",
    "register_exception_handlers",
]
