"""FastAPI integration for hearth-access."""

from .exception_handlers import ExceptionHandlerRegistry, register_exception_handlers
from .headers import rate_limit_headers, retry_after_headers

__all__ = [
    "ExceptionHandlerRegistry",
    "register_exception_handlers",
    "rate_limit_headers",
    "retry_after_headers",
]
