"""
Exception handlers for FastAPI applications using hearth-access.

Translates hearth-access errors into JSON responses with the mapped HTTP
status, and rate limit errors into 429 responses with ``Retry-After``.
"""
from typing import Any, Callable, Dict, Optional
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import logging

from ..core.exceptions import HearthAccessError, HttpStatusMapper, create_error_response
from .headers import retry_after_headers

logger = logging.getLogger(__name__)


class ExceptionHandlerRegistry:
    """Registry for hearth-access exception handlers."""

    def __init__(
        self,
        response_formatter: Optional[Callable[[HearthAccessError], Dict[str, Any]]] = None,
        status_mapper: Optional[HttpStatusMapper] = None,
        is_production: bool = True
    ):
        """
        Initialize exception handler registry.

        Args:
            response_formatter: Function building the JSON body for an error
            status_mapper: Exception-to-status mapper
            is_production: Whether running in production mode
        """
        self.response_formatter = response_formatter or create_error_response
        self.status_mapper = status_mapper or HttpStatusMapper()
        self.is_production = is_production

    def build_response(self, exc: HearthAccessError) -> JSONResponse:
        status_code = self.status_mapper.get_status_code(exc)
        if status_code >= 500:
            logger.error(f"{exc.__class__.__name__}: {exc.message}")
        else:
            logger.info(f"Request rejected with {status_code}: {exc.error_code}")

        return JSONResponse(
            status_code=status_code,
            content=self.response_formatter(exc),
            headers=retry_after_headers(exc),
        )

    def register_handlers(self, app: FastAPI) -> None:
        """Register exception handlers for the application.

        Args:
            app: FastAPI application instance
        """
        @app.exception_handler(HearthAccessError)
        async def hearth_access_exception_handler(request: Request, exc: HearthAccessError):
            """Handle hearth-access exceptions."""
            return self.build_response(exc)

        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle unexpected exceptions."""
            logger.error(f"Unhandled exception: {exc}", exc_info=True)

            if self.is_production:
                message = "An unexpected error occurred"
            else:
                message = str(exc)

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": {"code": "internal_error", "message": message}}
            )


def register_exception_handlers(
    app: FastAPI,
    response_formatter: Optional[Callable[[HearthAccessError], Dict[str, Any]]] = None,
    is_production: bool = True
) -> None:
    """
    Register hearth-access exception handlers for a FastAPI application.

    Args:
        app: FastAPI application instance
        response_formatter: Custom response body builder
        is_production: Whether to hide unexpected error messages
    """
    registry = ExceptionHandlerRegistry(response_formatter, is_production=is_production)
    registry.register_handlers(app)
