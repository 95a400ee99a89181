"""
Exception handlers for the scheme server.

Maps the error taxonomy onto HTTP responses:
- NotFoundError (scheme or template): 404
- SchemeParseError, SourceReadError, RenderError: 500

Every response body is JSON ``{"detail": ..., "type": ...}``.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from base16_sh.core.errors import (
    Base16Error,
    NotFoundError,
    RenderError,
    SchemeParseError,
    SourceReadError,
)

logger = logging.getLogger(__name__)


def _error_response(status_code: int, exc: Base16Error, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "type": error_type},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the standard exception handlers on a FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
        """Unknown scheme or template names become 404."""
        return _error_response(404, exc, f"{exc.kind}_not_found")

    @app.exception_handler(SchemeParseError)
    async def parse_error_handler(request: Request, exc: SchemeParseError) -> Response:
        """A scheme that no longer parses is a server-side fault."""
        logger.error(f"Scheme parse failure for {request.url.path}: {exc}")
        return _error_response(500, exc, "parse_error")

    @app.exception_handler(SourceReadError)
    async def read_error_handler(request: Request, exc: SourceReadError) -> Response:
        """Indexed files that became unreadable."""
        logger.error(f"Read failure for {request.url.path}: {exc}")
        return _error_response(500, exc, "read_error")

    @app.exception_handler(RenderError)
    async def render_error_handler(request: Request, exc: RenderError) -> Response:
        """Template compile or render failures."""
        logger.error(f"Render failure for {request.url.path}: {exc}")
        return _error_response(500, exc, "render_error")
