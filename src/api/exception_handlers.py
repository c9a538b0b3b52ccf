"""
Global exception handlers.

API key rejections are answered in plain text; every other error uses the
JSON envelope ``{"error": {"code": ..., "message": ...}}``.
"""

import traceback

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.auth.gate import ApiKeyRejectedError
from src.api.config import is_production_mode

logger = structlog.get_logger(__name__)

_STATUS_CODES = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    500: "internal_error",
}


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers on the FastAPI app.

    Args:
        app: The FastAPI application.
    """

    @app.exception_handler(ApiKeyRejectedError)
    async def api_key_rejected_handler(
        request: Request, exc: ApiKeyRejectedError
    ) -> PlainTextResponse:
        return PlainTextResponse(exc.message, status_code=401)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "HTTP error",
                status_code=exc.status_code,
                path=request.url.path,
                detail=exc.detail,
            )

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "code": _STATUS_CODES.get(exc.status_code, f"error_{exc.status_code}"),
                    "message": str(exc.detail),
                }
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle all unhandled exceptions; never expose stack traces in production."""
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=exc,
        )

        error_content = {
            "error": {
                "code": "internal_error",
                "message": "An internal error occurred. Please try again later.",
            }
        }

        if not is_production_mode():
            error_content["error"]["details"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exception(exc),
            }

        return JSONResponse(status_code=500, content=error_content)
