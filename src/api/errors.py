"""JSON response class and exception handlers."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.exceptions import AuthServiceError, DatabaseConnectionError

logger = logging.getLogger(__name__)


class UTF8JSONResponse(JSONResponse):
    """JSON response that always declares its charset."""

    media_type = "application/json; charset=UTF-8"


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None):
    return UTF8JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"success": false, "message": ...}``."""

    @app.exception_handler(AuthServiceError)
    async def handle_auth_service_error(_: Request, exc: AuthServiceError):
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(_: Request, exc: SQLAlchemyError):
        logger.error(f"Unhandled database error: {exc}")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, DatabaseConnectionError.default_message
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(_: Request, exc: RequestValidationError):
        logger.debug(f"Rejected request body: {exc.errors()}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(_: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return error_response(exc.status_code, "Method not allowed. Use POST.", exc.headers)
        return error_response(exc.status_code, str(exc.detail), exc.headers)
