"""Exception handlers shaping error responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from travel_sessions.errors import HttpError

UNEXPECTED_ERROR_MESSAGE = "Ha ocurrido un error inesperado."
INVALID_BODY_MESSAGE = "El cuerpo de la solicitud no es JSON válido"

_logger = logging.getLogger(__name__)


def error_response(
    status_code: int, message: str, details: object | None = None
) -> JSONResponse:
    """Build the standard error envelope."""
    content: dict[str, object] = {"status": "error", "message": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def register_error_handlers(app: FastAPI) -> None:
    """Install handlers translating exceptions into error envelopes."""

    @app.exception_handler(HttpError)
    async def handle_http_error(request: Request, exc: HttpError) -> JSONResponse:
        level = logging.INFO if exc.is_client_error else logging.ERROR
        _logger.log(
            level,
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc.message,
            extra={"status_code": exc.status_code},
        )
        return error_response(exc.status_code, exc.message, exc.details)

    @app.exception_handler(StarletteHTTPException)
    async def handle_starlette_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = f"Recurso no encontrado: {request.url.path}"
        else:
            message = str(exc.detail)
        return error_response(exc.status_code, message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        _logger.info(
            "%s %s rejected malformed body", request.method, request.url.path
        )
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        _logger.exception(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
            extra={"method": request.method, "path": request.url.path},
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_MESSAGE
        )
