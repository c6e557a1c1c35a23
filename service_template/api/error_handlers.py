"""Error Handlers - global exception handlers rendering error envelopes.

Invariants:
    - ServiceError -> its own http_status and to_envelope()
    - RequestValidationError -> 400, VALIDATION_FAILED, field-level details in data
    - HTTPException (routing 404/405, explicit raises) -> same transport status,
      catalog code when one exists, otherwise a code derived from the status
    - Exception (catch-all) -> 500 INTERNAL_ERROR, never leaks internal details
    - 204 and 304 are sent with headers only, no envelope body
    - A non-string HTTPException detail goes to data, msg is the status phrase
    - Codes that fail is_valid_status_code are still returned, but logged
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.responses import Response
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from service_template.api.response_writer import envelope_response
from service_template.core.envelope import error
from service_template.core.errors import ServiceError
from service_template.core.status_codes import (
    ResultCode, is_valid_status_code, result_code_for_transport,
)

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Invalid request data"
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"

_TRANSPORT_RESULT_CODES = {
    status.HTTP_404_NOT_FOUND: ResultCode.RESOURCE_NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ResultCode.METHOD_NOT_ALLOWED,
    status.HTTP_500_INTERNAL_SERVER_ERROR: ResultCode.INTERNAL_ERROR,
}

_BODYLESS_STATUSES = frozenset({
    status.HTTP_204_NO_CONTENT, status.HTTP_304_NOT_MODIFIED,
})


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_service_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        """Handle all service errors."""
        logger.error(
            f"ServiceError: {exc.message}",
            extra={
                "error_code": exc.code,
                "status_code": exc.http_status,
                "path": request.url.path,
                "method": request.method,
            },
        )
        if not is_valid_status_code(exc.code):
            logger.warning(
                f"Result code {exc.code} does not follow the 11-digit convention",
                extra={"error_code": exc.code, "path": request.url.path},
            )
        return envelope_response(exc.http_status, exc.to_envelope())


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": int(ResultCode.VALIDATION_FAILED)},
        )
        return envelope_response(
            status.HTTP_400_BAD_REQUEST,
            error(
                int(ResultCode.VALIDATION_FAILED),
                INVALID_REQUEST_MESSAGE,
                build_validation_details(exc),
            ),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Handle routing errors and explicitly raised HTTPExceptions."""
        code = transport_result_code(exc.status_code)
        logger.info(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={
                "error_code": code,
                "status_code": exc.status_code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        if exc.status_code in _BODYLESS_STATUSES:
            return Response(status_code=exc.status_code, headers=exc.headers)
        response = envelope_response(
            exc.status_code, http_error_envelope(code, exc),
        )
        if exc.headers:
            response.headers.update(exc.headers)
        return response


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return envelope_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            error(int(ResultCode.INTERNAL_ERROR), INTERNAL_ERROR_MESSAGE),
        )


def transport_result_code(http_status: int) -> int:
    """Catalog code for a transport status, derived from the status if none."""
    code = _TRANSPORT_RESULT_CODES.get(http_status)
    if code is not None:
        return int(code)
    return result_code_for_transport(http_status)


def http_error_envelope(code: int, exc: StarletteHTTPException):
    """Error envelope for an HTTPException; structured details go to data."""
    if isinstance(exc.detail, str):
        return error(code, exc.detail)
    try:
        phrase = HTTPStatus(exc.status_code).phrase
    except ValueError:
        phrase = "Error"
    return error(code, phrase, exc.detail)


def build_validation_details(exc: RequestValidationError) -> list[dict]:
    """Field-level details for a validation error envelope."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
