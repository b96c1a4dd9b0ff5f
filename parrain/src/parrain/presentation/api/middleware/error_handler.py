"""
Global error handling middleware.

Every error leaves the service as {"success": false, "error", "code"}.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from parrain.domain.exceptions import ParrainException
from parrain.infrastructure.monitoring import get_logger

logger = get_logger(__name__)

STATUS_CODE_MAP = {
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CONFLICT": status.HTTP_400_BAD_REQUEST,
    "DUPLICATE_ENTITY": status.HTTP_409_CONFLICT,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "IDENTIFIER_EXHAUSTED": status.HTTP_503_SERVICE_UNAVAILABLE,
    "STORE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(status_code: int, message: str, code: str) -> JSONResponse:
    """Build error envelope response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": message,
            "code": code,
        },
    )


async def parrain_exception_handler(
    request: Request, exc: ParrainException
) -> JSONResponse:
    """
    Handle Parrain domain exceptions.

    Converts domain exceptions to appropriate HTTP responses.
    """
    status_code = STATUS_CODE_MAP.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    if status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.message}",
            exc_info=exc,
        )

    return error_response(status_code, exc.message, exc.code)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Translate malformed request bodies into 400 errors."""
    details = []
    for error in exc.errors():
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part != "body"
        )
        message = error.get("msg", "invalid value")
        details.append(f"{location}: {message}" if location else message)

    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "; ".join(details) or "Malformed request",
        "VALIDATION_ERROR",
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Last-resort handler: return a generic 500 envelope.

    Starlette re-raises the exception after this response is sent and
    the server logs the traceback, so nothing is logged here.
    """
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        "INTERNAL_ERROR",
    )
