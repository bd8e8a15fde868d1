"""
API error handling and exception mapping.

Command errors are classified by kind; this module turns each kind into
an HTTP status with a uniform ErrorResponse body.
"""

from datetime import datetime

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from flashcard_manager.api.schemas import ErrorResponse
from flashcard_manager.application.errors import CommandError, ErrorKind
from flashcard_manager.infra.config.logging_config import get_logger

logger = get_logger("api.errors")

STATUS_BY_KIND = {
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def command_error_handler(request: Request, exc: CommandError) -> JSONResponse:
    """
    Handle classified command errors.

    Args:
        request: The HTTP request
        exc: The command error

    Returns:
        JSONResponse: Formatted error response
    """
    status_code = STATUS_BY_KIND.get(
        exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    logger.warning(
        "command.error", kind=exc.kind.value, detail=exc.message, status_code=status_code
    )

    error_response = ErrorResponse(
        error=exc.kind.value, detail=exc.message, timestamp=datetime.utcnow()
    )
    return JSONResponse(
        status_code=status_code, content=error_response.model_dump(mode="json")
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request bodies and path parameters FastAPI could not parse."""
    formatted_errors = []
    for error in exc.errors():
        location = " -> ".join(str(loc) for loc in error["loc"])
        formatted_errors.append(f"{location}: {error['msg']}")

    error_detail = "Validation failed: " + "; ".join(formatted_errors)
    logger.warning("request.validation_error", detail=error_detail)

    error_response = ErrorResponse(
        error="VALIDATION_ERROR", detail=error_detail, timestamp=datetime.utcnow()
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_response.model_dump(mode="json"),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle anything that escaped classification."""
    logger.exception("request.unhandled_error", error_type=type(exc).__name__)

    error_response = ErrorResponse(
        error=ErrorKind.INTERNAL.value,
        detail="An unexpected error occurred. Please try again later.",
        timestamp=datetime.utcnow(),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.model_dump(mode="json"),
    )


def setup_error_handlers(app) -> None:
    """
    Setup error handlers for the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(CommandError, command_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)
