"""
Error handlers and helpers that keep every failure in the `{"error": ...}` shape.

- ValidationError results -> `validation_error_response` (400)
- HTTPException from services (404, 409, 400) -> same body shape
- Unreadable or non-object request bodies -> 400 with a short message
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from plantcare.core.logging import get_logger
from plantcare.core.metrics import record_validation
from plantcare.validation.result import ValidationError, invalid, validation_error_response

logger = get_logger(__name__)

INVALID_JSON = "Invalid JSON body"
BODY_NOT_OBJECT = "Request body must be a JSON object"
INVALID_REQUEST = "Invalid request"


def reject(entity: str, validation_error: ValidationError) -> JSONResponse:
    """Log and count a failed validation, then render it."""
    record_validation(entity, valid=False)
    logger.info(
        "validation_failed",
        entity=entity,
        error=validation_error.error,
        status_code=validation_error.status,
    )
    return validation_error_response(validation_error)


def request_error_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        return INVALID_JSON
    if any(tuple(error.get("loc", ()))[:1] == ("body",) for error in errors):
        return BODY_NOT_OBJECT
    return INVALID_REQUEST


def register_error_handlers(app: FastAPI) -> None:
    """Register global error handlers on the FastAPI app."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            logger.error("http_error", status_code=exc.status_code, detail=exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.debug("request_validation_errors", errors=exc.errors())
        return reject("request", invalid(request_error_message(exc)))
