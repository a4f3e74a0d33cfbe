import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_405_METHOD_NOT_ALLOWED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from review_api.schemas.validation import FieldError

logger = logging.getLogger(__name__)


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Render HTTP errors as ``{"detail": ...}``.

    A method that is not allowed on a known path is reported as 404, like an
    unknown path.

    :param request: Incoming request.
    :param exc: Raised exception.
    :return: JSON error response.
    """
    if exc.status_code == HTTP_405_METHOD_NOT_ALLOWED:
        status_code, detail, headers = HTTP_404_NOT_FOUND, "Not Found", None
    else:
        status_code, detail, headers = exc.status_code, exc.detail, exc.headers

    extra = {"request_id": _request_id(request), "status_code": status_code, "detail": detail}
    if status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("HTTP error", extra=extra)
    else:
        logger.info("HTTP error", extra=extra)

    return JSONResponse(status_code=status_code, content={"detail": detail}, headers=headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Framework-level validation errors use the same field list as the service validators."""
    errors = [
        FieldError(field=".".join(str(part) for part in error.get("loc", ())[1:]) or None, message=error.get("msg", ""))
        for error in exc.errors()
    ]
    logger.info("Validation error", extra={"request_id": _request_id(request), "status_code": HTTP_400_BAD_REQUEST})
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"detail": [error.model_dump() for error in errors]},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception occurred",
        extra={"request_id": _request_id(request), "path": request.url.path, "error_type": type(exc).__name__},
        exc_info=exc,
    )
    return JSONResponse(status_code=HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Internal server error"})
