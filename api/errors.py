"""
Uniform JSON error bodies: {"error": <message>, "code": <ApiErrorCode>[, "details": ...]}.
"""
import logging
from enum import Enum

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from services.exceptions import InsufficientSeatsError, NotFoundError

logger = logging.getLogger(__name__)


class ApiErrorCode(str, Enum):
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    RATE_LIMITED = "RATE_LIMITED"
    SERVER_ERROR = "SERVER_ERROR"
    UNKNOWN = "UNKNOWN"


_STATUS_CODES = {
    401: ApiErrorCode.UNAUTHORIZED,
    403: ApiErrorCode.FORBIDDEN,
    404: ApiErrorCode.NOT_FOUND,
    400: ApiErrorCode.VALIDATION_ERROR,
    422: ApiErrorCode.VALIDATION_ERROR,
    429: ApiErrorCode.RATE_LIMITED,
    500: ApiErrorCode.SERVER_ERROR,
    502: ApiErrorCode.SERVER_ERROR,
    503: ApiErrorCode.SERVER_ERROR,
}


def status_to_error_code(status_code: int) -> ApiErrorCode:
    return _STATUS_CODES.get(status_code, ApiErrorCode.UNKNOWN)


def error_response(status_code: int, message: str, details=None, headers=None) -> JSONResponse:
    content = {"error": message, "code": status_to_error_code(status_code).value}
    if details is not None:
        content["details"] = jsonable_encoder(details)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def http_error_from_service(exc: Exception) -> HTTPException:
    """Map a service-layer exception onto the HTTP status a route should return."""
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, InsufficientSeatsError):
        return HTTPException(status_code=400, detail=str(exc))
    return HTTPException(status_code=500, detail="Internal server error")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Validation error on %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(400, "Missing or invalid fields", details=exc.errors())


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
