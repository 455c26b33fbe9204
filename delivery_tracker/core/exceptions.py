import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class TrackerError(Exception):
    """Base class for errors that carry their own HTTP status"""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PackageNotFoundError(TrackerError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidCredentialsError(TrackerError):
    # Reported as 500 to stay compatible with existing clients of /login
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class MissingDeliveryAddressError(RuntimeError):
    """A stored package has no linked GeoLocation"""


def error_body(message: str) -> dict:
    return {"message": message}


def exception_message(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


async def tracker_error_handler(request: Request, exc: TrackerError):
    logger.warning(f"{request.method} {request.url.path} - {exc.__class__.__name__}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return JSONResponse(
        status_code=422,
        content=error_body("; ".join(parts) or "Invalid request"),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(exception_message(exc)),
    )


def setup_exception_handlers(app: FastAPI):
    """Map every failure to a status code and a {message} body"""
    app.add_exception_handler(TrackerError, tracker_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
