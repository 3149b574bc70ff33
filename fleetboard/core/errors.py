"""
Error taxonomy and FastAPI exception handlers.

Every failure is reported as ``{"error": "Internal Server Error"}`` with
HTTP 500 unless ``settings.flat_errors`` is disabled, in which case missing
records map to 404 and malformed bodies to 400.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from fleetboard.config import get_settings


logger = logging.getLogger(__name__)

FLAT_ERROR_MESSAGE = "Internal Server Error"


class FleetboardError(Exception):
    """Base class for errors raised by the service layer."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class RecordNotFoundError(FleetboardError):
    """No record matches the requested key."""
    status_code = status.HTTP_404_NOT_FOUND
    
    def __init__(self, entity: str, key: str):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} {key} not found")


class InvalidPayloadError(FleetboardError):
    """Request body is structurally valid JSON but unusable."""
    status_code = status.HTTP_400_BAD_REQUEST


def _error_response(status_code: int, message: str) -> JSONResponse:
    if get_settings().flat_errors:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": FLAT_ERROR_MESSAGE},
        )
    return JSONResponse(status_code=status_code, content={"error": message})


async def fleetboard_error_handler(request: Request, exc: FleetboardError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} failed: {exc}")
    return _error_response(exc.status_code, str(exc))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.errors()}")
    return _error_response(status.HTTP_400_BAD_REQUEST, "Malformed request")


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} store failure")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, FLAT_ERROR_MESSAGE)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} unhandled error")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": FLAT_ERROR_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach all handlers to the application."""
    app.add_exception_handler(FleetboardError, fleetboard_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
