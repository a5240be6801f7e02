"""Interface layer errors and their HTTP encoding.

Every failure is returned as ``{"success": false, "msg": ...}`` with the
matching status code.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from eco.domain.error import (
    NoNewActionsError,
    NotFoundError,
    StoreError,
    ValidationError,
)

SERVER_ERROR_MSG = "Server error"


def error_response(status_code: int, msg: str, **extra: object) -> JSONResponse:
    """Build the JSON error envelope."""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"success": False, "msg": msg, **extra}),
    )


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc), errors=exc.errors)


async def handle_no_new_actions(request: Request, exc: NoNewActionsError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, f"{exc.resource} not found")


async def handle_store_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Store error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MSG)


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(
        status.HTTP_400_BAD_REQUEST, "Invalid data", errors=exc.errors()
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "msg": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain and framework errors to HTTP responses.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(NoNewActionsError, handle_no_new_actions)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(StoreError, handle_store_error)
    app.add_exception_handler(SQLAlchemyError, handle_store_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
