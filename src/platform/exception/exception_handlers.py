"""
HTTP error mapping.

Platform errors keep their status code and merge their machine-readable
``detail`` into the body next to the message, e.g.
``{"detail": "Consent was already granted", "consent_state": "granted"}``.
Request validation failures are 400, anything unexpected is a logged 500.
"""

from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.platform.exception.exceptions import CustomBaseError, DomainError
from src.platform.logging.loguru_io import Logger


ExceptionHandler = Callable[[Request, Exception], Awaitable[JSONResponse]]


def _error_response(status_code: int, detail: Any, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={'detail': detail, **extra})


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, CustomBaseError):
        return await unexpected_error_handler(request, exc)
    extra = exc.detail if isinstance(exc, DomainError) else {}
    return _error_response(exc.status_code, exc.message, **extra)


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    return _error_response(status.HTTP_400_BAD_REQUEST, errors)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.opt(exception=exc).error(
        f'💥 [HTTP] Unhandled {type(exc).__name__} on {request.method} {request.url.path}'
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal server error')


EXCEPTION_HANDLERS: list[tuple[type[Exception], ExceptionHandler]] = [
    (CustomBaseError, custom_error_handler),
    (RequestValidationError, validation_error_handler),
    (Exception, unexpected_error_handler),
]


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS:
        app.add_exception_handler(exception_class, handler)
