from typing import Any, Callable, Coroutine
from urllib.parse import urlencode

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.responses import Response

from src.platform.constant.route_constant import ENTRY_PAGE
from src.platform.exception.exceptions import (
    CustomBaseError,
    MissingFieldsError,
    PersistenceError,
    UnauthorizedError,
)
from src.platform.logging.loguru_io import Logger

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc), 500)
    content: dict[str, Any] = {'detail': error.message, 'code': error.code}
    if isinstance(error, MissingFieldsError):
        content['fields'] = error.fields
    return JSONResponse(status_code=error.status_code, content=content)


async def unauthorized_error_handler(request: Request, exc: Exception) -> JSONResponse:
    reason = exc.reason if isinstance(exc, UnauthorizedError) else 'unauthorized'
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={'detail': 'Unauthorized', 'code': UnauthorizedError.code, 'error': reason},
        headers={'Location': f'{ENTRY_PAGE}?{urlencode({"error": reason})}'},
    )


async def persistence_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if isinstance(exc, PersistenceError):
        Logger.base.error(f'PersistenceError on {request.method} {request.url.path}: {exc.detail}')
    return await custom_error_handler(request, exc)


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'detail': jsonable_encoder(error.errors()), 'code': 'VALIDATION_ERROR'},
    )


async def rate_limit_exceeded_handler(request: Request, exc: Exception) -> JSONResponse:
    detail = exc.detail if isinstance(exc, RateLimitExceeded) else 'Too many requests'
    client = request.client.host if request.client else 'unknown'
    Logger.base.warning(f'Rate limit hit by {client} on {request.method} {request.url.path}')
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={'detail': detail, 'code': 'RATE_LIMITED'},
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.exception(f'Unhandled {type(exc).__name__} on {request.url.path}: {exc}')
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'detail': 'Server error. Please try again.'},
    )


# Exception handler mapping (most specific classes first)
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    UnauthorizedError: unauthorized_error_handler,
    PersistenceError: persistence_error_handler,
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    RateLimitExceeded: rate_limit_exceeded_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
