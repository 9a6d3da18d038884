"""
Типизированные ошибки приложения и их отображение в HTTP-ответы.

Тело любой ошибки: ``{"error": "<message>"}``.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from database.async_db import StoreError
from utils.logger import get_logger

log = get_logger("[Errors]")

REQUIRED_FIELDS_MESSAGE = "name and department_id are required"
INVALID_ID_MESSAGE = "Invalid employee id"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class EmployeeNotFoundError(NotFoundError):
    pass


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # ошибки в path (например /employees/abc) отличаем от ошибок тела
    in_path = any((err.get("loc") or ("",))[0] == "path" for err in exc.errors())
    message = INVALID_ID_MESSAGE if in_path else REQUIRED_FIELDS_MESSAGE
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    log.error(f"{request.method} {request.url.path}: ошибка БД: {exc!r}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception(f"{request.method} {request.url.path}: необработанная ошибка", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
