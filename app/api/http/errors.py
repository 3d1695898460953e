import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from app.domains.songs.exceptions import (
    SongCatalogError, SongNotFoundError, PageOutOfBoundsError,
    InvalidIdError, InvalidDateError
)

logger = logging.getLogger(__name__)

MSG_INVALID_ID = "Неправильный формат ID"
MSG_INVALID_PAYLOAD = "Неправильный формат данных"
MSG_INVALID_DATE = "Неправильный формат даты"
MSG_NOT_FOUND = "Песня не найдена"
MSG_PAGE_OUT_OF_BOUNDS = "Страница выходит за пределы доступного диапазона"
MSG_SERVER_ERROR = "Проблема на сервере"

# Ошибки, не перечисленные здесь, отдаются как 500
ERROR_RESPONSES = {
    InvalidIdError: (400, MSG_INVALID_ID),
    InvalidDateError: (400, MSG_INVALID_DATE),
    PageOutOfBoundsError: (400, MSG_PAGE_OUT_OF_BOUNDS),
    SongNotFoundError: (404, MSG_NOT_FOUND),
}


def error_response(status_code: int, message: str) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)


def server_error_response() -> PlainTextResponse:
    return error_response(500, MSG_SERVER_ERROR)


async def catalog_error_handler(request: Request, exc: SongCatalogError) -> PlainTextResponse:
    for exc_type in type(exc).__mro__:
        if exc_type in ERROR_RESPONSES:
            status_code, message = ERROR_RESPONSES[exc_type]
            logger.warning(f"{request.method} {request.url.path}: {status_code} {exc}")
            return error_response(status_code, message)

    logger.error(f"{request.method} {request.url.path}: {type(exc).__name__}: {exc}")
    return server_error_response()


async def validation_error_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    logger.warning(f"{request.method} {request.url.path}: некорректное тело запроса: {exc.errors()}")
    return error_response(400, MSG_INVALID_PAYLOAD)


async def unhandled_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception(f"{request.method} {request.url.path}: необработанная ошибка")
    return server_error_response()


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SongCatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
