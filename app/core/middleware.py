import asyncio
import logging

from fastapi import Request, Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from app.api.http.errors import server_error_response

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


async def cors_middleware(request: Request, call_next):
    """Preflight-запросы получают 204, остальные - заголовки CORS"""
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)

    # Обработчик Exception срабатывает снаружи пользовательских middleware,
    # поэтому 500 формируется здесь, иначе ответ останется без заголовков CORS
    try:
        response = await call_next(request)
    except Exception:
        logger.exception(f"{request.method} {request.url.path}: необработанная ошибка")
        response = server_error_response()
    response.headers.update(CORS_HEADERS)
    return response


class RequestDeadlineMiddleware:
    """Ограничение времени обработки запроса.

    По истечении ``timeout`` обработчик отменяется вместе с незавершенными
    запросами к БД и внешнему API, клиент получает 500.
    """

    def __init__(self, app: ASGIApp, timeout: float):
        self.app = app
        self.timeout = timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(self.app(scope, receive, send_wrapper), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.error(f"{scope['method']} {scope['path']}: превышено время обработки ({self.timeout} с)")
            if not response_started:
                await server_error_response()(scope, receive, send)
