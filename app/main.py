from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
import uvicorn

from app.api.http.errors import register_exception_handlers
from app.api.router import api_router
from app.clients.song_detail import SongDetailClient
from app.config import settings
from app.core.db import engine
from app.core.logging_config import setup_logging
from app.core.middleware import RequestDeadlineMiddleware, cors_middleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Общий HTTP-клиент внешнего API на все время работы приложения
    app.state.detail_client = SongDetailClient(
        settings.EXTERNAL_API_URL,
        timeout=settings.DETAIL_API_TIMEOUT
    )
    logger.info(f"Сервер запущен, внешний API: {settings.EXTERNAL_API_URL}")
    try:
        yield
    finally:
        await app.state.detail_client.close()
        await engine.dispose()
        logger.info("Сервер остановлен")


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Songs API",
        description="API для управления библиотекой песен",
        version="1.0.0",
        docs_url="/docs/swagger",
        lifespan=lifespan
    )

    # Последний добавленный middleware выполняется первым: CORS оборачивает дедлайн
    app.add_middleware(RequestDeadlineMiddleware, timeout=settings.REQUEST_TIMEOUT)
    if settings.CORS_ENABLED:
        app.middleware("http")(cors_middleware)

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    host, port = settings.http_bind()
    logger.info(f"Сервер работает на {host}:{port}")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
