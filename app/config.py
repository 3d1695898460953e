from typing import Tuple

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str
    HTTP_PORT: str = ":8080"
    EXTERNAL_API_URL: str

    LOG_LEVEL: str = "DEBUG"
    DB_ECHO: bool = False
    DB_COMMAND_TIMEOUT: float = 15.0
    DETAIL_API_TIMEOUT: float = 10.0
    REQUEST_TIMEOUT: float = 30.0
    CORS_ENABLED: bool = True

    model_config = {"env_file": ".env", "extra": "ignore"}

    @field_validator("DATABASE_URL")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        """Приводит postgres:// и postgresql:// к драйверу asyncpg"""
        if not v:
            raise ValueError("DATABASE_URL не задан")
        for prefix in ("postgres://", "postgresql://"):
            if v.startswith(prefix):
                return "postgresql+asyncpg://" + v[len(prefix):]
        return v

    @field_validator("EXTERNAL_API_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if not v:
            raise ValueError("EXTERNAL_API_URL не задан")
        return v.rstrip("/")

    def http_bind(self) -> Tuple[str, int]:
        """Разбор адреса вида ':8080' или 'host:8080' в (host, port)"""
        host, _, port = self.HTTP_PORT.rpartition(":")
        return host or "0.0.0.0", int(port)


settings = Settings()
