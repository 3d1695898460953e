"""
Клиент внешнего сервиса деталей песни.

Сервис отвечает на ``GET /info?group=...&song=...`` JSON-объектом
``{"releaseDate": "ДД.ММ.ГГГГ", "text": "...", "link": "..."}``.
Любая проблема (сеть, статус не 200, некорректный JSON) поднимается
как ``DetailFetchError``. Повторов и кэширования нет.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from app.domains.songs.entities import SongDetail
from app.domains.songs.exceptions import DetailFetchError
from app.domains.songs.schemas import SongDetailPayload

logger = logging.getLogger(__name__)


class SongDetailClient:
    """Обертка над общим httpx.AsyncClient для запроса /info"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout, trust_env=False)
            self._owns_client = True
        return self._client

    async def fetch(self, group: str, title: str) -> SongDetail:
        """Получение деталей песни; параметры запроса кодируются httpx"""
        url = f"{self.base_url}/info"
        params = {"group": group, "song": title}
        logger.info(f"Запрос деталей песни: group={group!r}, song={title!r}")

        try:
            response = await self.client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.debug(f"Ошибка отправки запроса к {url}: {e!r}")
            raise DetailFetchError(f"request to detail API failed: {e}") from e

        if response.status_code != httpx.codes.OK:
            raise DetailFetchError(f"detail API returned status {response.status_code}")

        try:
            payload = SongDetailPayload.model_validate_json(response.content)
        except ValidationError as e:
            raise DetailFetchError(f"malformed detail API response: {e}") from e

        logger.debug("Детали песни успешно получены")
        return SongDetail(
            release_date=payload.release_date,
            text=payload.text,
            link=payload.link
        )

    async def close(self) -> None:
        """Закрытие клиента, если он был создан здесь"""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
