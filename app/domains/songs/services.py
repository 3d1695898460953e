import logging
from typing import List, Protocol

from app.domains.songs.entities import Song, SongDetail, SongFilters, parse_release_date
from app.domains.songs.exceptions import PageOutOfBoundsError

logger = logging.getLogger(__name__)


class SongStore(Protocol):
    """Хранилище песен (реализация - SongRepository)"""

    async def list(self, filters: SongFilters, page: int, page_size: int) -> List[Song]: ...

    async def get_by_id(self, song_id: int) -> Song: ...

    async def create(self, song: Song) -> Song: ...

    async def update(self, song_id: int, song: Song) -> Song: ...

    async def delete(self, song_id: int) -> None: ...


class SongDetailProvider(Protocol):
    """Источник деталей песни (реализация - SongDetailClient)"""

    async def fetch(self, group: str, title: str) -> SongDetail: ...


def paginate_verses(verses: List[str], page: int, page_size: int) -> List[str]:
    """Срез куплетов для страницы.

    Начало страницы, равное числу куплетов, дает пустой список;
    начало за пределами - PageOutOfBoundsError.
    """
    start = (page - 1) * page_size
    end = start + page_size

    if start > len(verses):
        raise PageOutOfBoundsError(page, page_size, len(verses))

    return verses[start:min(end, len(verses))]


class SongService:
    """Сервис для работы с каталогом песен"""

    def __init__(self, store: SongStore, detail_provider: SongDetailProvider):
        self.store = store
        self.detail_provider = detail_provider

    async def list_songs(self, filters: SongFilters, page: int, page_size: int) -> List[Song]:
        """Получение песен по фильтру"""
        return await self.store.list(filters, page, page_size)

    async def get_song(self, song_id: int) -> Song:
        """Получение песни по ID"""
        return await self.store.get_by_id(song_id)

    async def get_verses(self, song_id: int, page: int, page_size: int) -> List[str]:
        """Получение куплетов песни постранично"""
        logger.info(f"Получение текста песни ID: {song_id}, страница: {page}, размер страницы: {page_size}")
        song = await self.store.get_by_id(song_id)

        verses = paginate_verses(song.verses(), page, page_size)
        logger.debug(f"Получено {len(verses)} куплетов песни ID: {song_id}")
        return verses

    async def update_song(self, song_id: int, song: Song) -> Song:
        """Обновление песни по ID"""
        return await self.store.update(song_id, song)

    async def delete_song(self, song_id: int) -> None:
        """Удаление песни по ID"""
        await self.store.delete(song_id)

    async def create_song(self, group: str, title: str) -> Song:
        """Создание песни с деталями из внешнего сервиса"""
        logger.info(f"Создание песни группы: {group}, название: {title}")
        detail = await self.detail_provider.fetch(group, title)

        song = Song(
            group=group,
            title=title,
            release_date=parse_release_date(detail.release_date),
            text=detail.text,
            link=detail.link
        )

        created = await self.store.create(song)
        logger.info(f"Песня успешно создана: {created!r}")
        return created
