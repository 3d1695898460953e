import logging
from typing import List

from sqlalchemy import Delete, Insert, Select, Update, delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.song import SongModel
from app.domains.songs.entities import Song, SongFilters
from app.domains.songs.exceptions import SongNotFoundError, StoreError

logger = logging.getLogger(__name__)

songs_table = SongModel.__table__


def build_list_query(filters: SongFilters, page: int, page_size: int) -> Select:
    """SELECT с фильтрами, сортировкой по дате релиза и пагинацией"""
    query = select(SongModel)

    if filters.group:
        query = query.where(SongModel.group == filters.group)

    if filters.title:
        query = query.where(SongModel.song == filters.title)

    if filters.release_date is not None:
        query = query.where(SongModel.release_date == filters.release_date)

    return (
        query
        .order_by(SongModel.release_date.desc(), SongModel.id.asc())
        .limit(page_size)
        .offset((page - 1) * page_size)
    )


def build_insert_query(song: Song) -> Insert:
    return (
        insert(songs_table)
        .values(
            group=song.group,
            song=song.title,
            release_date=song.release_date,
            text=song.text,
            link=song.link,
            created_at=func.now(),
            updated_at=func.now()
        )
        .returning(songs_table.c.id, songs_table.c.created_at, songs_table.c.updated_at)
    )


def build_update_query(song_id: int, song: Song) -> Update:
    return (
        update(songs_table)
        .where(songs_table.c.id == song_id)
        .values(
            group=song.group,
            song=song.title,
            release_date=song.release_date,
            text=song.text,
            link=song.link,
            updated_at=func.now()
        )
        .returning(*songs_table.c)
    )


def build_delete_query(song_id: int) -> Delete:
    return delete(songs_table).where(songs_table.c.id == song_id)


class SongRepository:
    """Репозиторий для работы с песнями"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self, filters: SongFilters, page: int, page_size: int) -> List[Song]:
        """Получение песен по фильтру с пагинацией"""
        logger.info(f"Получение песен с фильтром: {filters}, страница: {page}, размер страницы: {page_size}")
        query = build_list_query(filters, page, page_size)

        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as e:
            raise StoreError(f"list songs failed: {e}") from e

        songs = [self._to_domain(row) for row in result.scalars().all()]
        logger.info(f"Получено {len(songs)} песен")
        return songs

    async def get_by_id(self, song_id: int) -> Song:
        """Получение песни по ID"""
        logger.info(f"Получение песни по ID: {song_id}")

        try:
            result = await self.session.execute(
                select(SongModel).where(SongModel.id == song_id)
            )
        except SQLAlchemyError as e:
            raise StoreError(f"get song {song_id} failed: {e}") from e

        db_song = result.scalar_one_or_none()
        if db_song is None:
            logger.warning(f"Песня с ID {song_id} не найдена")
            raise SongNotFoundError(song_id)
        return self._to_domain(db_song)

    async def create(self, song: Song) -> Song:
        """Создание песни; ID и метки времени назначает база"""
        logger.info(f"Создание новой песни: {song!r}")

        try:
            result = await self.session.execute(build_insert_query(song))
            row = result.one()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreError(f"create song failed: {e}") from e

        created = Song(
            id=row.id,
            group=song.group,
            title=song.title,
            release_date=song.release_date,
            text=song.text,
            link=song.link,
            created_at=row.created_at,
            updated_at=row.updated_at
        )
        logger.info(f"Песня создана: {created!r}")
        return created

    async def update(self, song_id: int, song: Song) -> Song:
        """Обновление песни по ID; created_at не меняется, updated_at = now()"""
        logger.info(f"Обновление песни по ID: {song_id}")

        try:
            result = await self.session.execute(build_update_query(song_id, song))
            row = result.one_or_none()
            if row is None:
                await self.session.rollback()
                logger.warning(f"Песня с ID {song_id} не найдена для обновления")
                raise SongNotFoundError(song_id)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreError(f"update song {song_id} failed: {e}") from e

        return self._to_domain(row)

    async def delete(self, song_id: int) -> None:
        """Удаление песни по ID"""
        logger.info(f"Удаление песни по ID: {song_id}")

        try:
            result = await self.session.execute(build_delete_query(song_id))
            if result.rowcount == 0:
                await self.session.rollback()
                logger.warning(f"Песня с ID {song_id} не найдена для удаления")
                raise SongNotFoundError(song_id)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreError(f"delete song {song_id} failed: {e}") from e

    def _to_domain(self, db_song) -> Song:
        """Преобразование строки БД в доменную сущность"""
        return Song(
            id=db_song.id,
            group=db_song.group,
            title=db_song.song,
            release_date=db_song.release_date,
            text=db_song.text,
            link=db_song.link,
            created_at=db_song.created_at,
            updated_at=db_song.updated_at
        )
