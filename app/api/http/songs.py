import re
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.deps import get_song_service
from app.domains.songs.entities import Song, SongFilters, parse_release_date
from app.domains.songs.exceptions import DateParseError, InvalidDateError, InvalidIdError
from app.domains.songs.schemas import AddSongRequest, SongResponse, UpdateSongRequest
from app.domains.songs.services import SongService

router = APIRouter(prefix="/songs", tags=["songs"])

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_song_id(value: str) -> int:
    """ID из пути: десятичное целое"""
    if not _INT_RE.fullmatch(value):
        raise InvalidIdError(value)
    return int(value)


def parse_page_param(value: Optional[str], default: int) -> int:
    """Параметры пагинации: при ошибке разбора используется значение по умолчанию"""
    if value is None or not _INT_RE.fullmatch(value):
        return default
    number = int(value)
    return number if number >= 1 else default


def parse_date_param(value: str):
    try:
        return parse_release_date(value)
    except DateParseError as e:
        raise InvalidDateError(str(e)) from e


@router.get("", response_model=List[SongResponse])
async def get_songs(
    group: str = Query("", description="Фильтр по группе"),
    song: str = Query("", description="Фильтр по названию песни"),
    release_date: str = Query("", description="Фильтр по дате релиза (ДД.ММ.ГГГГ)"),
    page: Optional[str] = Query(None, description="Номер страницы, по умолчанию 1"),
    page_size: Optional[str] = Query(None, description="Размер страницы, по умолчанию 10"),
    service: SongService = Depends(get_song_service)
):
    """Получение списка песен с фильтрацией и пагинацией"""
    filters = SongFilters(
        group=group,
        title=song,
        release_date=parse_date_param(release_date) if release_date else None
    )

    songs = await service.list_songs(
        filters,
        parse_page_param(page, DEFAULT_PAGE),
        parse_page_param(page_size, DEFAULT_PAGE_SIZE)
    )
    return [SongResponse.from_entity(s) for s in songs]


@router.post("", response_model=SongResponse, status_code=status.HTTP_201_CREATED)
async def add_song(
    song_data: AddSongRequest,
    service: SongService = Depends(get_song_service)
):
    """Создание песни; дата, текст и ссылка запрашиваются у внешнего API"""
    created = await service.create_song(song_data.group, song_data.song)
    return SongResponse.from_entity(created)


@router.get("/{song_id}", response_model=SongResponse)
async def get_song(
    song_id: str,
    service: SongService = Depends(get_song_service)
):
    """Получение песни по ID"""
    song = await service.get_song(parse_song_id(song_id))
    return SongResponse.from_entity(song)


@router.get("/{song_id}/text", response_model=List[str])
async def get_song_text(
    song_id: str,
    page: Optional[str] = Query(None, description="Номер страницы, по умолчанию 1"),
    page_size: Optional[str] = Query(None, description="Куплетов на странице, по умолчанию 10"),
    service: SongService = Depends(get_song_service)
):
    """Получение текста песни по куплетам с пагинацией"""
    return await service.get_verses(
        parse_song_id(song_id),
        parse_page_param(page, DEFAULT_PAGE),
        parse_page_param(page_size, DEFAULT_PAGE_SIZE)
    )


@router.put("/{song_id}", response_model=SongResponse)
async def update_song(
    song_id: str,
    update_data: UpdateSongRequest,
    service: SongService = Depends(get_song_service)
):
    """Обновление песни по ID"""
    parsed_id = parse_song_id(song_id)

    song = Song(
        group=update_data.group,
        title=update_data.song,
        release_date=parse_date_param(update_data.release_date),
        text=update_data.text,
        link=update_data.link
    )

    updated = await service.update_song(parsed_id, song)
    return SongResponse.from_entity(updated)


@router.delete("/{song_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_song(
    song_id: str,
    service: SongService = Depends(get_song_service)
):
    """Удаление песни по ID"""
    await service.delete_song(parse_song_id(song_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
