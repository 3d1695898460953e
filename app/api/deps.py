from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.clients.song_detail import SongDetailClient
from app.core.db import get_db
from app.db.repositories.song_repository import SongRepository
from app.domains.songs.services import SongService


def get_detail_client(request: Request) -> SongDetailClient:
    """Общий клиент внешнего API, создается при старте приложения"""
    return request.app.state.detail_client


async def get_song_service(
    db: AsyncSession = Depends(get_db),
    detail_client: SongDetailClient = Depends(get_detail_client)
) -> SongService:
    return SongService(SongRepository(db), detail_client)
