from app.db.repositories.song_repository import SongRepository

__all__ = [
    "SongRepository",
]
