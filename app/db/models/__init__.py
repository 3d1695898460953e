from app.db.models.song import SongModel

__all__ = [
    "SongModel",
]
