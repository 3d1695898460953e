from app.domains.songs.entities import Song, SongFilters, SongDetail
from app.domains.songs.exceptions import (
    SongCatalogError, SongNotFoundError, PageOutOfBoundsError,
    DetailFetchError, DateParseError, StoreError,
    InvalidIdError, InvalidDateError
)
from app.domains.songs.schemas import (
    AddSongRequest, UpdateSongRequest, SongResponse, SongDetailPayload
)
from app.domains.songs.services import SongService

__all__ = [
    "Song", "SongFilters", "SongDetail",
    "SongCatalogError", "SongNotFoundError", "PageOutOfBoundsError",
    "DetailFetchError", "DateParseError", "StoreError",
    "InvalidIdError", "InvalidDateError",
    "AddSongRequest", "UpdateSongRequest", "SongResponse", "SongDetailPayload",
    "SongService"
]
