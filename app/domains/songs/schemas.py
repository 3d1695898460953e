from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime

from app.domains.songs.entities import Song


class AddSongRequest(BaseModel):
    """Схема для создания песни"""
    group: str = Field(..., min_length=1)
    song: str = Field(..., min_length=1)

    @field_validator('group', 'song')
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError('Value cannot be empty')
        return v


class UpdateSongRequest(BaseModel):
    """Схема для обновления песни; release_date в формате ДД.ММ.ГГГГ"""
    group: str = Field(..., min_length=1)
    song: str = Field(..., min_length=1)
    release_date: str = ""
    text: str = ""
    link: str = ""


class SongResponse(BaseModel):
    """Схема для ответа с данными песни"""
    id: int
    group: str
    song: str
    release_date: datetime
    text: str
    link: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, song: Song) -> "SongResponse":
        return cls(
            id=song.id,
            group=song.group,
            song=song.title,
            release_date=song.release_date,
            text=song.text,
            link=song.link,
            created_at=song.created_at,
            updated_at=song.updated_at
        )


class SongDetailPayload(BaseModel):
    """Ответ внешнего сервиса /info; лишние поля игнорируются"""
    release_date: str = Field(..., alias="releaseDate")
    text: str
    link: str

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
