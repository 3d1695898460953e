import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from app.domains.songs.exceptions import DateParseError

# Формат даты релиза: ДД.ММ.ГГГГ
RELEASE_DATE_FORMAT = "%d.%m.%Y"
_RELEASE_DATE_RE = re.compile(r"[0-9]{2}\.[0-9]{2}\.[0-9]{4}")

# Куплеты разделены пустой строкой
VERSE_DELIMITER = "\n\n"


def parse_release_date(value: str) -> datetime:
    """Разбор даты ДД.ММ.ГГГГ в момент времени (полночь UTC)"""
    if not isinstance(value, str) or not _RELEASE_DATE_RE.fullmatch(value):
        raise DateParseError(value)
    try:
        parsed = datetime.strptime(value, RELEASE_DATE_FORMAT)
    except ValueError:
        raise DateParseError(value)
    return parsed.replace(tzinfo=timezone.utc)


def split_verses(text: str) -> List[str]:
    """Разбиение текста на куплеты; пустые элементы и порядок сохраняются"""
    return text.split(VERSE_DELIMITER)


class Song:
    """Сущность песни"""

    def __init__(
        self,
        group: str,
        title: str,
        release_date: datetime,
        text: str = "",
        link: str = "",
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.group = group
        self.title = title
        self.release_date = release_date
        self.text = text
        self.link = link
        self.created_at = created_at
        self.updated_at = updated_at

    def verses(self) -> List[str]:
        return split_verses(self.text)

    def __repr__(self) -> str:
        return f"Song(id={self.id}, group={self.group!r}, title={self.title!r})"


@dataclass
class SongFilters:
    """Фильтры списка песен; пустое значение означает отсутствие ограничения"""
    group: str = ""
    title: str = ""
    release_date: Optional[datetime] = None


@dataclass
class SongDetail:
    """Детали песни от внешнего сервиса; дата в формате ДД.ММ.ГГГГ"""
    release_date: str
    text: str
    link: str
