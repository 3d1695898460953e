from sqlalchemy import Column, DateTime, Index, Integer, Text
from sqlalchemy.sql import func

from app.core.db import Base


class SongModel(Base):
    __tablename__ = "songs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # "group" - зарезервированное слово SQL, колонка всегда экранируется
    group = Column("group", Text, nullable=False, quote=True)
    song = Column(Text, nullable=False)
    text = Column(Text, nullable=False)
    link = Column(Text, nullable=False)
    release_date = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("idx_songs_group", "group"),
        Index("idx_songs_song", "song"),
        Index("idx_songs_release_date", "release_date"),
    )
