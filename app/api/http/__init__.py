from app.api.http.health import router as health_router
from app.api.http.songs import router as songs_router

__all__ = [
    "health_router",
    "songs_router"
]
