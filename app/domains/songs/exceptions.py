class SongCatalogError(Exception):
    """Базовая ошибка каталога песен"""


class SongNotFoundError(SongCatalogError):
    """Песня с указанным ID отсутствует в хранилище"""

    def __init__(self, song_id: int):
        super().__init__(f"song {song_id} not found")
        self.song_id = song_id


class PageOutOfBoundsError(SongCatalogError):
    """Запрошенная страница начинается за последним куплетом"""

    def __init__(self, page: int, page_size: int, total: int):
        super().__init__(f"page {page} (size {page_size}) is out of bounds for {total} verses")
        self.page = page
        self.page_size = page_size
        self.total = total


class DetailFetchError(SongCatalogError):
    """Внешний сервис не вернул детали песни"""


class DateParseError(SongCatalogError):
    """Дата не соответствует формату ДД.ММ.ГГГГ"""

    def __init__(self, value: str):
        super().__init__(f"invalid date {value!r}, expected DD.MM.YYYY")
        self.value = value


class StoreError(SongCatalogError):
    """Прочие ошибки базы данных"""


# Ошибки разбора входящего HTTP-запроса

class InvalidIdError(SongCatalogError):
    pass


class InvalidDateError(SongCatalogError):
    pass
