import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Настройка корневого логгера: один обработчик в stdout.

    Повторный вызов (тесты, перезапуск приложения) ничего не меняет.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)

    # SQL-эхо SQLAlchemy управляется через DB_ECHO, а не через общий уровень
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
