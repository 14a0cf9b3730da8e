import time
from typing import Callable

from .errors import DbError
from .logging_setup import get_logger

logger = get_logger(__name__)


def handle_db_errors(func: Callable) -> Callable:

    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DbError as e:
            # ошибка разбора не прерывает сессию: печатаем и идём дальше
            logger.debug("recovered %s in %s", e.kind.value, func.__name__)
            print(f"Error: {e}")
            return None
    return wrapper


def log_time(func: Callable) -> Callable:
    def wrapper(*args, **kwargs):
        t0 = time.monotonic()
        result = func(*args, **kwargs)
        dt = time.monotonic() - t0
        logger.debug("%s took %.6f s", func.__name__, dt)
        return result
    return wrapper
