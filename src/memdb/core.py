# src/memdb/core.py

from .constants import EMPTY_TABLE_MESSAGE
from .decorators import log_time
from .logging_setup import get_logger
from .models import Insert, Record, Select, Statement
from .render import render_table
from .store import RowStore

logger = get_logger(__name__)


def insert(store: RowStore, record: Record) -> None:
    # без проверок уникальности id: дубликаты допустимы
    store.append(record)
    logger.debug("inserted id=%s, rows=%d", record.id, len(store))


def select(store: RowStore) -> None:
    if store.is_empty():
        print(EMPTY_TABLE_MESSAGE)
        return
    rows = store.rows()
    logger.debug("select: %d rows", len(rows))
    print(render_table(rows))


@log_time
def execute_statement(statement: Statement, store: RowStore) -> None:
    match statement:
        case Insert(record=record):
            insert(store, record)
        case Select():
            select(store)
        case _:
            raise TypeError(f"Unknown statement: {statement!r}")
