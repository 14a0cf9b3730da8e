# src/memdb/store.py

from __future__ import annotations

from collections.abc import Iterator

from .models import Record


class RowStore:
    """Хранилище записей в памяти: только добавление, порядок вставки сохраняется."""

    def __init__(self) -> None:
        self._rows: list[Record] = []

    def append(self, record: Record) -> None:
        self._rows.append(record)

    def rows(self) -> list[Record]:
        # копия, чтобы снаружи нельзя было переупорядочить хранилище
        return list(self._rows)

    def is_empty(self) -> bool:
        return not self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Record]:
        return iter(list(self._rows))
