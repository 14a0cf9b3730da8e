# src/memdb/models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    id: int
    username: str
    email: str

    def is_empty(self) -> bool:
        # Пустой только если пусто ВСЁ сразу; id=0 с именем считается валидным
        return self.id == 0 and self.username == "" and self.email == ""


@dataclass(frozen=True)
class Insert:
    record: Record


@dataclass(frozen=True)
class Select:
    pass


Statement = Insert | Select
