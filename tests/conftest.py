"""
Pytest configuration for memdb.

Provides fixtures for:
- a fresh Row Store and Session per test
- writing script files into a temporary directory
- resetting cached settings between tests
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from memdb.config import get_settings
from memdb.engine import Session
from memdb.store import RowStore


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store() -> RowStore:
    return RowStore()


@pytest.fixture
def session(store: RowStore) -> Session:
    return Session(store=store)


@pytest.fixture
def write_script(tmp_path: Path) -> Callable[..., Path]:
    """
    Factory: write_script("insert 1,a,b", "select") -> path to the script file.
    """

    def _write(*lines: str, name: str = "script.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def feed() -> Callable[..., Callable[[str], str]]:
    """
    Factory: feed("select", ".exit") -> read_line replacement for Session.run
    that echoes the prompt, returns the lines in order and then raises EOFError.
    """

    def _feed(*lines: str) -> Callable[[str], str]:
        pending = list(lines)

        def _read_line(prompt: str) -> str:
            print(prompt, end="")
            if not pending:
                raise EOFError
            return pending.pop(0)

        return _read_line

    return _feed
