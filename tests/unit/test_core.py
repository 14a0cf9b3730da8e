from __future__ import annotations

import logging

import pytest

from memdb.core import execute_statement
from memdb.models import Insert, Record, Select
from memdb.store import RowStore


def test_insert_appends_silently(store: RowStore, capsys: pytest.CaptureFixture[str]) -> None:
    execute_statement(Insert(Record(1, "alice", "a@x.io")), store)

    assert store.rows() == [Record(1, "alice", "a@x.io")]
    assert capsys.readouterr().out == ""


def test_insert_accepts_duplicate_ids(store: RowStore) -> None:
    execute_statement(Insert(Record(1, "alice", "a@x.io")), store)
    execute_statement(Insert(Record(1, "alice", "a@x.io")), store)
    assert len(store) == 2


def test_select_on_empty_store(store: RowStore, capsys: pytest.CaptureFixture[str]) -> None:
    execute_statement(Select(), store)
    assert capsys.readouterr().out == "Empty table\n"


def test_select_renders_in_insertion_order(
    store: RowStore, capsys: pytest.CaptureFixture[str]
) -> None:
    for record in (Record(3, "c", "c@x"), Record(1, "a", "a@x"), Record(2, "b", "b@x")):
        execute_statement(Insert(record), store)

    execute_statement(Select(), store)
    lines = capsys.readouterr().out.splitlines()

    assert [line.split("│")[1].strip() for line in lines[1:-1]] == ["3", "1", "2"]
    assert len(store) == 3


def test_execute_logs_elapsed_time(store: RowStore, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="memdb")
    execute_statement(Select(), store)
    assert any("execute_statement took" in r.getMessage() for r in caplog.records)


def test_execute_rejects_unknown_statement(store: RowStore) -> None:
    with pytest.raises(TypeError):
        execute_statement("select", store)  # type: ignore[arg-type]
