# src/memdb/logging_setup.py

"""
Настройка логирования.

Логи пишутся в stderr, чтобы не смешиваться с таблицами и сообщениями REPL
в stdout. Формат человекочитаемый либо JSON (MEMDB_JSON_LOGS=true).
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any

# атрибуты, которые есть у любой LogRecord; всё остальное пришло через extra=
_STANDARD_ATTRS = set(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


def _json_formatter(record: logging.LogRecord) -> str:
    payload: dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    for key, value in record.__dict__.items():
        if key not in _STANDARD_ATTRS:
            payload[key] = value
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    return json.dumps(payload, ensure_ascii=False, default=str)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    formatter_name = "json" if json_logs else "console"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {"()": JsonFormatter},
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": formatter_name,
                    "level": level.upper(),
                }
            },
            "root": {
                "handlers": ["stderr"],
                "level": level.upper(),
            },
        }
    )


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name)
