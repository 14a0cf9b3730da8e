# src/memdb/config.py

"""
Настройки запуска, читаются из окружения и .env (префикс MEMDB_).
Неизменяемые значения протокола лежат в constants.py.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import PROMPT


class Settings(BaseSettings):
    prompt: str = Field(PROMPT, alias="MEMDB_PROMPT")
    log_level: str = Field("WARNING", alias="MEMDB_LOG_LEVEL")
    json_logs: bool = Field(False, alias="MEMDB_JSON_LOGS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
