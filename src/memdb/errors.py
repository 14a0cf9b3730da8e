# src/memdb/errors.py

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    UNRECOGNIZED_DIRECTIVE = "UnrecognizedDirective"
    DIRECTIVE_ARGUMENT_ERROR = "DirectiveArgumentError"
    UNRECOGNIZED_STATEMENT = "UnrecognizedStatement"
    STATEMENT_ARGUMENT_ERROR = "StatementArgumentError"
    SCRIPT_IO_ERROR = "ScriptIOError"


class DbError(Exception):
    """
    Ошибка обработки строки ввода.
    - kind: вид ошибки (по нему ветвятся вызывающие, а не по тексту)
    - detail: пояснение для пользователя
    - line: строка скрипта, на которой упало выполнение (если есть)
    """

    def __init__(self, kind: ErrorKind, detail: str = "", line: str | None = None):
        super().__init__(kind, detail, line)
        self.kind = kind
        self.detail = detail
        self.line = line

    def annotate(self, line: str) -> DbError:
        # Для вложенных скриптов сохраняем самую внутреннюю строку
        if self.line is not None:
            return self
        return DbError(self.kind, self.detail, line=line)

    def __str__(self) -> str:
        text = self.kind.value
        if self.detail:
            text = f"{text}: {self.detail}"
        if self.line is not None:
            text = f"{text} (line: {self.line})"
        return text
