# src/memdb/engine.py

import sys
from collections.abc import Callable
from enum import Enum, auto

from . import constants
from .core import execute_statement
from .decorators import handle_db_errors
from .errors import DbError, ErrorKind
from .logging_setup import get_logger
from .parser import parse_statement, split_command
from .store import RowStore

logger = get_logger(__name__)


class LineKind(Enum):
    DIRECTIVE = auto()
    STATEMENT = auto()


def classify_line(line: str) -> LineKind:
    # пустая строка считается оператором и упадёт при разборе
    if line.strip().startswith(constants.DIRECTIVE_MARKER):
        return LineKind.DIRECTIVE
    return LineKind.STATEMENT


def print_help() -> None:
    """Печатает справку по командам."""
    print("Directives:")
    print(f"  {constants.EXIT_DIRECTIVE} - exit the program")
    print(f"  {constants.SCRIPT_DIRECTIVE} <path> - run commands from a file")
    print("Statements:")
    print(f"  {constants.INSERT_KEYWORD} <id>,<username>,<email> - add a record")
    print(f"  {constants.SELECT_KEYWORD} - show all records\n")


class Session:
    """
    Одна сессия REPL. Владеет хранилищем строк и прогоняет каждую строку
    по цепочке: классификация -> директива | разбор -> выполнение.
    """

    def __init__(self, store: RowStore | None = None, prompt: str = constants.PROMPT):
        self.store = store if store is not None else RowStore()
        self.prompt = prompt

    def handle_line(self, line: str) -> None:
        """Ошибки директив пробрасываются наверх, ошибки операторов печатаются."""
        line = line.strip()
        match classify_line(line):
            case LineKind.DIRECTIVE:
                self.do_directive(line)
            case LineKind.STATEMENT:
                self.run_statement(line)

    @handle_db_errors
    def run_statement(self, line: str) -> None:
        statement = parse_statement(line)
        execute_statement(statement, self.store)

    def do_directive(self, line: str) -> None:
        name, args = split_command(line)

        match name:
            case constants.EXIT_DIRECTIVE:
                _expect_args(name, args, 0)
                print(constants.FAREWELL_MESSAGE)
                logger.info("session closed by %s", name)
                sys.exit(0)
            case constants.SCRIPT_DIRECTIVE:
                _expect_args(name, args, 1)
                self.run_script(args[0])
            case _:
                raise DbError(
                    ErrorKind.UNRECOGNIZED_DIRECTIVE,
                    f"unrecognized directive '{name}'",
                )

    def run_script(self, path: str) -> None:
        """
        Выполняет файл построчно тем же конвейером, что и ввод с консоли.
        - плохой оператор: печатается, выполнение продолжается
        - плохая директива: скрипт прерывается, ошибка уходит наверх со строкой
        """
        logger.info("running script %s", path)
        try:
            f = open(path, encoding=constants.SCRIPT_ENCODING)
        except OSError as e:
            raise DbError(
                ErrorKind.SCRIPT_IO_ERROR,
                f"cannot open script '{path}': {e.strerror or e}",
            ) from e

        count = 0
        with f:
            for line in _read_lines(f, path):
                count += 1
                try:
                    self.handle_line(line)
                except DbError as e:
                    logger.warning("script %s aborted at line %d", path, count)
                    if e.line is not None:
                        raise
                    raise e.annotate(line.strip()) from e
        logger.info("script %s finished, %d lines", path, count)

    def run(self, read_line: Callable[[str], str] = input) -> None:
        logger.info("session started")
        while True:
            try:
                line = read_line(self.prompt)
            except EOFError:
                # Ctrl+D: закрываем сессию, переводя строку после приглашения
                print()
                logger.info("session closed by end of input")
                return

            try:
                self.handle_line(line)
            except DbError as e:
                print(f"Error: {e}")


def _expect_args(name: str, args: list[str], count: int) -> None:
    if len(args) != count:
        raise DbError(
            ErrorKind.DIRECTIVE_ARGUMENT_ERROR,
            f"{name} expects {count} argument(s), got {len(args)}",
        )


def _read_lines(f, path: str):
    # ошибки чтения (в том числе неверная кодировка) -> ScriptIOError
    while True:
        try:
            line = f.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise DbError(
                ErrorKind.SCRIPT_IO_ERROR,
                f"cannot read script '{path}': {e}",
            ) from e
        if not line:
            return
        yield line.rstrip("\r\n")
