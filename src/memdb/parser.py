# src/memdb/parser.py

from . import constants
from .errors import DbError, ErrorKind
from .models import Insert, Record, Select, Statement


def split_command(line: str) -> tuple[str, list[str]]:
    """
    Делит строку на имя команды и аргументы.
    'insert 1, bob ,b@x' -> ('insert', ['1', 'bob', 'b@x'])
    'select'             -> ('select', [])
    """
    name, _, rest = line.strip().partition(" ")
    if not rest:
        return name, []
    return name, [arg.strip() for arg in rest.split(",")]


def parse_id(raw: str) -> int:
    # только ASCII-цифры: без знака, пробелов и подчёркиваний
    if not (raw.isascii() and raw.isdigit()):
        raise DbError(
            ErrorKind.STATEMENT_ARGUMENT_ERROR,
            f"id must be a non-negative integer, got '{raw}'",
        )
    value = int(raw)
    if value > constants.MAX_ID:
        raise DbError(
            ErrorKind.STATEMENT_ARGUMENT_ERROR,
            f"id {raw} does not fit in 32 bits",
        )
    return value


def parse_insert(args: list[str]) -> Insert:
    match args:
        case [raw_id, username, email]:
            record = Record(parse_id(raw_id), username, email)
        case _:
            raise DbError(
                ErrorKind.STATEMENT_ARGUMENT_ERROR,
                f"insert expects {constants.INSERT_FIELD_COUNT} fields, "
                f"got {len(args)}",
            )

    if record.is_empty():
        raise DbError(ErrorKind.STATEMENT_ARGUMENT_ERROR, "record is empty")
    return Insert(record)


def parse_statement(line: str) -> Statement:
    keyword, args = split_command(line)

    match keyword:
        case constants.INSERT_KEYWORD:
            return parse_insert(args)
        case constants.SELECT_KEYWORD:
            # аргументы select допускаются, но не используются
            return Select()
        case _:
            raise DbError(
                ErrorKind.UNRECOGNIZED_STATEMENT,
                f"unrecognized keyword at start of '{line.strip()}'",
            )
