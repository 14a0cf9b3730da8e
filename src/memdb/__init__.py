"""
memdb - учебная база данных в памяти с интерактивной консолью.

Поддерживает директивы .exit и .script <path> и операторы
insert <id>,<username>,<email> и select.
"""

from .engine import LineKind, Session, classify_line
from .errors import DbError, ErrorKind
from .models import Insert, Record, Select, Statement
from .parser import parse_statement, split_command
from .render import column_widths, render_table
from .store import RowStore

__all__ = [
    "DbError",
    "ErrorKind",
    "Insert",
    "LineKind",
    "Record",
    "RowStore",
    "Select",
    "Session",
    "Statement",
    "classify_line",
    "column_widths",
    "parse_statement",
    "render_table",
    "split_command",
]

__version__ = "0.1.0"
