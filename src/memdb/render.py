# src/memdb/render.py

from collections.abc import Sequence

from prettytable import PrettyTable, TableStyle
from wcwidth import wcswidth

from .constants import EMAIL_LABEL, FIELD_NAMES, ID_LABEL, MIN_WIDTHS, USERNAME_LABEL
from .models import Record

HORIZONTAL = "─"


def display_width(text: str) -> int:
    # ширина в колонках терминала, как её считает prettytable
    text = text.expandtabs()
    width = wcswidth(text)
    return len(text) if width < 0 else width


def column_widths(records: Sequence[Record]) -> tuple[int, int, int]:
    """Ширина колонки = max(длина заголовка, самое длинное значение)."""
    id_w = MIN_WIDTHS[ID_LABEL]
    username_w = MIN_WIDTHS[USERNAME_LABEL]
    email_w = MIN_WIDTHS[EMAIL_LABEL]
    for record in records:
        id_w = max(id_w, len(str(record.id)))
        username_w = max(username_w, display_width(record.username))
        email_w = max(email_w, display_width(record.email))
    return id_w, username_w, email_w


def _header_border(id_w: int, username_w: int, email_w: int) -> str:
    # заголовок id выровнен вправо, остальные влево
    id_part = HORIZONTAL * (id_w - len(ID_LABEL)) + f" {ID_LABEL} "
    username_part = f" {USERNAME_LABEL} " + HORIZONTAL * (username_w - len(USERNAME_LABEL))
    email_part = f" {EMAIL_LABEL} " + HORIZONTAL * (email_w - len(EMAIL_LABEL))
    return f"┌{id_part}┬{username_part}┬{email_part}┐"


def render_table(records: Sequence[Record]) -> str:
    """
    Рисует таблицу рамкой из псевдографики:

    ┌ id ┬ username ┬ email ─┐
    │  1 │ alice    │ a@x.io │
    └────┴──────────┴────────┘
    """
    if not records:
        raise ValueError("render_table() needs at least one record")

    widths = column_widths(records)

    t = PrettyTable(list(FIELD_NAMES))
    t.set_style(TableStyle.SINGLE_BORDER)
    t.align = {ID_LABEL: "r", USERNAME_LABEL: "l", EMAIL_LABEL: "l"}
    t.min_width = dict(zip(FIELD_NAMES, widths))
    for r in records:
        t.add_row([r.id, r.username, r.email])

    # prettytable без заголовка рисует верхнюю рамку пустой; подменяем её своей
    lines = t.get_string(header=False).split("\n")
    lines[0] = _header_border(*widths)
    return "\n".join(lines)
