# src/memdb/constants.py

PROMPT = "db> "

DIRECTIVE_MARKER = "."
EXIT_DIRECTIVE = ".exit"
SCRIPT_DIRECTIVE = ".script"

INSERT_KEYWORD = "insert"
SELECT_KEYWORD = "select"

# insert <id>,<username>,<email>
INSERT_FIELD_COUNT = 3
MAX_ID = 2**32 - 1

# Порядок колонок важен: так они выводятся в таблице
ID_LABEL = "id"
USERNAME_LABEL = "username"
EMAIL_LABEL = "email"
FIELD_NAMES = (ID_LABEL, USERNAME_LABEL, EMAIL_LABEL)

# Минимальная ширина колонки = длина заголовка
MIN_WIDTHS = {name: len(name) for name in FIELD_NAMES}

FAREWELL_MESSAGE = "bye."
EMPTY_TABLE_MESSAGE = "Empty table"
SCRIPT_ENCODING = "utf-8"
