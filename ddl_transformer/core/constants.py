"""
Константы ddl_transformer.
"""

VERSION = "1.0.0"
TOOL_NAME = "DDL Transformer"

# Табличные (не колоночные) конструкции внутри блока колонок.
# Сравнение по токенам, без учёта регистра: кандидат отбрасывается,
# если его первые слова совпадают с одним из префиксов.
STRUCTURAL_CLAUSE_PREFIXES = (
    ("PRIMARY", "KEY"),
    ("KEY",),
    ("INDEX",),
    ("UNIQUE",),
    ("CONSTRAINT",),
    ("FOREIGN", "KEY"),
    ("PARTITIONED", "BY"),
    # MySQL / общий SQL
    ("FULLTEXT",),
    ("SPATIAL",),
    ("CHECK",),
)

# Имена, которые никогда не становятся именем колонки
RESERVED_COLUMN_NAMES = frozenset({
    "PRIMARY",
    "KEY",
    "INDEX",
    "UNIQUE",
    "CONSTRAINT",
    "PARTITIONED",
})

# CREATE [modifier] TABLE
TABLE_MODIFIERS = frozenset({
    "TEMPORARY",
    "TEMP",
    "EXTERNAL",
    "GLOBAL",
    "LOCAL",
    "UNLOGGED",
})

COMMENT_KEYWORD = "COMMENT"

# Формат вывода
FIELD_SEPARATOR = "\t"
LINE_SEPARATOR = "\n"
HEADER_ROW = ("name", "type", "comment")

DEFAULT_CONFIG = {
    "extra_structural_keywords": (),
    "sanitize_fields": True,
    "include_header": False,
    "preview": True,
}
