"""
ddl_transformer — преобразование CREATE TABLE в табличный (TSV) листинг.

Первая строка результата — имя таблицы, далее по строке на колонку:
имя<TAB>тип<TAB>комментарий.
"""

from .core.constants import VERSION
from .core.models import ColumnSpec, TableDescriptor
from .parser import DDLParser, parse_ddl
from .formatter import TableFormatter, format_table


def transform(ddl: str) -> str:
    """DDL-текст -> TSV-текст (parse + format)."""
    return format_table(parse_ddl(ddl))


__version__ = VERSION

__all__ = [
    "ColumnSpec",
    "TableDescriptor",
    "DDLParser",
    "parse_ddl",
    "TableFormatter",
    "format_table",
    "transform",
]
