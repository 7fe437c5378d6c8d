"""
table_formatter.py

TableDescriptor -> текст для вставки в электронную таблицу.

Формат:
    <table_name>
    <name><TAB><type><TAB><comment>
    ...

Строки через перевод строки (LF), без завершающего.
Пустой комментарий остаётся пустым полем (два таба в строке всегда).
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from ddl_transformer.core.constants import (
    DEFAULT_CONFIG,
    FIELD_SEPARATOR,
    HEADER_ROW,
    LINE_SEPARATOR,
)
from ddl_transformer.core.models import TableDescriptor
from ddl_transformer.utils.naming import sanitize_field


class TableFormatter:
    """
    Чистый и детерминированный форматтер.

    Конфигурация:
    - sanitize_fields: заменять табы/переводы строк внутри полей пробелом
    - include_header: строка name/type/comment после имени таблицы
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = dict(config or {})
        for k, v in DEFAULT_CONFIG.items():
            self.config.setdefault(k, v)

        self.sanitize_fields = bool(self.config["sanitize_fields"])
        self.include_header = bool(self.config["include_header"])

    def format(self, descriptor: TableDescriptor) -> str:
        lines: List[str] = [self._field(descriptor.table_name)]

        if self.include_header:
            lines.append(self._row(HEADER_ROW))

        for column in descriptor.columns:
            lines.append(self._row(column.as_row()))

        return LINE_SEPARATOR.join(lines)

    def _row(self, fields: Iterable[str]) -> str:
        return FIELD_SEPARATOR.join(self._field(f) for f in fields)

    def _field(self, value: str) -> str:
        if self.sanitize_fields:
            return sanitize_field(value)
        return value or ""


def format_table(descriptor: TableDescriptor, config: Optional[Dict[str, Any]] = None) -> str:
    return TableFormatter(config).format(descriptor)
