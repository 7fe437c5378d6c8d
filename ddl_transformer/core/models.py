from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class ColumnSpec:
    """Одна колонка: имя, тип (в верхнем регистре) и комментарий."""
    name: str
    type: str
    comment: str = ""

    def as_row(self) -> Tuple[str, str, str]:
        return self.name, self.type, self.comment


@dataclass(frozen=True)
class TableDescriptor:
    """
    Результат разбора одного CREATE TABLE.

    - table_name: имя таблицы в том регистре, в каком оно написано
    - columns: колонки в порядке объявления (не пусто)
    - schema: квалификатор из `db.table`, если был
    """
    table_name: str
    columns: Tuple[ColumnSpec, ...] = field(default_factory=tuple)
    schema: Optional[str] = None

    def __post_init__(self):
        # ГАРАНТИЯ: columns ВСЕГДА tuple (неизменяемый)
        if not isinstance(self.columns, tuple):
            object.__setattr__(self, "columns", tuple(self.columns))

        if not self.table_name:
            raise ValueError("table_name must be non-empty")
        if not self.columns:
            raise ValueError(f"table {self.table_name} must have at least one column")

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def qualified_name(self) -> str:
        if self.schema:
            return f"{self.schema}.{self.table_name}"
        return self.table_name

    def column_names(self) -> Tuple[str, ...]:
        return tuple(c.name for c in self.columns)
