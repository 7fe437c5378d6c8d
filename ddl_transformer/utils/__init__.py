"""
Пакет utils: вспомогательные функции без побочных эффектов.

Состав пакета:
- naming: синтаксис идентификаторов, очистка полей вывода
"""

from .naming import (
    is_plain_identifier,
    sanitize_field,
)

__all__ = [
    "is_plain_identifier",
    "sanitize_field",
]
