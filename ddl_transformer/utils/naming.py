"""
utils/naming.py

Утилиты для имён и полей табличного вывода.

Принцип:
- имя выводится в том регистре, в каком записано в DDL;
- допустимое имя: буквы, цифры, подчёркивание.
"""

from __future__ import annotations

import re


_PLAIN_IDENTIFIER_RE = re.compile(r"\w+")
_FIELD_BREAK_RE = re.compile(r"[\t\r\n]+")


def is_plain_identifier(name: str) -> bool:
    """Имя из букв, цифр и подчёркиваний (без пробелов и знаков)."""
    return bool(name) and bool(_PLAIN_IDENTIFIER_RE.fullmatch(name))


def sanitize_field(value: str) -> str:
    """Табы и переводы строк внутри поля -> один пробел (строка TSV не рвётся)."""
    if not value:
        return ""
    return _FIELD_BREAK_RE.sub(" ", value)
