"""
Пользовательские исключения ddl_transformer.

Парсер поднимает первую подходящую ошибку и не возвращает частичный
результат. Оболочка (transfer) перехватывает всё на своей границе.
"""

from __future__ import annotations
from typing import Optional, Dict, Any


class DDLTransformerError(Exception):
    """Базовое исключение ddl_transformer."""

    def __init__(self, message: str, code: str = "UNKNOWN", details: Optional[dict] = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        return {
            "error": self.message,
            "code": self.code,
            "details": self.details,
        }


class ParsingError(DDLTransformerError):
    """Ошибка разбора DDL."""

    def __init__(self, message: str, sql_fragment: str = None, position: int = None):
        details: Dict[str, Any] = {}
        if sql_fragment:
            details["sql_fragment"] = sql_fragment
        if position is not None:
            details["position"] = position
        super().__init__(message, "PARSING_ERROR", details)


class EmptyInputError(ParsingError):
    """Входной текст отсутствует или пуст после trim."""

    def __init__(self, message: str = "input is empty"):
        super().__init__(message)
        self.code = "EMPTY_INPUT"


class TableNameNotFoundError(ParsingError):
    """Не найден заголовок CREATE TABLE <name> (."""

    def __init__(self, message: str = "table name not found"):
        super().__init__(message)
        self.code = "TABLE_NAME_NOT_FOUND"


class ColumnBlockNotFoundError(ParsingError):
    """Нет открывающей скобки или скобки не сбалансированы."""

    def __init__(self, message: str = "column block not found", position: int = None, depth: int = None):
        super().__init__(message, sql_fragment=None, position=position)
        self.code = "COLUMN_BLOCK_NOT_FOUND"
        if depth is not None:
            self.details["unclosed_depth"] = depth


class NoColumnsParsedError(ParsingError):
    """Блок колонок найден, но ни одной колонки не извлечено."""

    def __init__(self, message: str = "no columns parsed", table_name: str = None, candidates: int = None):
        super().__init__(message)
        self.code = "NO_COLUMNS_PARSED"
        if table_name:
            self.details["table_name"] = table_name
        if candidates is not None:
            self.details["candidates"] = candidates


class TransferError(DDLTransformerError):
    """Ошибка ввода/вывода оболочки (буфер обмена, файл, поток)."""

    def __init__(self, message: str, target: str = None, operation: str = None):
        details: Dict[str, Any] = {}
        if target:
            details["target"] = target
        if operation:
            details["operation"] = operation
        super().__init__(message, "TRANSFER_ERROR", details)


class InputReadError(TransferError):
    """Не удалось прочитать входной текст."""

    def __init__(self, message: str, target: str = None):
        super().__init__(message, target, "read")
        self.code = "INPUT_READ_ERROR"


class OutputWriteError(TransferError):
    """Не удалось записать результат."""

    def __init__(self, message: str, target: str = None):
        super().__init__(message, target, "write")
        self.code = "OUTPUT_WRITE_ERROR"


class NoResultError(TransferError):
    """Нечего копировать: успешного преобразования ещё не было."""

    def __init__(self, message: str = "no result to copy"):
        super().__init__(message, None, "copy")
        self.code = "NO_RESULT"


class ConfigurationError(DDLTransformerError):
    """Ошибка конфигурации."""

    def __init__(self, message: str, config_key: str = None, config_value: str = None):
        details: Dict[str, Any] = {}
        if config_key:
            details["config_key"] = config_key
        if config_value:
            details["config_value"] = config_value
        super().__init__(message, "CONFIGURATION_ERROR", details)


def handle_exception(exception: Exception) -> dict:
    if isinstance(exception, DDLTransformerError):
        return exception.to_dict()
    return {
        "error": str(exception),
        "code": "UNKNOWN_ERROR",
        "details": {
            "exception_type": exception.__class__.__name__,
        },
    }
