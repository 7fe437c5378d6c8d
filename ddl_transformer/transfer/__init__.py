"""
Пакет transfer: оболочка вокруг parser/formatter.

- io: источники и приёмники текста (stdin/stdout, файл, буфер обмена)
- presenter: статус (успех/ошибка) и предпросмотр результата
- shell: TransferShell — чтение -> разбор -> форматирование -> запись
"""

from .io import (
    TextSource,
    TextSink,
    StdinSource,
    StdoutSink,
    FileSource,
    FileSink,
    ClipboardSource,
    ClipboardSink,
)
from .presenter import ConsolePresenter, StatusKind
from .shell import TransferShell

__all__ = [
    "TextSource",
    "TextSink",
    "StdinSource",
    "StdoutSink",
    "FileSource",
    "FileSink",
    "ClipboardSource",
    "ClipboardSink",
    "ConsolePresenter",
    "StatusKind",
    "TransferShell",
]
