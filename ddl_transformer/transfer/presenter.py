from __future__ import annotations

import sys
from enum import Enum
from typing import Optional, TextIO, Tuple


class StatusKind(Enum):
    SUCCESS = "success"
    ERROR = "error"


_STATUS_PREFIX = {
    StatusKind.SUCCESS: "✅",
    StatusKind.ERROR: "❌",
}


class ConsolePresenter:
    """
    Статус и предпросмотр в текстовый поток (по умолчанию stderr).
    Последнее состояние хранится в status/preview.
    """

    def __init__(self, stream: Optional[TextIO] = None, show_preview: bool = True):
        self.stream = stream
        self.preview_enabled = show_preview
        self.status: Optional[Tuple[str, StatusKind]] = None
        self.preview: Optional[str] = None

    def _out(self) -> TextIO:
        return self.stream or sys.stderr

    def show_status(self, message: str, kind: StatusKind) -> None:
        self.status = (message, kind)
        print(f"{_STATUS_PREFIX[kind]} {message}", file=self._out())

    def hide_status(self) -> None:
        self.status = None

    def show_preview(self, content: str) -> None:
        if not self.preview_enabled:
            return
        self.preview = content
        out = self._out()
        print("-" * 40, file=out)
        print(content, file=out)
        print("-" * 40, file=out)

    def hide_preview(self) -> None:
        self.preview = None
