"""
Источники и приёмники текста.

Ядро (parser/formatter) не знает, откуда пришёл DDL и куда уходит
результат. Любая ошибка ввода/вывода превращается в InputReadError /
OutputWriteError и обрабатывается оболочкой.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, TextIO

from ddl_transformer.core.exceptions import InputReadError, OutputWriteError

logger = logging.getLogger(__name__)


class TextSource(ABC):
    NAME: str = ""

    @abstractmethod
    def read(self) -> str:
        raise NotImplementedError


class TextSink(ABC):
    NAME: str = ""

    @abstractmethod
    def write(self, text: str) -> None:
        raise NotImplementedError


# -------------------------
# stdin / stdout
# -------------------------

class StdinSource(TextSource):
    NAME = "stdin"

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def read(self) -> str:
        stream = self.stream or sys.stdin
        try:
            return stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f"cannot read standard input: {e}", self.NAME) from e


class StdoutSink(TextSink):
    NAME = "stdout"

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def write(self, text: str) -> None:
        stream = self.stream or sys.stdout
        try:
            stream.write(text + "\n")
            stream.flush()
        except OSError as e:
            raise OutputWriteError(f"cannot write standard output: {e}", self.NAME) from e


# -------------------------
# files
# -------------------------

class FileSource(TextSource):
    NAME = "file"

    def __init__(self, path, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def read(self) -> str:
        try:
            with open(self.path, encoding=self.encoding) as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f"cannot read file {self.path}: {e}", str(self.path)) from e


class FileSink(TextSink):
    NAME = "file"

    def __init__(self, path, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def write(self, text: str) -> None:
        try:
            with open(self.path, "w", encoding=self.encoding) as f:
                f.write(text)
        except OSError as e:
            raise OutputWriteError(f"cannot write file {self.path}: {e}", str(self.path)) from e
        logger.debug("Wrote %d characters to %s", len(text), self.path)


# -------------------------
# clipboard (tkinter)
# -------------------------

def _clipboard_root():
    """Скрытое окно Tk: доступ к системному буферу обмена."""
    import tkinter as tk

    root = tk.Tk()
    root.withdraw()
    return root


class ClipboardSource(TextSource):
    NAME = "clipboard"

    def read(self) -> str:
        try:
            root = _clipboard_root()
        except Exception as e:  # ImportError / TclError (нет дисплея)
            raise InputReadError(
                "cannot read clipboard: clipboard access is unavailable", self.NAME
            ) from e
        try:
            return root.clipboard_get()
        except Exception as e:  # TclError: буфер пуст или не текст
            raise InputReadError(f"cannot read clipboard: {e}", self.NAME) from e
        finally:
            root.destroy()


class ClipboardSink(TextSink):
    NAME = "clipboard"

    def write(self, text: str) -> None:
        try:
            root = _clipboard_root()
        except Exception as e:
            raise OutputWriteError(
                "cannot write clipboard: clipboard access is unavailable", self.NAME
            ) from e
        try:
            root.clipboard_clear()
            root.clipboard_append(text)
            root.update()
        except Exception as e:
            raise OutputWriteError(f"cannot write clipboard: {e}", self.NAME) from e
        finally:
            root.destroy()
