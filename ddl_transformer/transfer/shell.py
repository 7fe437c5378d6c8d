"""
Оболочка преобразования.

transform():   источник -> DDLParser -> TableFormatter -> приёмник -> статус
copy_result(): повторная запись последнего успешного результата

Ошибки не пробрасываются наружу: всё перехватывается здесь и
показывается пользователю. Последний успешный результат сохраняется
до следующего успешного преобразования.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ddl_transformer.core.constants import DEFAULT_CONFIG
from ddl_transformer.core.exceptions import EmptyInputError, NoResultError, handle_exception
from ddl_transformer.core.models import TableDescriptor
from ddl_transformer.formatter import TableFormatter
from ddl_transformer.parser import DDLParser

from .io import TextSink, TextSource
from .presenter import ConsolePresenter, StatusKind

logger = logging.getLogger(__name__)


class TransferShell:
    def __init__(
        self,
        source: TextSource,
        sink: TextSink,
        presenter: Optional[ConsolePresenter] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        self.config = dict(config or {})
        for k, v in DEFAULT_CONFIG.items():
            self.config.setdefault(k, v)

        self.source = source
        self.sink = sink
        self.presenter = presenter or ConsolePresenter(show_preview=bool(self.config["preview"]))

        self.parser = DDLParser(self.config)
        self.formatter = TableFormatter(self.config)

        self.result: str = ""
        self.descriptor: Optional[TableDescriptor] = None
        self.last_error: Optional[Dict[str, Any]] = None

    # ==========================================================
    # PUBLIC API
    # ==========================================================

    def transform(self) -> bool:
        self.presenter.hide_status()
        self.presenter.hide_preview()

        try:
            ddl = self.source.read()
            if not ddl or not ddl.strip():
                raise EmptyInputError(f"{self.source.NAME or 'input'} is empty, copy a DDL statement first")

            descriptor = self.parser.parse(ddl)
            output = self.formatter.format(descriptor)
            self.sink.write(output)
        except Exception as e:
            self._report_error(e)
            return False

        self.result = output
        self.descriptor = descriptor
        self.last_error = None

        logger.info(
            "Transformed table %s (%d columns) -> %s",
            descriptor.table_name, descriptor.column_count, self.sink.NAME,
        )
        self.presenter.show_status(
            f"Converted and written to {self.sink.NAME} "
            f"(table: {descriptor.table_name}, {descriptor.column_count} columns)",
            StatusKind.SUCCESS,
        )
        self.presenter.show_preview(output)
        return True

    def copy_result(self) -> bool:
        try:
            if not self.result:
                raise NoResultError()
            self.sink.write(self.result)
        except Exception as e:
            self._report_error(e)
            return False

        self.presenter.show_status(f"Copied to {self.sink.NAME}", StatusKind.SUCCESS)
        return True

    # ==========================================================
    # HELPERS
    # ==========================================================

    def _report_error(self, exc: Exception) -> None:
        self.last_error = handle_exception(exc)
        logger.info("Transfer failed: %s", self.last_error["code"])
        self.presenter.show_status(self.last_error["error"], StatusKind.ERROR)
