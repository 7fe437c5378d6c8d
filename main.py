"""
main.py

Точка входа DDL Transformer: CREATE TABLE -> таблица (TSV).

Запуск:
    python main.py < schema.sql
    python main.py --in schema.sql --out columns.tsv
    python main.py --from-clipboard --to-clipboard
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ddl_transformer.core.config import load_config
from ddl_transformer.core.exceptions import ConfigurationError
from ddl_transformer.transfer import (
    ClipboardSink,
    ClipboardSource,
    ConsolePresenter,
    FileSink,
    FileSource,
    StdinSource,
    StdoutSink,
    TransferShell,
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="DDL Transformer: CREATE TABLE -> имя таблицы и колонки через TAB"
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--in",
        dest="input",
        help="SQL-файл с CREATE TABLE (по умолчанию: stdin)",
    )
    source.add_argument(
        "--from-clipboard",
        action="store_true",
        help="Читать DDL из буфера обмена",
    )

    sink = parser.add_mutually_exclusive_group()
    sink.add_argument(
        "--out",
        help="Файл для результата (по умолчанию: stdout)",
    )
    sink.add_argument(
        "--to-clipboard",
        action="store_true",
        help="Записать результат в буфер обмена",
    )

    parser.add_argument(
        "--header",
        action="store_true",
        default=None,
        help="Добавить строку name/type/comment после имени таблицы",
    )

    parser.add_argument(
        "--no-preview",
        dest="preview",
        action="store_false",
        default=None,
        help="Не показывать предпросмотр результата",
    )

    parser.add_argument(
        "--config",
        help="JSON-файл конфигурации",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Подробный журнал (DEBUG)",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(args.config, {"include_header": args.header, "preview": args.preview})
    except ConfigurationError as e:
        print(f"Ошибка конфигурации: {e}", file=sys.stderr)
        return 1

    if args.from_clipboard:
        source = ClipboardSource()
    elif args.input:
        source = FileSource(args.input)
    else:
        source = StdinSource()

    if args.to_clipboard:
        sink = ClipboardSink()
    elif args.out:
        sink = FileSink(args.out)
    else:
        sink = StdoutSink()

    # в stdout результат и так виден
    show_preview = bool(config["preview"]) and not isinstance(sink, StdoutSink)

    try:
        shell = TransferShell(source, sink, ConsolePresenter(show_preview=show_preview), config)
    except ConfigurationError as e:
        print(f"Ошибка конфигурации: {e}", file=sys.stderr)
        return 1

    return 0 if shell.transform() else 1


if __name__ == "__main__":
    raise SystemExit(main())
