"""Unit tests for value objects and the exception hierarchy."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import dataclasses

import pytest

from ddl_transformer.core.exceptions import (
    ColumnBlockNotFoundError,
    DDLTransformerError,
    EmptyInputError,
    InputReadError,
    NoColumnsParsedError,
    ParsingError,
    TableNameNotFoundError,
    TransferError,
    handle_exception,
)
from ddl_transformer.core.models import ColumnSpec, TableDescriptor


class TestModels:

    def test_columns_coerced_to_tuple(self):
        d = TableDescriptor("t", [ColumnSpec("a", "INT")])
        assert isinstance(d.columns, tuple)
        assert d.column_count == 1

    def test_immutable(self):
        c = ColumnSpec("a", "INT")
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.name = "b"

    def test_value_equality(self):
        assert ColumnSpec("a", "INT", "x") == ColumnSpec("a", "INT", "x")

    def test_qualified_name(self):
        cols = (ColumnSpec("a", "INT"),)
        assert TableDescriptor("t", cols, schema="s").qualified_name == "s.t"
        assert TableDescriptor("t", cols).qualified_name == "t"

    def test_empty_table_name_rejected(self):
        with pytest.raises(ValueError):
            TableDescriptor("", (ColumnSpec("a", "INT"),))

    def test_no_columns_rejected(self):
        with pytest.raises(ValueError):
            TableDescriptor("t", ())


class TestExceptions:

    @pytest.mark.parametrize(
        "exc, code",
        [
            (EmptyInputError(), "EMPTY_INPUT"),
            (TableNameNotFoundError(), "TABLE_NAME_NOT_FOUND"),
            (ColumnBlockNotFoundError(), "COLUMN_BLOCK_NOT_FOUND"),
            (NoColumnsParsedError(), "NO_COLUMNS_PARSED"),
        ],
    )
    def test_parse_errors(self, exc, code):
        assert isinstance(exc, ParsingError)
        assert exc.code == code
        assert str(exc) == f"[{code}] {exc.message}"

    def test_transfer_error(self):
        exc = InputReadError("cannot read clipboard", "clipboard")
        assert isinstance(exc, TransferError)
        assert exc.to_dict() == {
            "error": "cannot read clipboard",
            "code": "INPUT_READ_ERROR",
            "details": {"target": "clipboard", "operation": "read"},
        }

    def test_handle_known_exception(self):
        assert handle_exception(EmptyInputError())["code"] == "EMPTY_INPUT"

    def test_handle_unknown_exception(self):
        result = handle_exception(ValueError("boom"))
        assert result["error"] == "boom"
        assert result["code"] == "UNKNOWN_ERROR"
        assert result["details"]["exception_type"] == "ValueError"

    def test_base_class(self):
        assert issubclass(TransferError, DDLTransformerError)
