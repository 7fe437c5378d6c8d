"""Unit tests for naming helpers."""

# pylint: disable=missing-function-docstring

import pytest

from ddl_transformer.utils.naming import is_plain_identifier, sanitize_field


@pytest.mark.parametrize("name", ["users", "user_id", "T1", "姓名", "_x"])
def test_plain_identifier(name):
    assert is_plain_identifier(name)


@pytest.mark.parametrize("name", ["", "my table", "a-b", "a\n", "a.b"])
def test_not_plain_identifier(name):
    assert not is_plain_identifier(name)


def test_sanitize_field():
    assert sanitize_field("a\t\tb\r\nc") == "a b c"
    assert sanitize_field("") == ""
    assert sanitize_field(None) == ""
