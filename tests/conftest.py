"""Shared test configuration and fixtures."""

import pytest

from ddl_transformer.core.exceptions import InputReadError, OutputWriteError
from ddl_transformer.transfer.io import TextSink, TextSource


USERS_DDL = """CREATE TABLE `users` (
  `id` INT PRIMARY KEY COMMENT 'user id',
  `name` VARCHAR(50) COMMENT '姓名',
  PRIMARY KEY (`id`)
)"""

USERS_TSV = "users\nid\tINT\tuser id\nname\tVARCHAR(50)\t姓名"


class MemorySource(TextSource):
    NAME = "memory"

    def __init__(self, text=None, fail=False):
        self.text = text
        self.fail = fail

    def read(self):
        if self.fail:
            raise InputReadError("cannot read clipboard", self.NAME)
        return self.text


class MemorySink(TextSink):
    NAME = "memory"

    def __init__(self, fail=False):
        self.fail = fail
        self.writes = []

    def write(self, text):
        if self.fail:
            raise OutputWriteError("cannot write clipboard", self.NAME)
        self.writes.append(text)


@pytest.fixture
def users_ddl():
    return USERS_DDL


@pytest.fixture
def users_tsv():
    return USERS_TSV


@pytest.fixture
def sink():
    return MemorySink()
