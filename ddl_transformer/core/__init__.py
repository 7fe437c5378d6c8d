# ddl_transformer/core/__init__.py

from .models import (
    ColumnSpec,
    TableDescriptor,
)

from .exceptions import (
    DDLTransformerError,
    ParsingError,
    EmptyInputError,
    TableNameNotFoundError,
    ColumnBlockNotFoundError,
    NoColumnsParsedError,
    TransferError,
    InputReadError,
    OutputWriteError,
    NoResultError,
    ConfigurationError,
    handle_exception,
)

__all__ = [
    # models
    "ColumnSpec",
    "TableDescriptor",

    # exceptions
    "DDLTransformerError",
    "ParsingError",
    "EmptyInputError",
    "TableNameNotFoundError",
    "ColumnBlockNotFoundError",
    "NoColumnsParsedError",
    "TransferError",
    "InputReadError",
    "OutputWriteError",
    "NoResultError",
    "ConfigurationError",
    "handle_exception",
]
