"""
formatter package — TableDescriptor -> табличный текст
"""

from .table_formatter import TableFormatter, format_table

__all__ = [
    "TableFormatter",
    "format_table",
]
