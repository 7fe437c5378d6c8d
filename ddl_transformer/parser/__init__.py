"""
parser package — разбор CREATE TABLE
"""

from .tokenizer import SQLTokenizer, Token, TokenType
from .ddl_parser import DDLParser, parse_ddl

__all__ = [
    "SQLTokenizer",
    "Token",
    "TokenType",
    "DDLParser",
    "parse_ddl",
]
