"""
Разбор CREATE TABLE в TableDescriptor.

Порядок работы:
1) заголовок CREATE TABLE [IF NOT EXISTS] <name> ( -> имя таблицы
2) сбалансированный блок (...) после заголовка -> блок колонок
3) деление блока на кандидатов: перевод строки или запятая вне вложенных скобок
4) отбрасывание табличных конструкций (PRIMARY KEY, INDEX, CONSTRAINT, ...)
5) имя / тип / COMMENT для каждого кандидата
6) ни одной колонки -> NoColumnsParsedError

Разбирается только первый оператор, содержащий CREATE TABLE.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import sqlparse

from ddl_transformer.core.constants import (
    COMMENT_KEYWORD,
    DEFAULT_CONFIG,
    RESERVED_COLUMN_NAMES,
    STRUCTURAL_CLAUSE_PREFIXES,
    TABLE_MODIFIERS,
)
from ddl_transformer.core.exceptions import (
    ColumnBlockNotFoundError,
    ConfigurationError,
    EmptyInputError,
    NoColumnsParsedError,
    TableNameNotFoundError,
)
from ddl_transformer.core.models import ColumnSpec, TableDescriptor
from ddl_transformer.utils.naming import is_plain_identifier

from .tokenizer import SQLTokenizer, Token, TokenType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _TableHeader:
    name: str
    schema: Optional[str]
    lparen: int  # индекс токена "(" в списке токенов


class DDLParser:
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = dict(config or {})
        self._init_defaults()

        self.tokenizer = SQLTokenizer()
        self.structural_prefixes = self._build_structural_prefixes()

    def _init_defaults(self) -> None:
        for k, v in DEFAULT_CONFIG.items():
            self.config.setdefault(k, v)

    def _build_structural_prefixes(self) -> Tuple[Tuple[str, ...], ...]:
        extra = self.config.get("extra_structural_keywords") or []
        if isinstance(extra, str) or not isinstance(extra, (list, tuple)):
            raise ConfigurationError(
                "extra_structural_keywords must be a list of strings",
                config_key="extra_structural_keywords",
                config_value=repr(extra),
            )

        prefixes = list(STRUCTURAL_CLAUSE_PREFIXES)
        for item in extra:
            if not isinstance(item, str) or not item.split():
                raise ConfigurationError(
                    "structural keyword must be a non-empty string",
                    config_key="extra_structural_keywords",
                    config_value=repr(item),
                )
            prefix = tuple(w.upper() for w in item.split())
            if prefix not in prefixes:
                prefixes.append(prefix)
        return tuple(prefixes)

    # ==========================================================
    # PUBLIC API
    # ==========================================================

    def parse(self, ddl: str) -> TableDescriptor:
        if ddl is None or not ddl.strip():
            raise EmptyInputError()

        statement, tokens, header = self._locate_create_table(ddl)
        close = self._find_block_end(tokens, header.lparen)
        logger.debug(
            "Table %s: column block at tokens %d..%d",
            header.name, header.lparen, close,
        )

        candidates = self._split_candidates(tokens[header.lparen + 1:close])

        columns: List[ColumnSpec] = []
        for candidate in candidates:
            if self._is_structural_clause(candidate):
                logger.debug("Skipping structural clause at line %d", candidate[0].line)
                continue

            column = self._parse_column(candidate, statement)
            if column is None:
                logger.debug(
                    "Skipping unrecognised declaration at line %d: %r",
                    candidate[0].line, candidate[0].value,
                )
                continue
            columns.append(column)

        if not columns:
            raise NoColumnsParsedError(table_name=header.name, candidates=len(candidates))

        logger.debug("Parsed %d columns of %s", len(columns), header.name)
        return TableDescriptor(
            table_name=header.name,
            columns=tuple(columns),
            schema=header.schema,
        )

    # ==========================================================
    # CREATE TABLE HEADER
    # ==========================================================

    def _locate_create_table(self, ddl: str) -> Tuple[str, List[Token], _TableHeader]:
        """Первый оператор с заголовком CREATE TABLE и сам заголовок."""
        for statement in sqlparse.split(ddl):
            tokens = self.tokenizer.tokenize(statement, keep_newlines=True)
            header = self._find_table_header(tokens)
            if header is not None:
                return statement, tokens, header
        raise TableNameNotFoundError()

    def _find_table_header(self, tokens: List[Token]) -> Optional[_TableHeader]:
        # заголовок может быть разбит переводами строк
        significant = [i for i, t in enumerate(tokens) if t.type != TokenType.NEWLINE]
        for k, i in enumerate(significant):
            if tokens[i].is_word("CREATE"):
                header = self._match_header(tokens, significant, k + 1)
                if header is not None:
                    return header
        return None

    def _match_header(self, tokens: List[Token], significant: List[int], k: int) -> Optional[_TableHeader]:
        def at(n: int) -> Token:
            return tokens[significant[n]] if n < len(significant) else tokens[-1]

        if at(k).is_word("OR") and at(k + 1).is_word("REPLACE"):
            k += 2
        if at(k).is_word(*TABLE_MODIFIERS):
            k += 1
        if not at(k).is_word("TABLE"):
            return None
        k += 1

        if at(k).is_word("IF") and at(k + 1).is_word("NOT") and at(k + 2).is_word("EXISTS"):
            k += 3

        parts: List[str] = []
        while True:
            tok = at(k)
            if not tok.is_identifier():
                return None
            name = tok.unquoted()
            if not is_plain_identifier(name):
                return None
            parts.append(name)
            k += 1
            if at(k).type != TokenType.DOT:
                break
            k += 1

        if at(k).type != TokenType.LPAREN:
            return None

        schema = ".".join(parts[:-1]) or None
        return _TableHeader(name=parts[-1], schema=schema, lparen=significant[k])

    # ==========================================================
    # COLUMN BLOCK
    # ==========================================================

    def _find_block_end(self, tokens: List[Token], lparen: int) -> int:
        """Индекс ")" закрывающего блок; несбалансированные скобки — ошибка."""
        depth = 1
        for i in range(lparen + 1, len(tokens)):
            tok_type = tokens[i].type
            if tok_type == TokenType.LPAREN:
                depth += 1
            elif tok_type == TokenType.RPAREN:
                depth -= 1
                if depth == 0:
                    return i
        raise ColumnBlockNotFoundError(position=tokens[lparen].position, depth=depth)

    def _split_candidates(self, block: Sequence[Token]) -> List[List[Token]]:
        candidates: List[List[Token]] = []
        current: List[Token] = []
        depth = 0

        for tok in block:
            if tok.type == TokenType.NEWLINE or (tok.type == TokenType.COMMA and depth == 0):
                if current:
                    candidates.append(current)
                current = []
                continue

            if tok.type == TokenType.LPAREN:
                depth += 1
            elif tok.type == TokenType.RPAREN:
                depth -= 1
            current.append(tok)

        if current:
            candidates.append(current)

        return candidates

    def _is_structural_clause(self, candidate: Sequence[Token]) -> bool:
        for prefix in self.structural_prefixes:
            if len(candidate) < len(prefix):
                continue
            if all(tok.is_word(word) for tok, word in zip(candidate, prefix)):
                return True
        return False

    # ==========================================================
    # COLUMN
    # ==========================================================

    def _parse_column(self, candidate: Sequence[Token], text: str) -> Optional[ColumnSpec]:
        if len(candidate) < 2:
            return None

        name_tok, type_tok = candidate[0], candidate[1]
        if not name_tok.is_identifier() or not type_tok.is_word():
            return None

        name = name_tok.unquoted()
        if not is_plain_identifier(name) or name.upper() in RESERVED_COLUMN_NAMES:
            return None

        # тип: слово + (параметры), если скобка закрыта в пределах кандидата
        type_end = 1
        if len(candidate) > 2 and candidate[2].type == TokenType.LPAREN:
            close = self._matching_paren(candidate, 2)
            if close is not None:
                type_end = close
        data_type = text[type_tok.position:candidate[type_end].end].upper()

        comment = self._find_comment(candidate, type_end + 1)

        return ColumnSpec(name=name, type=data_type, comment=comment)

    # ==========================================================
    # HELPERS
    # ==========================================================

    @staticmethod
    def _matching_paren(tokens: Sequence[Token], start: int) -> Optional[int]:
        depth = 0
        for i in range(start, len(tokens)):
            if tokens[i].type == TokenType.LPAREN:
                depth += 1
            elif tokens[i].type == TokenType.RPAREN:
                depth -= 1
                if depth == 0:
                    return i
        return None

    @staticmethod
    def _find_comment(tokens: Sequence[Token], start: int) -> str:
        # берётся первый COMMENT '<...>' кандидата
        for i in range(start, len(tokens) - 1):
            if tokens[i].is_word(COMMENT_KEYWORD) and tokens[i + 1].is_string():
                return tokens[i + 1].unquoted()
        return ""


def parse_ddl(ddl: str, config: Optional[Dict[str, Any]] = None) -> TableDescriptor:
    """Разбор DDL парсером с конфигурацией по умолчанию."""
    return DDLParser(config).parse(ddl)
