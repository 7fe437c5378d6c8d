from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class TokenType(str, Enum):
    IDENTIFIER = "IDENTIFIER"
    QUOTED_IDENTIFIER = "QUOTED_IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    OPERATOR = "OPERATOR"
    COMMA = "COMMA"
    DOT = "DOT"
    SEMICOLON = "SEMICOLON"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"

    WHITESPACE = "WHITESPACE"
    NEWLINE = "NEWLINE"
    COMMENT = "COMMENT"

    EOF = "EOF"


_QUOTE_PAIRS = {"`": "`", '"': '"', "'": "'"}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    line: int
    column: int
    position: int

    @property
    def end(self) -> int:
        return self.position + len(self.value)

    @property
    def upper(self) -> str:
        return self.value.upper()

    def is_word(self, *words: str) -> bool:
        """Неквотированное слово; с аргументами — одно из них (без учёта регистра)."""
        if self.type != TokenType.IDENTIFIER:
            return False
        return not words or self.upper in words

    def is_identifier(self) -> bool:
        return self.type in (TokenType.IDENTIFIER, TokenType.QUOTED_IDENTIFIER)

    def is_string(self) -> bool:
        """Строковый литерал в '...' или "..." (MySQL допускает оба)."""
        if self.type == TokenType.STRING:
            return True
        return self.type == TokenType.QUOTED_IDENTIFIER and self.value.startswith('"')

    def unquoted(self) -> str:
        """
        Содержимое без внешних кавычек, с раскрытием удвоенных
        и экранированных обратным слэшем кавычек.
        """
        v = self.value
        if len(v) < 2 or v[0] not in _QUOTE_PAIRS or v[-1] != _QUOTE_PAIRS[v[0]]:
            return v
        q = v[0]
        inner = v[1:-1]
        inner = inner.replace(q + q, q)
        if q != "`":
            inner = inner.replace("\\" + q, q)
        return inner


class SQLTokenizer:
    """
    Лексический анализатор DDL.
    Делает токены + позиционную разметку (line/column/position).
    Регистр значений сохраняется: имена таблиц и колонок выводятся как написаны.
    """

    # NEWLINE ДО WHITESPACE, иначе \s+ "съест" \n и NEWLINE никогда не появится
    _TOKEN_SPECS: List[Tuple[str, TokenType]] = [
        (r"--[^\r\n]*", TokenType.COMMENT),
        (r"/\*[\s\S]*?\*/", TokenType.COMMENT),
        (r"#[^\r\n]*", TokenType.COMMENT),  # MySQL
        (r"\r\n|\r|\n", TokenType.NEWLINE),
        (r"[ \t\f\v]+", TokenType.WHITESPACE),

        (r"'(?:[^'\\]|\\.|'')*'", TokenType.STRING),
        (r'"(?:[^"\\]|\\.|"")*"', TokenType.QUOTED_IDENTIFIER),
        (r"`(?:[^`]|``)*`", TokenType.QUOTED_IDENTIFIER),

        # цифры вплотную к буквам: имя, а не число (2024_sales, 1st_col)
        (r"\d+\.\d+(?!\w)", TokenType.NUMBER),
        (r"\d+(?!\w)", TokenType.NUMBER),

        (r",", TokenType.COMMA),
        (r"\.", TokenType.DOT),
        (r";", TokenType.SEMICOLON),
        (r"\(", TokenType.LPAREN),
        (r"\)", TokenType.RPAREN),

        (r"\w+", TokenType.IDENTIFIER),
    ]

    def __init__(self):
        parts = []
        for i, (pat, _) in enumerate(self._TOKEN_SPECS):
            parts.append(f"(?P<T{i}>{pat})")
        self._master = re.compile("|".join(parts))

        # отображение group name -> TokenType
        self._group_to_type = {f"T{i}": t for i, (_, t) in enumerate(self._TOKEN_SPECS)}

    def tokenize(self, sql_text: str, keep_newlines: bool = False) -> List[Token]:
        """
        Один проход по тексту.
        Возвращает токены без WHITESPACE/COMMENT (и без NEWLINE, если keep_newlines=False).
        Последний токен всегда EOF.
        """
        tokens: List[Token] = []
        line = 1
        col = 1

        pos = 0
        n = len(sql_text)

        while pos < n:
            m = self._master.match(sql_text, pos)
            if not m:
                # незакрытая кавычка и прочий мусор: 1 символ как OPERATOR
                tokens.append(Token(TokenType.OPERATOR, sql_text[pos], line, col, pos))
                pos += 1
                col += 1
                continue

            group = m.lastgroup
            assert group is not None
            tok_type = self._group_to_type[group]
            value = m.group(group)

            tok = Token(tok_type, value, line, col, pos)

            # координаты: строки и комментарии /* */ могут быть многострочными
            breaks = 1 if tok_type == TokenType.NEWLINE else value.count("\n")
            if breaks:
                line += breaks
                col = len(value) - value.rfind("\n") if tok_type != TokenType.NEWLINE else 1
            else:
                col += len(value)

            pos = m.end()

            if tok_type in (TokenType.WHITESPACE, TokenType.COMMENT):
                continue
            if tok_type == TokenType.NEWLINE and not keep_newlines:
                continue

            tokens.append(tok)

        tokens.append(Token(TokenType.EOF, "", line, col, pos))
        return tokens
