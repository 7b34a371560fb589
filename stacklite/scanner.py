from __future__ import annotations

import logging
import re

from stacklite.errors import LexicalError
from stacklite.tokens import Location, Program, Token, TokenKind

logger = logging.getLogger(__name__)

# Priority order matters: the first rule that matches at the cursor wins.
_RULES: tuple[tuple[re.Pattern[str], TokenKind], ...] = tuple(
    (re.compile(pattern), kind)
    for pattern, kind in (
        (r"[0-9]+", TokenKind.INT_LITERAL),
        (r"\+", TokenKind.PLUS),
        (r"-", TokenKind.MINUS),
        (r"\*", TokenKind.TIMES),
        (r"/", TokenKind.DIV),
        (r"[a-zA-Z_][a-zA-Z_0-9]*", TokenKind.WORD),
    )
)

_WHITESPACE = re.compile(r"\s*")


def advance(line: int, column: int, consumed: str) -> tuple[int, int]:
    for ch in consumed:
        if ch == "\n":
            line += 1
            column = 1
        else:
            column += 1
    return line, column


def _match_rule(text: str, pos: int) -> tuple[TokenKind, str] | None:
    for pattern, kind in _RULES:
        m = pattern.match(text, pos)
        if m is not None:
            return kind, m.group(0)
    return None


def scan(source_name: str, text: str) -> Program:
    """Split `text` into located tokens.

    Exactly one rule is consumed per step; whitespace is skipped again before
    the next rule lookup. Raises LexicalError at the first character that no
    rule accepts.
    """
    tokens: list[Token] = []
    line, column = 1, 1
    pos = 0
    while True:
        ws = _WHITESPACE.match(text, pos)
        if ws is not None and ws.end() > pos:
            line, column = advance(line, column, ws.group(0))
            pos = ws.end()
        if pos >= len(text):
            break

        location = Location(file=source_name, line=line, column=column)
        matched = _match_rule(text, pos)
        if matched is None:
            raise LexicalError(
                f"SYNTAX ERROR: Invalid character: `{text[pos]}`",
                location=location,
            )
        kind, lexeme = matched
        tokens.append(Token(kind=kind, text=lexeme, location=location))
        line, column = advance(line, column, lexeme)
        pos += len(lexeme)

    logger.debug("scanned %d tokens from %s", len(tokens), source_name)
    return Program(source_name=source_name, tokens=tuple(tokens))
