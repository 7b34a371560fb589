from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Location:
    file: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


class TokenKind(str, Enum):
    INT_LITERAL = "IntLiteral"
    WORD = "Word"
    PLUS = "Plus"
    MINUS = "Minus"
    TIMES = "Times"
    DIV = "Div"

    @property
    def is_arithmetic(self) -> bool:
        return self in _ARITHMETIC_KINDS


_ARITHMETIC_KINDS = frozenset({TokenKind.PLUS, TokenKind.MINUS, TokenKind.TIMES, TokenKind.DIV})


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str
    location: Location

    def __str__(self) -> str:
        return f"[{self.kind.value}:'{self.text}']"


@dataclass(frozen=True, slots=True)
class Program:
    """Scanned token sequence, addressed by instruction pointer only."""

    source_name: str
    tokens: tuple[Token, ...] = ()

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __getitem__(self, ip: int) -> Token:
        return self.tokens[ip]
