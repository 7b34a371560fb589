from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TextIO

from stacklite.errors import VMError
from stacklite.tokens import Program, Token, TokenKind
from stacklite.words import lookup_word

logger = logging.getLogger(__name__)


def _trunc_div(left: int, right: int) -> int:
    # Truncate toward zero; Python's // floors.
    q = abs(left) // abs(right)
    return q if (left < 0) == (right < 0) else -q


_OPERATORS: dict[TokenKind, Callable[[int, int], int]] = {
    TokenKind.PLUS: lambda a, b: a + b,
    TokenKind.MINUS: lambda a, b: a - b,
    TokenKind.TIMES: lambda a, b: a * b,
    TokenKind.DIV: _trunc_div,
}


class StackMachine:
    """Executes a program that has already passed `check`.

    The machine does not verify stack depth itself; an underflow here means
    the checker was skipped.
    """

    def __init__(self, *, out: TextIO | None = None) -> None:
        self.out = out
        self.stack: list[int] = []
        self.output: list[str] = []

    def pop(self, token: Token) -> int:
        if not self.stack:
            raise VMError(
                "RUNTIME ERROR: stack underflow (program was not checked)",
                location=token.location,
            )
        return self.stack.pop()

    def emit(self, line: str) -> None:
        self.output.append(line)
        if self.out is not None:
            self.out.write(line + "\n")
            self.out.flush()

    def _word(self, token: Token) -> None:
        builtin = lookup_word(token.text)
        if builtin is None:
            raise VMError(f"RUNTIME ERROR: unknown word `{token.text}`", location=token.location)
        builtin.run(self, token)

    def step(self, token: Token) -> None:
        if token.kind is TokenKind.INT_LITERAL:
            self.stack.append(int(token.text, 10))
        elif token.kind is TokenKind.WORD:
            self._word(token)
        else:
            op = _OPERATORS[token.kind]
            right = self.pop(token)
            left = self.pop(token)
            if token.kind is TokenKind.DIV and right == 0:
                raise VMError("RUNTIME ERROR: division by zero", location=token.location)
            self.stack.append(op(left, right))

    def run(self, program: Program) -> list[str]:
        self.stack = []
        self.output = []
        ip = 0
        while ip < len(program):
            self.step(program[ip])
            ip += 1
        logger.debug(
            "ran %s: %d instruction(s), %d value(s) left on the stack",
            program.source_name,
            len(program),
            len(self.stack),
        )
        return list(self.output)


def run_program(program: Program, *, out: TextIO | None = None) -> list[str]:
    return StackMachine(out=out).run(program)
