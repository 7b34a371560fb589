from __future__ import annotations

import logging

from stacklite.errors import StackEffectError
from stacklite.tokens import Program, Token, TokenKind
from stacklite.words import ARITHMETIC, StackEffect, StackType, lookup_word

logger = logging.getLogger(__name__)


def _apply(stack: list[StackType], effect: StackEffect, *, token: Token, name: str) -> None:
    for expected, actual in zip(effect.inputs, stack[len(stack) - effect.arity :]):
        if actual is not expected:
            raise StackEffectError(
                f"TYPE ERROR: `{name}` expects {expected.value}, found {actual.value}",
                location=token.location,
            )
    del stack[len(stack) - effect.arity :]
    stack.extend(effect.outputs)


def check(program: Program) -> None:
    """Simulate `program` on a stack of type tags.

    Raises StackEffectError at the first operator or word that would
    underflow, receive the wrong type, or is not a builtin. Values left on
    the stack at the end are allowed.
    """
    stack: list[StackType] = []
    ip = 0
    while ip < len(program):
        token = program[ip]
        if token.kind is TokenKind.INT_LITERAL:
            stack.append(StackType.INT)
        elif token.kind.is_arithmetic:
            if len(stack) < ARITHMETIC.arity:
                raise StackEffectError(
                    f"TYPE ERROR: `{token.text}` expects {ARITHMETIC.arity} operands, "
                    f"found {len(stack)}",
                    location=token.location,
                )
            _apply(stack, ARITHMETIC, token=token, name=token.text)
        elif token.kind is TokenKind.WORD:
            builtin = lookup_word(token.text)
            if builtin is None:
                raise StackEffectError(
                    f"TYPE ERROR: unknown word `{token.text}`",
                    location=token.location,
                )
            if len(stack) < builtin.effect.arity:
                raise StackEffectError(
                    f"TYPE ERROR: {builtin.underflow_message}",
                    location=token.location,
                )
            _apply(stack, builtin.effect, token=token, name=builtin.name)
        else:
            raise AssertionError(f"unhandled token kind: {token.kind}")
        ip += 1

    logger.debug("checked %s: %d value(s) left on the stack", program.source_name, len(stack))
