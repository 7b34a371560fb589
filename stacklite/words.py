from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from stacklite.tokens import Token

if TYPE_CHECKING:
    from stacklite.vm import StackMachine


class StackType(str, Enum):
    INT = "Int"


@dataclass(frozen=True, slots=True)
class StackEffect:
    inputs: tuple[StackType, ...]
    outputs: tuple[StackType, ...]

    @property
    def arity(self) -> int:
        return len(self.inputs)


@dataclass(frozen=True, slots=True)
class Builtin:
    """A word's stack effect (used by the checker) and behaviour (used by the machine)."""

    name: str
    effect: StackEffect
    underflow_message: str
    run: Callable[[StackMachine, Token], None]


def _print(machine: StackMachine, token: Token) -> None:
    machine.emit(str(machine.pop(token)))


ARITHMETIC = StackEffect(inputs=(StackType.INT, StackType.INT), outputs=(StackType.INT,))

BUILTINS: MappingProxyType[str, Builtin] = MappingProxyType(
    {
        "print": Builtin(
            name="print",
            effect=StackEffect(inputs=(StackType.INT,), outputs=()),
            underflow_message="attempting to print with an empty stack",
            run=_print,
        ),
    }
)


def lookup_word(name: str) -> Builtin | None:
    """Exact-text lookup; None means the word is not a builtin."""
    return BUILTINS.get(name)
