from __future__ import annotations

from stacklite.api import compile_source, format_tokens, run_source
from stacklite.checker import check
from stacklite.errors import CompileError, LexicalError, StackEffectError, VMError
from stacklite.scanner import scan
from stacklite.tokens import Location, Program, Token, TokenKind
from stacklite.vm import StackMachine, run_program

__all__ = [
    "__version__",
    # Model
    "Location",
    "Program",
    "Token",
    "TokenKind",
    # Stages
    "scan",
    "check",
    "StackMachine",
    "run_program",
    # Pipeline
    "compile_source",
    "run_source",
    "format_tokens",
    # Errors
    "CompileError",
    "LexicalError",
    "StackEffectError",
    "VMError",
]

__version__ = "0.1.0"
