from __future__ import annotations

from typing import TextIO

from stacklite.checker import check
from stacklite.scanner import scan
from stacklite.tokens import Program
from stacklite.vm import run_program

DEFAULT_SOURCE_NAME = "<stdin>"


def compile_source(*, src: str, name: str = DEFAULT_SOURCE_NAME) -> Program:
    program = scan(name, src)
    check(program)
    return program


def run_source(
    *, src: str, name: str = DEFAULT_SOURCE_NAME, out: TextIO | None = None
) -> list[str]:
    program = compile_source(src=src, name=name)
    return run_program(program, out=out)


def format_tokens(program: Program) -> str:
    return "Ok([" + ", ".join(str(t) for t in program) + "])"
