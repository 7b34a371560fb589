from __future__ import annotations

from stacklite.tokens import Location


class CompileError(Exception):
    """A located diagnostic raised before execution starts."""

    def __init__(self, message: str, *, location: Location) -> None:
        self.message = message
        self.location = location
        super().__init__(f"{location}: {message}")

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def col(self) -> int:
        return self.location.column


class LexicalError(CompileError):
    pass


class StackEffectError(CompileError):
    pass


class VMError(Exception):
    def __init__(self, message: str, *, location: Location | None = None) -> None:
        self.message = message
        self.location = location
        prefix = f"{location}: " if location is not None else ""
        super().__init__(prefix + message)
