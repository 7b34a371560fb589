from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from stacklite.errors import CompileError, LexicalError
from stacklite.tokens import Location, Program, Token, TokenKind


class LocationModel(BaseModel):
    file: str
    line: int = Field(ge=1)
    column: int = Field(ge=1)

    @classmethod
    def from_location(cls, location: Location) -> LocationModel:
        return cls(file=location.file, line=location.line, column=location.column)


class TokenModel(BaseModel):
    kind: TokenKind
    text: str
    location: LocationModel

    @classmethod
    def from_token(cls, token: Token) -> TokenModel:
        return cls(
            kind=token.kind,
            text=token.text,
            location=LocationModel.from_location(token.location),
        )


class ProgramModel(BaseModel):
    source_name: str
    tokens: list[TokenModel] = Field(default_factory=list)

    @classmethod
    def from_program(cls, program: Program) -> ProgramModel:
        return cls(
            source_name=program.source_name,
            tokens=[TokenModel.from_token(t) for t in program],
        )


class DiagnosticModel(BaseModel):
    stage: Literal["scan", "check"]
    location: LocationModel
    message: str

    @classmethod
    def from_error(cls, err: CompileError) -> DiagnosticModel:
        return cls(
            stage="scan" if isinstance(err, LexicalError) else "check",
            location=LocationModel.from_location(err.location),
            message=err.message,
        )
