from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .spans import Span


class TokenKind(str, Enum):
    # Names, classified by the case of their first character
    UPPER_NAME = "UpperName"
    LOWER_NAME = "LowerName"

    # Literals
    INTEGER_LITERAL = "IntegerLiteral"

    # Layout: one per whitespace run containing a newline
    LINE_BREAK = "LineBreak"

    # Punctuation
    COLON = ":"
    SEMICOLON = ";"
    EQUALS = "="

    # End of input marker, only ever synthesized by the parser
    EOF = "EOF"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    span: Span
    value: int | None = None  # decoded value of INTEGER_LITERAL tokens

    def name(self) -> Span | None:
        if self.kind in (TokenKind.UPPER_NAME, TokenKind.LOWER_NAME):
            return self.span
        return None

    def integer_literal(self) -> int | None:
        if self.kind == TokenKind.INTEGER_LITERAL:
            return self.value
        return None

    def __repr__(self) -> str:
        if self.value is not None:
            return f"Token({self.kind.name}, {self.value}, {self.span.start}+{self.span.length})"
        return f"Token({self.kind.name}, {self.span.start}+{self.span.length})"
