from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Error(Exception):
    """Compilation error carrying a human-readable message.

    Lexer messages start with ``lexer:``, parser messages with ``parser:``.
    """

    message: str

    def __str__(self) -> str:
        return self.message
