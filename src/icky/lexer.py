"""Source text to tokens.

Besides skipping whitespace, the lexer does the layout half of separator
insertion: every whitespace run that contains a newline becomes a single
LINE_BREAK token, which the grammar accepts wherever it expects a ``;``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .errors import Error
from .spans import Span
from .tokens import Token, TokenKind


_PUNCTUATION = {
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    "=": TokenKind.EQUALS,
}

_INT64_MODULUS = 1 << 64
_INT64_MIN = -(1 << 63)


def _wrap_int64(value: int) -> int:
    # Two's complement wraparound, as fixed-width 64-bit arithmetic would do.
    return (value - _INT64_MIN) % _INT64_MODULUS + _INT64_MIN


def _starts_lower_name(ch: str) -> bool:
    return ch.islower()


def _starts_upper_name(ch: str) -> bool:
    return ch.isupper()


def _continues_name(ch: str) -> bool:
    return ch.isalnum()


def _is_whitespace(ch: str) -> bool:
    # U+001C..U+001F are separators to str.isspace but not Unicode White_Space.
    return ch.isspace() and ch not in "\x1c\x1d\x1e\x1f"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


@dataclass(slots=True)
class _Cursor:
    src: str
    i: int = 0

    def eof(self) -> bool:
        return self.i >= len(self.src)

    def next(self) -> str:
        ch = self.src[self.i]
        self.i += 1
        return ch

    def take_while(self, pred: Callable[[str], bool]) -> str:
        """Consume the maximal run of characters matching ``pred``."""
        j = self.i
        while j < len(self.src) and pred(self.src[j]):
            j += 1
        run = self.src[self.i : j]
        self.i = j
        return run


def lex(src: str) -> Iterator[Token]:
    """Lazily scan ``src``, raising :class:`Error` at the first bad character."""
    cur = _Cursor(src=src)

    while not cur.eof():
        start = cur.i
        ch = cur.next()

        kind = _PUNCTUATION.get(ch)
        if kind is not None:
            yield Token(kind, Span(start, 1))
            continue

        if _starts_lower_name(ch) or _starts_upper_name(ch):
            cur.take_while(_continues_name)
            kind = TokenKind.LOWER_NAME if _starts_lower_name(ch) else TokenKind.UPPER_NAME
            yield Token(kind, Span(start, cur.i - start))
            continue

        if _is_whitespace(ch):
            run = ch + cur.take_while(_is_whitespace)
            if "\n" in run:
                yield Token(TokenKind.LINE_BREAK, Span(start, len(run)))
            continue

        if _is_digit(ch):
            acc = 0
            for digit in ch + cur.take_while(_is_digit):
                acc = _wrap_int64(acc * 10 + int(digit))
            yield Token(TokenKind.INTEGER_LITERAL, Span(start, cur.i - start), value=acc)
            continue

        line, column = Span(start, 1).location(src)
        raise Error(f"lexer: unexpected character {ch!r} at {line}:{column}")


def tokenize(src: str) -> list[Token]:
    """Scan all of ``src`` up front; the parser needs the whole sequence."""
    return list(lex(src))
