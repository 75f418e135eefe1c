from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .errors import Error
from .grammar import Grammar, Production
from .lalr import ParseTable, build_lalr_table, expected_terminals
from .spans import Span
from .tokens import Token, TokenKind


def _token_display(kind: TokenKind) -> str:
    if kind == TokenKind.EOF:
        return "end of input"
    if len(kind.value) == 1:
        return repr(kind.value)
    return kind.value


def _end_of_input(tokens: Sequence[Token]) -> Token:
    end = tokens[-1].span.end if tokens else 0
    return Token(TokenKind.EOF, Span(end, 0))


@dataclass(slots=True)
class Parser:
    """Table-driven shift/reduce parser. Holds no per-parse state."""

    grammar: Grammar
    table: ParseTable

    @classmethod
    def for_grammar(cls, grammar: Grammar) -> Parser:
        return cls(grammar=grammar, table=build_lalr_table(grammar))

    def parse(self, tokens: Sequence[Token], *, source: str | None = None) -> object:
        """Run the grammar over the complete token sequence.

        ``source`` is only used to render line/column in error messages.
        """
        eof = _end_of_input(tokens)
        states: list[int] = [0]
        values: list[object] = []
        i = 0

        while True:
            state = states[-1]
            tok = tokens[i] if i < len(tokens) else eof
            if tok.kind == TokenKind.EOF and tok is not eof:
                raise Error(f"parser: unexpected end of input marker at {tok.span.format(source)}")
            act = self.table.action.get(state, {}).get(tok.kind)
            if act is None:
                raise self._unexpected(tok, state, source)

            kind, arg = act
            if kind == "shift":
                states.append(arg)
                values.append(tok)
                i += 1
                continue

            if kind == "reduce":
                prod: Production = self.grammar.productions[arg]
                k = len(prod.body)
                if k > len(values):
                    raise RuntimeError(
                        f"invalid reduce: stack underflow (state={state}, prod='{prod}', "
                        f"k={k}, values={len(values)})"
                    )
                rhs_vals = values[len(values) - k :]
                del values[len(values) - k :]
                del states[len(states) - k :]
                values.append(prod.action(rhs_vals))
                goto_state = self.table.goto.get(states[-1], {}).get(prod.head)
                if goto_state is None:
                    raise RuntimeError(f"no goto from state {states[-1]} on {prod.head.name}")
                states.append(goto_state)
                continue

            if kind == "accept":
                return values[-1]

            raise RuntimeError(f"unknown action: {act}")

    def _unexpected(self, tok: Token, state: int, source: str | None) -> Error:
        exp = sorted(expected_terminals(self.table, state), key=lambda k: k.value)
        msg = f"parser: unexpected {_token_display(tok.kind)} at {tok.span.format(source)}"
        if exp:
            msg += ", expected one of: " + ", ".join(_token_display(k) for k in exp)
        return Error(msg)
