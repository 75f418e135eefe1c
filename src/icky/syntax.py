"""The icky grammar in one place.

    root        = sep* (declaration sep*)*
    declaration = lower_ident ":" upper_ident sep
                  lower_ident "=" expr
    expr        = integer_lit
    sep         = ";" | LineBreak

The separator inside a declaration is required; separators around
declarations are absorbed.
"""

from __future__ import annotations

from . import ast as A
from .grammar import Grammar, n, t
from .production_dsl import ProductionSink, RuleNt, Seq, eps, sym
from .tokens import Token, TokenKind


def _tok(v: object) -> Token:
    if not isinstance(v, Token):
        raise TypeError(f"expected Token, got {type(v)!r}")
    return v


def _node(tp: type, v: object) -> object:
    if not isinstance(v, tp):
        raise TypeError(f"expected {tp.__name__}, got {type(v)!r}")
    return v


def build_icky_grammar() -> Grammar:
    sink = ProductionSink([])

    def NT(name: str) -> RuleNt:
        return RuleNt(syms=(n(name),), sink=sink)

    def T(kind: TokenKind) -> Seq:
        return sym(t(kind))

    # Terminals
    UPPER_NAME = T(TokenKind.UPPER_NAME)
    LOWER_NAME = T(TokenKind.LOWER_NAME)
    INTEGER_LITERAL = T(TokenKind.INTEGER_LITERAL)
    LINE_BREAK = T(TokenKind.LINE_BREAK)
    COLON = T(TokenKind.COLON)
    SEMICOLON = T(TokenKind.SEMICOLON)
    EQUALS = T(TokenKind.EQUALS)

    # Nonterminals
    Root = NT("Root")
    Declarations = NT("Declarations")
    Declaration = NT("Declaration")
    Seps = NT("Seps")
    Sep = NT("Sep")
    Expr = NT("Expr")
    LowerIdent = NT("LowerIdent")
    UpperIdent = NT("UpperIdent")

    # Semantic actions
    def act_passthrough(xs: list[object]) -> object:
        return xs[0]

    def act_none(xs: list[object]) -> object:
        return None

    def act_empty_list(xs: list[object]) -> object:
        return []

    def act_declarations(xs: list[object]) -> object:
        return [_node(A.Declaration, xs[0])] + xs[2]

    def act_root(xs: list[object]) -> object:
        return A.SyntaxTree(declarations=tuple(xs[1]))

    def act_lower_ident(xs: list[object]) -> object:
        return A.LowerIdent(span=_tok(xs[0]).span)

    def act_upper_ident(xs: list[object]) -> object:
        return A.UpperIdent(span=_tok(xs[0]).span)

    def act_integer_literal(xs: list[object]) -> object:
        return A.IntegerLiteral(value=_tok(xs[0]).integer_literal())

    def act_declaration(xs: list[object]) -> object:
        return A.Declaration(
            header_name=_node(A.LowerIdent, xs[0]),
            header_type=_node(A.UpperIdent, xs[2]),
            body_name=_node(A.LowerIdent, xs[4]),
            body=xs[6],
        )

    # Names and expressions
    LowerIdent |= LOWER_NAME @ act_lower_ident
    UpperIdent |= UPPER_NAME @ act_upper_ident
    Expr |= INTEGER_LITERAL @ act_integer_literal

    # Separators: an explicit ";" or an inferred one from a newline
    Sep |= SEMICOLON | LINE_BREAK @ act_passthrough
    Seps |= Sep & Seps @ act_none
    Seps |= eps() @ act_none

    # Declarations
    Declaration |= (LowerIdent & COLON & UpperIdent & Sep
                    & LowerIdent & EQUALS & Expr) @ act_declaration
    Declarations |= Declaration & Seps & Declarations @ act_declarations
    Declarations |= eps() @ act_empty_list
    Root |= Seps & Declarations @ act_root

    return Grammar(start=Root.sym, productions=tuple(sink.productions))
