from __future__ import annotations

from .api import parse_file, parse_source, parse_tokens
from .ast import Declaration, Expr, IntegerLiteral, LowerIdent, SyntaxTree, UpperIdent
from .errors import Error
from .format import format_syntax_tree
from .lexer import lex, tokenize
from .spans import Span
from .tokens import Token, TokenKind

__all__ = [
    "Declaration",
    "Error",
    "Expr",
    "IntegerLiteral",
    "LowerIdent",
    "Span",
    "SyntaxTree",
    "Token",
    "TokenKind",
    "UpperIdent",
    "format_syntax_tree",
    "lex",
    "parse_file",
    "parse_source",
    "parse_tokens",
    "tokenize",
]
