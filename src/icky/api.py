from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .ast import SyntaxTree
from .lexer import tokenize
from .parser import Parser
from .syntax import build_icky_grammar
from .tokens import Token


log = logging.getLogger(__name__)

_PARSER: Parser | None = None


def _get_parser() -> Parser:
    global _PARSER
    if _PARSER is None:
        _PARSER = Parser.for_grammar(build_icky_grammar())
        log.debug("built LALR table with %d states", len(_PARSER.table.action))
    return _PARSER


def parse_tokens(tokens: Sequence[Token], *, source: str | None = None) -> SyntaxTree:
    out = _get_parser().parse(tokens, source=source)
    if not isinstance(out, SyntaxTree):
        raise RuntimeError(f"parser returned unexpected value: {type(out)!r}")
    log.debug("parsed %d declarations", len(out.declarations))
    return out


def parse_source(src: str) -> SyntaxTree:
    """Lex and parse ``src``. Raises :class:`icky.errors.Error` on the first failure."""
    toks = tokenize(src)
    log.debug("lexed %d tokens", len(toks))
    return parse_tokens(toks, source=src)


def parse_file(path: str | Path) -> SyntaxTree:
    p = Path(path).expanduser().resolve()
    return parse_source(p.read_text(encoding="utf-8"))
