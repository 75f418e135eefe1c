from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import fields, is_dataclass
from pathlib import Path

from . import ast as A
from .api import parse_tokens
from .errors import Error
from .format import format_syntax_tree
from .lexer import tokenize
from .tokens import Token


log = logging.getLogger(__name__)


def _to_jsonable(obj, source: str):
    if isinstance(obj, (A.LowerIdent, A.UpperIdent)):
        return {"text": obj.text(source), "start": obj.span.start, "length": obj.span.length}
    if isinstance(obj, Token):
        out = {"kind": obj.kind.value, "start": obj.span.start, "length": obj.span.length}
        if obj.name() is not None:
            out["text"] = obj.span.text(source)
        if obj.value is not None:
            out["value"] = obj.value
        return out
    if is_dataclass(obj):
        out = {f.name: _to_jsonable(getattr(obj, f.name), source) for f in fields(obj)}
        if isinstance(obj, A.IntegerLiteral):
            out = {"kind": "IntegerLiteral", **out}
        return out
    if isinstance(obj, (tuple, list)):
        return [_to_jsonable(x, source) for x in obj]
    return obj


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="icky", description="Parse an icky source file")
    ap.add_argument("file", help="Source file to parse")
    ap.add_argument("--tokens", action="store_true", help="Print the token stream instead of the tree")
    ap.add_argument("--json", action="store_true", help="Print output as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    path = Path(args.file).expanduser().resolve()
    try:
        src = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {path}: {e}", file=sys.stderr)
        return 1
    log.debug("read %d characters from %s", len(src), path)

    try:
        toks = tokenize(src)
        log.debug("lexed %d tokens", len(toks))
        tree = None if args.tokens else parse_tokens(toks, source=src)
    except Error as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.tokens:
        if args.json:
            print(json.dumps(_to_jsonable(toks, src), indent=2))
        else:
            for tok in toks:
                print(repr(tok))
        return 0

    if args.json:
        print(json.dumps(_to_jsonable(tree, src), indent=2, sort_keys=True))
    else:
        sys.stdout.write(format_syntax_tree(tree, src))
    return 0
