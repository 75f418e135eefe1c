from __future__ import annotations

from . import ast as A


def format_syntax_tree(tree: A.SyntaxTree, source: str) -> str:
    """Render ``tree`` canonically; names are resolved against ``source``.

    Declarations are separated by a blank line.
    """
    blocks = [_format_declaration(d, source) for d in tree.declarations]
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


def _format_declaration(decl: A.Declaration, source: str) -> str:
    header = f"{decl.header_name.text(source)} : {decl.header_type.text(source)}"
    body = f"{decl.body_name.text(source)} = {_format_expr(decl.body)}"
    return f"{header}\n{body}"


def _format_expr(expr: A.Expr) -> str:
    if isinstance(expr, A.IntegerLiteral):
        # Wrapped literals print as their unsigned 64-bit pattern, which lexes back unchanged.
        return str(expr.value % (1 << 64))
    raise TypeError(f"unsupported expression node in formatter: {type(expr).__name__}")
