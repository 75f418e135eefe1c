from __future__ import annotations

from dataclasses import dataclass

from .spans import Span


@dataclass(frozen=True, slots=True)
class UpperIdent:
    """A name starting with an uppercase letter, e.g. a type name like ``Int``."""

    span: Span

    def text(self, source: str) -> str:
        return self.span.text(source)


@dataclass(frozen=True, slots=True)
class LowerIdent:
    """A name starting with a lowercase letter, e.g. a value name like ``a``."""

    span: Span

    def text(self, source: str) -> str:
        return self.span.text(source)


@dataclass(frozen=True, slots=True)
class IntegerLiteral:
    """e.g. ``0``, ``1000``."""

    value: int


# Expression variants. Add new node classes here (booleans, names, applications).
Expr = IntegerLiteral


@dataclass(frozen=True, slots=True)
class Declaration:
    """A top level declaration: a signature line followed by a definition line.

    Example:
      a : Int
      a = 0

    ``header_name`` and ``body_name`` are not checked for equality here.
    """

    header_name: LowerIdent
    header_type: UpperIdent
    body_name: LowerIdent
    body: Expr


@dataclass(frozen=True, slots=True)
class SyntaxTree:
    declarations: tuple[Declaration, ...] = ()
