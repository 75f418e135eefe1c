"""A small operator DSL for writing productions.

    Decl |= Lower & COLON & Upper @ act_decl     # sequence, bound to an action
    Sep |= SEMICOLON | LINE_BREAK @ act_pass     # one production per alternative
    Seps |= eps() @ act_none                     # empty production

``@`` binds tighter than ``&`` and ``|``, so the action attaches to the last
operand first and is carried leftwards as the expression folds.
"""

from __future__ import annotations

from dataclasses import dataclass

from .grammar import ActionFn, NonTerminal, Production, Symbol


@dataclass(frozen=True, slots=True)
class Seq:
    syms: tuple[Symbol, ...]

    def __and__(self, other):
        if isinstance(other, Seq):
            return Seq(self.syms + other.syms)
        if isinstance(other, Bound):
            if len(other.alts) != 1:
                raise TypeError("cannot sequence into an alternation; parenthesize it")
            return Bound((self.syms + other.alts[0],), other.action)
        return NotImplemented

    def __or__(self, other):
        if isinstance(other, Seq):
            return Choice((self.syms, other.syms))
        if isinstance(other, Choice):
            return Choice((self.syms,) + other.alts)
        if isinstance(other, Bound):
            return Bound((self.syms,) + other.alts, other.action)
        return NotImplemented

    def __matmul__(self, action: ActionFn) -> Bound:
        return Bound((self.syms,), action)


@dataclass(frozen=True, slots=True)
class Choice:
    alts: tuple[tuple[Symbol, ...], ...]

    def __or__(self, other):
        if isinstance(other, Seq):
            return Choice(self.alts + (other.syms,))
        if isinstance(other, Choice):
            return Choice(self.alts + other.alts)
        if isinstance(other, Bound):
            return Bound(self.alts + other.alts, other.action)
        return NotImplemented

    def __matmul__(self, action: ActionFn) -> Bound:
        return Bound(self.alts, action)


@dataclass(frozen=True, slots=True)
class Bound:
    """One or more production bodies sharing a semantic action."""

    alts: tuple[tuple[Symbol, ...], ...]
    action: ActionFn

    def __and__(self, other):
        raise TypeError("cannot use & after @ action; put @ action at the end")

    def __or__(self, other):
        raise TypeError("cannot use | after @ action; put @ action at the end")


@dataclass(slots=True)
class ProductionSink:
    productions: list[Production]

    def add(self, head: Symbol, body: tuple[Symbol, ...], action: ActionFn) -> None:
        if not isinstance(head, NonTerminal):
            raise TypeError("head must be a NonTerminal")
        self.productions.append(Production(head=head, body=body, action=action))


@dataclass(frozen=True, slots=True)
class RuleNt(Seq):
    """Nonterminal usable on a right-hand side and, with ``|=``, as a rule head."""

    sink: ProductionSink

    @property
    def sym(self) -> NonTerminal:
        return self.syms[0]

    def __ior__(self, rhs):
        if not isinstance(rhs, Bound):
            raise TypeError("production missing action: use `rhs @ action`")
        for body in rhs.alts:
            self.sink.add(self.sym, body, rhs.action)
        return self


def sym(s: Symbol) -> Seq:
    return Seq((s,))


def eps() -> Seq:
    return Seq(())
