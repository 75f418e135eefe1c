from __future__ import annotations

from dataclasses import dataclass

from .grammar import Grammar, NonTerminal, Production, Symbol, Terminal
from .tokens import TokenKind


@dataclass(frozen=True, slots=True)
class LR1Item:
    prod_index: int
    dot: int
    lookahead: TokenKind

    def core(self) -> tuple[int, int]:
        return (self.prod_index, self.dot)


ItemSet = frozenset[LR1Item]


@dataclass(frozen=True, slots=True)
class ParseTable:
    """ACTION / GOTO tables for an LALR parser.

    ACTION[state][terminal] = ("shift", next_state) | ("reduce", prod_index) | ("accept", 0)
    GOTO[state][nonterminal] = next_state

    Production indices refer to the caller's grammar, not the augmented one.
    """

    action: dict[int, dict[TokenKind, tuple[str, int]]]
    goto: dict[int, dict[NonTerminal, int]]


class GrammarAnalysisError(Exception):
    pass


# Marks "derives the empty string" inside FIRST sets.
_EPS = None


class _Analysis:
    """FIRST sets, closure and goto over the grammar augmented with S' -> S."""

    def __init__(self, grammar: Grammar) -> None:
        accept = Production(
            head=NonTerminal(grammar.start.name + "'"),
            body=(grammar.start,),
            action=lambda xs: xs[0],
        )
        augmented = Grammar(start=accept.head, productions=(accept,) + grammar.productions)
        self.productions: tuple[Production, ...] = augmented.productions
        self.by_head: dict[NonTerminal, tuple[int, ...]] = {
            nt: augmented.prods_for(nt) for nt in augmented.nonterminals()
        }
        for p in self.productions:
            for s in p.body:
                if isinstance(s, NonTerminal) and s not in self.by_head:
                    raise GrammarAnalysisError(f"nonterminal {s.name} has no productions")
        self.first: dict[NonTerminal, set[TokenKind | None]] = {nt: set() for nt in self.by_head}
        self._compute_first()

    def _compute_first(self) -> None:
        changed = True
        while changed:
            changed = False
            for p in self.productions:
                before = len(self.first[p.head])
                self.first[p.head] |= self.first_seq(p.body)
                changed = changed or len(self.first[p.head]) != before

    def first_seq(self, seq: tuple[Symbol, ...]) -> set[TokenKind | None]:
        out: set[TokenKind | None] = set()
        for s in seq:
            if isinstance(s, Terminal):
                out.add(s.kind)
                return out
            f = self.first[s]
            out |= f - {_EPS}
            if _EPS not in f:
                return out
        out.add(_EPS)
        return out

    def closure(self, items: set[LR1Item]) -> ItemSet:
        out = set(items)
        work = list(items)
        while work:
            it = work.pop()
            body = self.productions[it.prod_index].body
            if it.dot >= len(body) or not isinstance(body[it.dot], NonTerminal):
                continue
            look = self.first_seq(body[it.dot + 1 :] + (Terminal(it.lookahead),))
            for j in self.by_head[body[it.dot]]:
                for la in look - {_EPS}:
                    new = LR1Item(j, 0, la)
                    if new not in out:
                        out.add(new)
                        work.append(new)
        return frozenset(out)

    def goto(self, items: ItemSet, sym: Symbol) -> ItemSet:
        moved = set()
        for it in items:
            body = self.productions[it.prod_index].body
            if it.dot < len(body) and body[it.dot] == sym:
                moved.add(LR1Item(it.prod_index, it.dot + 1, it.lookahead))
        return self.closure(moved) if moved else frozenset()


def _lr1_collection(a: _Analysis) -> tuple[list[ItemSet], dict[tuple[int, Symbol], int]]:
    symbols = {s for p in a.productions for s in p.body}
    start = a.closure({LR1Item(0, 0, TokenKind.EOF)})
    states: list[ItemSet] = [start]
    index: dict[ItemSet, int] = {start: 0}
    transitions: dict[tuple[int, Symbol], int] = {}
    work = [0]
    while work:
        i = work.pop()
        for sym in symbols:
            nxt = a.goto(states[i], sym)
            if not nxt:
                continue
            j = index.get(nxt)
            if j is None:
                j = index[nxt] = len(states)
                states.append(nxt)
                work.append(j)
            transitions[(i, sym)] = j
    return states, transitions


def _merge_cores(
    states: list[ItemSet], transitions: dict[tuple[int, Symbol], int]
) -> tuple[list[ItemSet], dict[tuple[int, Symbol], int]]:
    # LR(1) states sharing an LR(0) core collapse into one LALR state.
    by_core: dict[frozenset[tuple[int, int]], int] = {}
    merged: list[set[LR1Item]] = []
    renumber: dict[int, int] = {}
    for i, st in enumerate(states):
        core = frozenset(it.core() for it in st)
        j = by_core.get(core)
        if j is None:
            j = by_core[core] = len(merged)
            merged.append(set())
        merged[j] |= st
        renumber[i] = j
    merged_trans = {(renumber[i], sym): renumber[j] for (i, sym), j in transitions.items()}
    return [frozenset(st) for st in merged], merged_trans


def build_lalr_table(grammar: Grammar) -> ParseTable:
    a = _Analysis(grammar)
    states, transitions = _merge_cores(*_lr1_collection(a))

    action: dict[int, dict[TokenKind, tuple[str, int]]] = {}
    goto_tbl: dict[int, dict[NonTerminal, int]] = {}

    def add_action(st: int, term: TokenKind, act: tuple[str, int]) -> None:
        row = action.setdefault(st, {})
        if term in row and row[term] != act:
            raise GrammarAnalysisError(
                f"conflict in state {st} on {term.value}: {row[term]} vs {act}"
            )
        row[term] = act

    for i, st in enumerate(states):
        for it in st:
            body = a.productions[it.prod_index].body
            if it.dot < len(body):
                sym = body[it.dot]
                if isinstance(sym, Terminal):
                    add_action(i, sym.kind, ("shift", transitions[(i, sym)]))
            elif it.prod_index == 0:
                add_action(i, TokenKind.EOF, ("accept", 0))
            else:
                add_action(i, it.lookahead, ("reduce", it.prod_index - 1))

    for (i, sym), j in transitions.items():
        if isinstance(sym, NonTerminal):
            goto_tbl.setdefault(i, {})[sym] = j

    return ParseTable(action=action, goto=goto_tbl)


def expected_terminals(table: ParseTable, state: int) -> set[TokenKind]:
    return set(table.action.get(state, {}).keys())
