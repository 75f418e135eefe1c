from __future__ import annotations

from icky.lalr import build_lalr_table
from icky.syntax import build_icky_grammar


def main() -> None:
    g = build_icky_grammar()
    print(f"productions: {len(g.productions)}")
    for i, p in enumerate(g.productions):
        print(f"{i:>3}: {p}")
    table = build_lalr_table(g)
    print(f"states: {len(table.action)}")


if __name__ == "__main__":
    main()
