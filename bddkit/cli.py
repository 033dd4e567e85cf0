"""Command that builds a small example BDD and writes it as a Graphviz file."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from bddkit.manager import Manager


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build (a or b) and (c and d) and write its diagram; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="bddkit", description="Write the ROBDD of (a or b) and (c and d) as a dot file."
    )
    parser.add_argument("-o", "--output", default="robdd.dot", help="output file path")
    args = parser.parse_args(argv)

    manager = Manager()
    a = manager.create_var("a")
    b = manager.create_var("b")
    c = manager.create_var("c")
    d = manager.create_var("d")
    f = manager.and2(manager.or2(a, b), manager.and2(c, d))

    manager.visualize_bdd(args.output, f)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())