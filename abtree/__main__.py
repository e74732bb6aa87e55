# Demo CLI: builds an (a,b)-tree from the given keys and prints it after each step.
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from abtree.errors import InvalidParameters
from abtree.tree import ABTree
from config import Config

RULE = "==============================="


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="abtree", description="Insert keys into an (a,b)-tree and print its structure"
    )
    p.add_argument("keys", nargs="*", type=int, help="Keys to insert (default: built-in demo keys)")
    p.add_argument("--a", type=int, default=Config.min_branching, help="Minimum branching factor")
    p.add_argument("--b", type=int, default=Config.max_branching, help="Maximum branching factor")
    p.add_argument(
        "--remove",
        type=int,
        action="append",
        default=[],
        metavar="KEY",
        help="Key to remove after the insertions (repeatable)",
    )
    p.add_argument("--verbose", action="store_true", help="Log structural changes at DEBUG level")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else Config.log_level,
        format=Config.log_format,
    )

    try:
        tree = ABTree(args.a, args.b)
    except InvalidParameters as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    keys = args.keys or list(Config.demo_keys)
    for key in keys:
        print(RULE)
        print(f"Inserting: {key}")
        tree.insert(key)
        tree.print_tree()

    for key in args.remove:
        print(RULE)
        removed = tree.remove(key)
        print(f"Removing: {key} ({'removed' if removed else 'not found'})")
        tree.print_tree()

    print(RULE)
    print("Final tree:")
    tree.print_tree()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
