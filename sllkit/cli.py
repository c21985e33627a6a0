"""Command line front end for the linked list operations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from sllkit.compare import is_identical
from sllkit.core import (
    delete_at_end,
    delete_at_front,
    delete_at_pos,
    from_values,
    insert_at_end,
    insert_at_front,
    insert_at_pos,
    render,
)
from sllkit.search import find_mid, nth_from_end

_DEFAULT_SHORT = [10, 20, 30, 40]
_DEFAULT_LONG = [10, 20, 30, 40, 50, 60]

IDENTICAL = "Two given linked lists are identical"
NOT_IDENTICAL = "Two given linked lists are not identical"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sllkit", description="Run operations on a singly linked list."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    demo = commands.add_parser(
        "demo", help="insert at front, position 2 and end, then delete likewise"
    )
    demo.add_argument("values", nargs="*", type=int, default=_DEFAULT_SHORT)

    identical = commands.add_parser(
        "identical", help="check whether two lists are identical"
    )
    identical.add_argument("--first", nargs="*", type=int, default=_DEFAULT_SHORT)
    identical.add_argument("--second", nargs="*", type=int, default=_DEFAULT_SHORT)

    nth = commands.add_parser("nth-from-end", help="find the nth node from the end")
    nth.add_argument("values", nargs="*", type=int, default=_DEFAULT_LONG)
    nth.add_argument("-n", type=int, default=4)

    mid = commands.add_parser("mid", help="find the middle node")
    mid.add_argument("values", nargs="*", type=int, default=_DEFAULT_LONG)

    return parser


def _run_demo(values: Sequence[int]) -> None:
    head = from_values(values)
    print(render(head))
    steps = (
        lambda h: insert_at_front(h, 100),
        lambda h: insert_at_pos(h, 200, 2),
        lambda h: insert_at_end(h, 300),
        delete_at_front,
        lambda h: delete_at_pos(h, 2),
        delete_at_end,
    )
    for step in steps:
        head = step(head)
        print(render(head))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse *argv*, run the chosen command and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "demo":
            _run_demo(args.values)
        elif args.command == "identical":
            first = from_values(args.first)
            second = from_values(args.second)
            print(render(first))
            print(render(second))
            print(IDENTICAL if is_identical(first, second) else NOT_IDENTICAL)
        elif args.command == "nth-from-end":
            head = from_values(args.values)
            print(render(head))
            print(f"node {args.n} from end: {nth_from_end(head, args.n)}")
        elif args.command == "mid":
            head = from_values(args.values)
            print(render(head))
            print(f"mid: {find_mid(head)}")
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())