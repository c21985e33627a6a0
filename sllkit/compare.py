"""Comparison of two singly linked lists."""

from __future__ import annotations

import logging
from itertools import zip_longest
from typing import Optional

from sllkit.core import Node

log = logging.getLogger(__name__)

_MISSING = object()


def is_identical(head1: Optional[Node], head2: Optional[Node]) -> bool:
    """Return True if both lists hold the same data in the same order.

    An empty list is never identical to anything, not even another empty list.
    """
    if head1 is None or head2 is None:
        log.error("head1 or head2 is null")
        return False
    return all(
        first == second
        for first, second in zip_longest(head1, head2, fillvalue=_MISSING)
    )