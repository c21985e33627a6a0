"""Lookups on a singly linked list: middle node, nth node, nth node from the end.

Every function takes the head of a list (``None`` for the empty list) and
returns the data held by the node it finds.  An empty list raises ValueError;
a position that names no node raises IndexError.
"""

from __future__ import annotations

import logging
from itertools import islice
from typing import Optional

from sllkit.core import Node, _nodes, _require_head, length

log = logging.getLogger(__name__)


def _node_at(head: Node, pos: int) -> Optional[Node]:
    """Return node number *pos* (counting from 1), or None if there is none."""
    if pos < 1:
        return None
    return next(islice(_nodes(head), pos - 1, None), None)


def find_mid(head: Optional[Node]) -> int:
    """Return the data of the middle node; for an even length, the second middle.

    Uses a slow pointer moving one node and a fast pointer moving two.
    """
    slow = fast = _require_head(head)
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow.data


def find_mid_by_count(head: Optional[Node], count: int) -> int:
    """Return the data of the middle node of a list known to hold *count* nodes.

    The middle is node number ``count // 2 + 1``, so for an even count it is
    the second middle.  Raises IndexError if the list is shorter than that.
    """
    head = _require_head(head)
    mid = count // 2 + 1
    node = _node_at(head, mid)
    if node is None:
        raise IndexError(f"middle position {mid} is invalid or exceeded")
    log.debug("data %d at mid %d", node.data, mid)
    return node.data


def find_nth(head: Optional[Node], pos: int) -> int:
    """Return the data of node number *pos*, counting from 1."""
    head = _require_head(head)
    if pos < 1:
        raise IndexError(f"position {pos} is invalid")
    node = _node_at(head, pos)
    if node is None:
        raise IndexError(f"position {pos} exceeds the list")
    return node.data


def nth_from_end(head: Optional[Node], n: int) -> int:
    """Return the data of the *n*th node from the end (1 is the last node).

    Walks two pointers kept ``n - 1`` nodes apart until the leading one
    reaches the last node.
    """
    main_ptr = _require_head(head)
    if n < 1:
        raise IndexError(f"position {n} from the end is invalid")
    ref_ptr = _node_at(main_ptr, n)
    if ref_ptr is None:
        raise IndexError(f"position {n} from the end exceeds the list")
    while ref_ptr.next is not None:
        main_ptr = main_ptr.next
        ref_ptr = ref_ptr.next
    return main_ptr.data


def nth_from_end_by_length(head: Optional[Node], n: int) -> int:
    """Return the data of the *n*th node from the end by first counting the list."""
    head = _require_head(head)
    total = length(head)
    from_start = total - n + 1
    if from_start < 1 or from_start > total:
        raise IndexError(f"position {n} from the end is out of range")
    node = _node_at(head, from_start)
    if node is None:
        raise IndexError(f"position {n} from the end is out of range")
    return node.data