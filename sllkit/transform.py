"""Operations that rearrange a singly linked list in place.

Every function takes the head of a list (``None`` for the empty list).  The
nodes themselves are relinked rather than copied.
"""

from __future__ import annotations

import logging
from typing import Optional

from sllkit.core import Node, _require_head

log = logging.getLogger(__name__)


def delete_alternate(head: Optional[Node]) -> Optional[Node]:
    """Unlink the second, fourth, sixth ... nodes and return the head."""
    if head is None:
        return None
    keep: Optional[Node] = head
    while keep is not None and keep.next is not None:
        keep.next = keep.next.next
        keep = keep.next
    return head


def move_last_to_front(head: Optional[Node]) -> Optional[Node]:
    """Move the last node to the front and return the new head.

    An empty list or a list of one node is returned unchanged.
    """
    if head is None or head.next is None:
        return head
    second_last = head
    while second_last.next.next is not None:
        second_last = second_last.next
    last = second_last.next
    second_last.next = None
    last.next = head
    return last


def detach_mid(head: Optional[Node]) -> tuple[Optional[Node], Node]:
    """Unlink the middle node (the second middle for an even length).

    Returns ``(remaining_head, mid)``; the detached node's ``next`` is cleared.
    Raises ValueError for an empty list.
    """
    slow = fast = _require_head(head)
    prev: Optional[Node] = None
    while fast is not None and fast.next is not None:
        prev = slow
        slow = slow.next
        fast = fast.next.next
    if prev is None:
        remaining = slow.next
    else:
        prev.next = slow.next
        remaining = head
    slow.next = None
    return remaining, slow


def move_mid_to_front(head: Optional[Node]) -> Optional[Node]:
    """Move the middle node (the second middle for an even length) to the front."""
    if head is None:
        return None
    remaining, mid = detach_mid(head)
    mid.next = remaining
    return mid


def reverse(head: Optional[Node]) -> Node:
    """Reverse the list iteratively and return the new head.

    Raises ValueError for an empty list.
    """
    curr: Optional[Node] = _require_head(head)
    prev: Optional[Node] = None
    while curr is not None:
        curr.next, prev, curr = prev, curr, curr.next
    return prev


def reverse_recursive(head: Optional[Node]) -> Optional[Node]:
    """Reverse the list recursively and return the new head.

    An empty list gives None.  The recursion is one level deep per node, so
    very long lists reach the interpreter's recursion limit.
    """
    if head is None or head.next is None:
        log.debug("recursion base case reached")
        return head
    rest = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return rest