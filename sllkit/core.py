"""Singly linked list nodes and the basic insert, delete and display operations.

A list is represented by its head node; the empty list is ``None``.  Every
operation that can change the head returns the new head.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

log = logging.getLogger(__name__)


@dataclass(eq=False)
class Node:
    """One element of a singly linked list."""

    data: int
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the data of this node and every node after it."""
        for node in _nodes(self):
            yield node.data

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _require_head(head: Optional[Node]) -> Node:
    if head is None:
        raise ValueError("list is empty")
    return head


def from_values(values: Iterable[int]) -> Optional[Node]:
    """Build a list holding *values* in order and return its head."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def values(head: Optional[Node]) -> list[int]:
    """Return the data of the list as a Python list."""
    return [] if head is None else list(head)


def render(head: Optional[Node]) -> str:
    """Return the list in the form ``10->20->NULL``."""
    return "".join(f"{value}->" for value in values(head)) + "NULL"


def display(head: Optional[Node]) -> None:
    """Print the list in the form ``10->20->NULL``."""
    print(render(head))


def length(head: Optional[Node]) -> int:
    """Return the number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def insert_at_front(head: Optional[Node], data: int) -> Node:
    """Put a new node holding *data* before *head* and return the new head.

    Raises ValueError if the list is empty.
    """
    return Node(data, _require_head(head))


def insert_at_pos(head: Optional[Node], data: int, pos: int) -> Node:
    """Insert *data* so that it becomes node number *pos* (counting from 1).

    Valid positions run from 1 to one past the last node.  Raises ValueError
    for an empty list and IndexError for a position out of range.
    """
    head = _require_head(head)
    if pos < 1:
        raise IndexError(f"position {pos} is out of range")
    if pos == 1:
        return Node(data, head)

    before = next(
        (node for index, node in enumerate(_nodes(head), start=1) if index == pos - 1),
        None,
    )
    if before is None:
        log.debug("pos exceeds")
        raise IndexError(f"position {pos} is out of range")
    before.next = Node(data, before.next)
    return head


def insert_at_end(head: Optional[Node], data: int) -> Node:
    """Append a node holding *data* and return the head.

    Raises ValueError if the list is empty.
    """
    head = _require_head(head)
    last = head
    while last.next is not None:
        last = last.next
    last.next = Node(data)
    return head


def delete_at_front(head: Optional[Node]) -> Optional[Node]:
    """Remove the first node and return the new head (None stays None)."""
    if head is None:
        return None
    return head.next


def delete_at_pos(head: Optional[Node], pos: int) -> Optional[Node]:
    """Remove node number *pos* (counting from 1) and return the head.

    An empty list is returned unchanged.  Raises IndexError for a position
    that names no node.
    """
    if head is None:
        return None
    if pos < 1:
        raise IndexError(f"position {pos} is out of range")
    if pos == 1:
        return head.next

    before = next(
        (node for index, node in enumerate(_nodes(head), start=1) if index == pos - 1),
        None,
    )
    if before is None or before.next is None:
        raise IndexError(f"position {pos} is out of range")
    before.next = before.next.next
    return head


def delete_at_end(head: Optional[Node]) -> Optional[Node]:
    """Remove the last node and return the head (None once the list is empty)."""
    if head is None or head.next is None:
        return None
    second_last = head
    while second_last.next.next is not None:
        second_last = second_last.next
    second_last.next = None
    return head