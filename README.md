# sllkit

A small toolkit for singly linked lists made of `Node` objects. A list is
represented by its head node and the empty list by `None`; every operation
that can change the head returns the new head.

It covers building and printing lists, inserting and deleting at the front,
at a position or at the end, finding the middle node or the n-th node (from
the start or from the end), reordering and reversing lists in place, and
checking whether two lists hold the same data.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from sllkit.core import from_values, values, render, insert_at_front, insert_at_pos, insert_at_end
from sllkit.core import delete_at_front, delete_at_pos, delete_at_end
from sllkit.search import find_mid, find_nth, nth_from_end
from sllkit.transform import reverse, delete_alternate, move_last_to_front, move_mid_to_front
from sllkit.compare import is_identical

head = from_values([10, 20, 30, 40])
print(render(head))              # 10->20->30->40->NULL

head = insert_at_front(head, 100)
head = insert_at_pos(head, 200, 2)
head = insert_at_end(head, 300)
print(values(head))              # [100, 200, 10, 20, 30, 40, 300]

head = delete_at_front(head)
head = delete_at_pos(head, 2)
head = delete_at_end(head)
print(values(head))              # [200, 20, 30, 40]

lst = from_values([10, 20, 30, 40, 50, 60])
find_mid(lst)                    # 40 (second middle for even lengths)
find_nth(lst, 2)                 # 20
nth_from_end(lst, 4)             # 30

print(values(reverse(from_values([10, 20, 30, 40]))))           # [40, 30, 20, 10]
print(values(delete_alternate(from_values([10, 20, 30, 40]))))  # [10, 30]
print(values(move_last_to_front(from_values([1, 2, 3]))))       # [3, 1, 2]

is_identical(from_values([1, 2]), from_values([1, 2]))          # True
```

### Modules

- `sllkit.core`: `Node` (iterating over a node yields the data of that node
  and every node after it), `from_values`, `values`, `render`, `display`
  (prints `render`), `length`, `insert_at_front`, `insert_at_pos`,
  `insert_at_end`, `delete_at_front`, `delete_at_pos`, `delete_at_end`.
- `sllkit.search`: `find_mid`, `find_mid_by_count(head, count)`,
  `find_nth(head, pos)`, `nth_from_end(head, n)`,
  `nth_from_end_by_length(head, n)`. All return the data of the node found.
- `sllkit.transform`: `delete_alternate`, `move_last_to_front`,
  `detach_mid` (returns `(remaining_head, mid)`), `move_mid_to_front`,
  `reverse`, `reverse_recursive`.
- `sllkit.compare`: `is_identical(head1, head2)`.

### Errors

Positions count from 1. Operations that cannot be carried out raise
exceptions:

- `ValueError` for an empty list where a node is needed: the insert
  functions, the search functions, `detach_mid` and `reverse`.
- `IndexError` for a position that names no node (`insert_at_pos`,
  `delete_at_pos`, `find_nth`, `find_mid_by_count`, `nth_from_end`,
  `nth_from_end_by_length`).

The delete functions, `delete_alternate`, `move_last_to_front`,
`move_mid_to_front` and `reverse_recursive` return `None` for an empty list.
`is_identical` returns `False` when either list is empty, even if both are.
`reverse_recursive` recurses once per node, so very long lists reach the
interpreter's recursion limit.

## Command line

The `sllkit` command takes one of four subcommands. List values are given
as integers; each list is printed in the `10->20->NULL` form.

```
sllkit demo [VALUES ...]
```

Builds a list (default `10 20 30 40`), then inserts 100 at the front, 200 at
position 2 and 300 at the end, deletes at the front, at position 2 and at
the end, printing the list after every step.

```
sllkit identical [--first VALUES ...] [--second VALUES ...]
```

Prints both lists (each defaults to `10 20 30 40`) and whether they are
identical.

```
sllkit nth-from-end [VALUES ...] [-n N]
```

Prints the list (default `10 20 30 40 50 60`) and the data of the N-th node
from the end (default N is 4).

```
sllkit mid [VALUES ...]
```

Prints the list (default `10 20 30 40 50 60`) and the data of its middle
node.

If an operation fails, the command prints `error: ...` to standard error and
exits with status 1.

## What it does not do

The command line only works on lists given as arguments; it does not read
lists from files or keep them between runs. There is no doubly linked or
circular list support.