# dsalab

A small collection of classic data structures and algorithms written in plain
Python, with no third-party dependencies. It is meant for learning: each
structure behaves the textbook way, and a command-line tool lets you operate
on several of them through numbered menus.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsalab.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `counting_sort`, `radix_sort` |
| `dsalab.searching` | `binary_search`, `linear_search` |
| `dsalab.hanoi` | `hanoi_moves` |
| `dsalab.stack` | `Stack`, `StackOverflow`, `StackUnderflow` |
| `dsalab.queues` | `LinearQueue`, `CircularQueue`, `QueueOverflow`, `QueueUnderflow` |
| `dsalab.singly_linked_list` | `SinglyLinkedList` |
| `dsalab.doubly_linked_list` | `DoublyLinkedList` |
| `dsalab.circular_linked_list` | `CircularLinkedList` |
| `dsalab.reverse` | `Node`, `from_iterable`, `to_list`, `reverse_iterative`, `reverse_recursive` |
| `dsalab.binary_tree` | `TreeNode`, `preorder`, `inorder`, `postorder`, `level`, `level_order` |
| `dsalab.bst` | `BinarySearchTree`, `is_bst` |
| `dsalab.trie` | `Trie` |
| `dsalab.menus` | `main`, the entry point of the `dsalab` command |

## Sorting and searching

Every sort takes any iterable and returns a new ascending list; the input is
left alone. `counting_sort` and `radix_sort` work on non-negative integers
only and raise `ValueError` for negative values.

```python
from dsalab.sorting import merge_sort, radix_sort
from dsalab.searching import binary_search, linear_search

data = merge_sort([5, 3, 9, 1])          # [1, 3, 5, 9]
binary_search(data, 9)                   # 3
binary_search(data, 4)                   # None
linear_search([7, 2, 7], 7)              # 2, the last occurrence
radix_sort([170, 45, 75, 90, 802, 24, 2, 66])
```

Both searches return an index, or `None` when the key is absent.
`binary_search` expects the sequence to be sorted ascending.

## Tower of Hanoi

`hanoi_moves` is a generator of `(from, to)` pairs. The peg names default to
`"A"`, `"B"` and `"C"`; a negative disk count raises `ValueError`.

```python
from dsalab.hanoi import hanoi_moves

for source, target in hanoi_moves(3, "A", "B", "C"):
    print(f"Move from {source} to {target}.")
```

## Stack and queues

`Stack(capacity=10)` is bounded: pushing onto a full stack raises
`StackOverflow` (an `OverflowError`), popping an empty one raises
`StackUnderflow` (an `IndexError`). `peek()` returns the index of the top
element, `-1` when empty. Iteration runs from bottom to top.

`LinearQueue` and `CircularQueue` are fixed-size array queues with a default
capacity of 3. They raise `QueueOverflow` and `QueueUnderflow`. A
`LinearQueue` never reuses slots freed at the front until it becomes empty
again; a `CircularQueue` wraps around into them.

```python
from dsalab.stack import Stack
from dsalab.queues import CircularQueue

stack = Stack()
stack.push(1)
stack.push(2)
stack.pop()          # 2

queue = CircularQueue()
queue.enqueue(10)
queue.enqueue(20)
queue.dequeue()      # 10
list(queue)          # [20]
```

## Linked lists

All three lists accept an optional iterable of initial values, support
`len()` and iteration, and raise `IndexError` when popping from an empty list.
Insertion and removal by key act on the first matching node and return
`False` when the key is not found.

- `SinglyLinkedList`: `append`, `prepend`, `insert_before`, `pop_front`,
  `pop_back`, `remove`.
- `DoublyLinkedList`: `push_front`, `push_back`, `insert_after`, `pop_front`,
  `pop_back`, `remove`, and `reversed()`. `insert_after` on an empty list
  simply adds the value.
- `CircularLinkedList`: `push_front`, `push_back`, `insert_after`,
  `pop_front`, `pop_back`, `remove`; iteration goes once around the circle.

`dsalab.reverse` works on bare `Node` chains and reverses them in place, either
iteratively or recursively.

```python
from dsalab.doubly_linked_list import DoublyLinkedList
from dsalab.reverse import from_iterable, reverse_iterative, to_list

items = DoublyLinkedList([1, 3])
items.insert_after(2, 1)
list(items)             # [1, 2, 3]
list(reversed(items))   # [3, 2, 1]

to_list(reverse_iterative(from_iterable([10, 20, 30, 40, 50])))
# [50, 40, 30, 20, 10]
```

## Trees and tries

The traversal functions in `dsalab.binary_tree` are generators over a
`TreeNode`. `level(root, depth)` yields the values at one depth, counting the
root as depth 1.

`BinarySearchTree` keeps each value once; `insert` returns `False` for a
duplicate. `is_bst(root)` checks that the in-order values of a `TreeNode`
strictly increase.

`Trie` stores words made only of the letters `a` to `z`; other characters
raise `ValueError`. `search` is true for stored words. `starts_with` is true
when the prefix begins a stored word but is not itself a stored word.

```python
from dsalab.binary_tree import TreeNode, level_order
from dsalab.bst import BinarySearchTree
from dsalab.trie import Trie

root = TreeNode(1, TreeNode(2), TreeNode(3))
list(level_order(root))      # [1, 2, 3]

tree = BinarySearchTree([100, 50, 150])
list(tree.inorder())         # [50, 100, 150]

trie = Trie(["abcd", "dog"])
trie.search("dog")           # True
trie.search("do")            # False
trie.starts_with("ab")       # True
trie.starts_with("dog")      # False
```

## Interactive menus

The `dsalab` command runs a numbered menu for one structure, named on the
command line:

```
dsalab stack
dsalab linear-queue
dsalab circular-queue
dsalab singly-linked-list
dsalab doubly-linked-list
dsalab circular-linked-list
dsalab bst
```

Enter the number of an operation at the prompt; the last number exits. The
stack and singly-linked-list menus ask after each operation whether to
continue (`y`/`n`). The `bst` menu starts with a tree holding `100` and
prints traversals with two decimals. End of input also ends the session.

## What it does not do

Everything lives in memory for one session: the menus do not save or load
structures, and the binary search tree and the linked lists offer no
balancing, searching by position or deletion beyond the operations listed
above.