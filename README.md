# charlinks

Small, readable data structures holding single characters:

- `charlinks.dlist` – `DoublyLinkedList` with insertion and removal at either
  end, around a target value, search, update and in-place reversal.
- `charlinks.dliststats` – counting, frequency, mode, vowel and "NG" counts,
  positions, concatenation, splitting and copying for doubly linked lists.
- `charlinks.slist` – `SinglyLinkedList` with the same basics plus counting,
  frequency, mode, `insert_after`, `concat`, `split` and `copy`.
- `charlinks.bintree` – a plain binary tree of `Node` objects: predicates,
  prefix rendering, size, height, levels, counting and search.
- `charlinks.treeops` – further tree operations: indented rendering, balanced
  building, leaf insertion and removal, node deletion, and binary search tree
  insert, lookup and delete.
- `charlinks.parenttree` – trees whose `PNode` nodes know their parent, with
  root-to-node paths, breadth-first order and prefix, infix and postfix
  linearisation.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from charlinks.dlist import DoublyLinkedList
from charlinks import dliststats

letters = DoublyLinkedList("MANDA")
print(letters)                             # List: M A N D A
print(dliststats.positions(letters, "A"))  # [2, 5]
letters.reverse()
print(list(letters))                       # ['A', 'D', 'N', 'A', 'M']
```

```python
from charlinks.bintree import tree, prefix, height

root = tree("A", tree("B", None, None), tree("C", None, None))
print(prefix(root))   # A(B((),()),C((),()))
print(height(root))   # 1
```

```python
from charlinks import treeops

root = None
for ch in "DBFACEG":
    root = treeops.bst_insert(root, ch)
print(treeops.bst_contains(root, "E"))  # True
```

## What it does not do

`charlinks` is a library only. It installs no command and has no interactive
walkthrough; nothing reads from the keyboard. Where values are needed, such as
for `treeops.build_balanced`, they are passed in as an iterable.