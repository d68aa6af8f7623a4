"""Binary trees of single characters built from linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

VOWELS = frozenset("aiueoAIUEO")
NO_LEAF = "#"


@dataclass
class Node:
    """A tree node holding one value and its left and right subtrees."""

    info: str
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def tree(info: str, left: Optional[Node] = None, right: Optional[Node] = None) -> Node:
    """Build a tree from a root value and two subtrees."""
    return Node(info, left, right)


def is_empty(root: Optional[Node]) -> bool:
    """Return True when the tree is empty."""
    return root is None


def is_leaf(root: Optional[Node]) -> bool:
    """Return True for a non-empty tree with no children."""
    return root is not None and root.left is None and root.right is None


def is_binary(root: Optional[Node]) -> bool:
    """Return True for a non-empty tree with both subtrees present."""
    return root is not None and root.left is not None and root.right is not None


def is_unary_left(root: Optional[Node]) -> bool:
    """Return True for a non-empty tree with only a left subtree."""
    return root is not None and root.left is not None and root.right is None


def is_unary_right(root: Optional[Node]) -> bool:
    """Return True for a non-empty tree with only a right subtree."""
    return root is not None and root.left is None and root.right is not None


def prefix(root: Optional[Node]) -> str:
    """Render the tree in full prefix form, empty subtrees shown as '()'."""
    if root is None:
        return "()"
    return f"{root.info}({prefix(root.left)},{prefix(root.right)})"


def prefix_compact(root: Optional[Node]) -> str:
    """Render the tree in compact prefix form, e.g. 'A(B(( ),D),C)'."""
    if root is None:
        return ""
    if is_leaf(root):
        return root.info
    parts = [root.info, "(", prefix_compact(root.left)]
    if is_unary_right(root):
        parts.append("( )")
    parts.append(",")
    if is_unary_left(root):
        parts.append("( )")
    parts.extend([prefix_compact(root.right), ")"])
    return "".join(parts)


def size(root: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + size(root.left) + size(root.right)


def leaf_count(root: Optional[Node]) -> int:
    """Return the number of leaves in the tree."""
    if root is None:
        return 0
    if is_leaf(root):
        return 1
    return leaf_count(root.left) + leaf_count(root.right)


def height(root: Optional[Node]) -> int:
    """Return the height of the tree; a single node has height 0, empty -1."""
    if root is None:
        return -1
    return 1 + max(height(root.left), height(root.right))


def contains(root: Optional[Node], value: str) -> bool:
    """Return True when some node holds value."""
    if root is None:
        return False
    return root.info == value or contains(root.left, value) or contains(root.right, value)


def update(root: Optional[Node], old: str, new: str) -> None:
    """Replace every value equal to old with new."""
    if root is None:
        return
    if root.info == old:
        root.info = new
    update(root.left, old, new)
    update(root.right, old, new)


def count(root: Optional[Node], value: str) -> int:
    """Return how many nodes hold value."""
    if root is None:
        return 0
    here = 1 if root.info == value else 0
    return here + count(root.left, value) + count(root.right, value)


def is_skew_left(root: Optional[Node]) -> bool:
    """Return True when no node of the tree has a right child."""
    while root is not None:
        if root.right is not None:
            return False
        root = root.left
    return True


def is_skew_right(root: Optional[Node]) -> bool:
    """Return True when no node of the tree has a left child."""
    while root is not None:
        if root.left is not None:
            return False
        root = root.right
    return True


def level_of(root: Optional[Node], value: str) -> int:
    """Return the level of the first node holding value (root is 1), or 0."""
    if root is None:
        return 0
    if root.info == value:
        return 1
    for child in (root.left, root.right):
        found = level_of(child, value)
        if found > 0:
            return found + 1
    return 0


def count_level(root: Optional[Node], level: int) -> int:
    """Return the number of nodes on the given level (root is level 1)."""
    if root is None or level < 1:
        return 0
    if level == 1:
        return 1
    return count_level(root.left, level - 1) + count_level(root.right, level - 1)


def leftmost_leaf(root: Optional[Node]) -> str:
    """Follow left links to a leaf and return its value, or '#' if none is reached."""
    while root is not None:
        if is_leaf(root):
            return root.info
        root = root.left
    return NO_LEAF


def frequency(root: Optional[Node], value: str) -> float:
    """Return the occurrence ratio of value, combined recursively over subtrees."""
    if root is None:
        return 0.0
    here = 1 if root.info == value else 0
    total = size(root)
    return (here + frequency(root.left, value) + frequency(root.right, value)) / total


def count_vowels(root: Optional[Node]) -> int:
    """Return how many nodes hold a vowel, either case."""
    if root is None:
        return 0
    here = 1 if root.info in VOWELS else 0
    return here + count_vowels(root.left) + count_vowels(root.right)


def mode(root: Optional[Node]) -> Optional[str]:
    """Return the most frequent value, preferring the root on ties; None if empty."""
    if root is None:
        return None
    best = root.info
    best_count = count(root, best)
    for child in (root.left, root.right):
        candidate = mode(child)
        if candidate is None:
            continue
        candidate_count = count(root, candidate)
        if candidate_count > best_count:
            best, best_count = candidate, candidate_count
    return best