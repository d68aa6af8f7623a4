"""Further operations on character binary trees: building, editing and search trees."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from charlinks.bintree import (
    Node,
    contains,
    is_binary,
    is_leaf,
    is_unary_left,
    is_unary_right,
    size,
)

MAX_START = "A"
MIN_START = "Z"


def indented(root: Optional[Node], depth: int = 0) -> str:
    """Render every node on its own line, prefixed by one '-' per depth level."""
    if root is None:
        return ""
    return (
        "\n"
        + "-" * depth
        + root.info
        + indented(root.left, depth + 1)
        + indented(root.right, depth + 1)
    )


def level_values(root: Optional[Node], level: int) -> List[str]:
    """Return the values on the given level (root is level 1), left to right."""
    if root is None or level < 1:
        return []
    if level == 1:
        return [root.info]
    return level_values(root.left, level - 1) + level_values(root.right, level - 1)


def build_balanced(n: int, values: Iterable[str]) -> Optional[Node]:
    """Build a balanced tree of n nodes, taking values in prefix order.

    Raises ValueError when n is negative or values run out.
    """
    if n < 0:
        raise ValueError("node count must not be negative")
    source: Iterator[str] = iter(values)

    def build(count: int) -> Optional[Node]:
        if count == 0:
            return None
        try:
            value = next(source)
        except StopIteration:
            raise ValueError("not enough values to build the tree") from None
        node = Node(value)
        node.left = build(count // 2)
        node.right = build(count // 2 if count % 2 == 1 else count // 2 - 1)
        return node

    return build(n)


def is_balanced(root: Optional[Node]) -> bool:
    """Return True when every node's subtrees differ in size by at most one."""
    if root is None:
        return True
    return (
        abs(size(root.left) - size(root.right)) <= 1
        and is_balanced(root.left)
        and is_balanced(root.right)
    )


def add_leftmost_leaf(root: Optional[Node], value: str) -> None:
    """Attach value as the new leftmost leaf; an empty tree is left as is."""
    if root is None:
        return
    while root.left is not None:
        root = root.left
    root.left = Node(value)


def add_leaf(root: Optional[Node], target: str, value: str, left: bool) -> None:
    """Give the leaf holding target a new child value, on the left or the right."""
    if root is None or not contains(root, target):
        return
    if is_leaf(root) and root.info == target:
        child = Node(value)
        if left:
            root.left = child
        else:
            root.right = child
    elif contains(root.left, target):
        add_leaf(root.left, target, value, left)
    else:
        add_leaf(root.right, target, value, left)


def insert(root: Optional[Node], value: str) -> Node:
    """Add value to the smaller side of the tree and return the root.

    Raises ValueError when value is already in the tree.
    """
    if contains(root, value):
        raise ValueError(f"{value!r} is already in the tree")
    return _insert(root, value)


def _insert(root: Optional[Node], value: str) -> Node:
    if root is None:
        return Node(value)
    if size(root.left) <= size(root.right):
        root.left = _insert(root.left, value)
    else:
        root.right = _insert(root.right, value)
    return root


def delete_leftmost_leaf(root: Optional[Node]) -> Tuple[Optional[Node], str]:
    """Remove the leftmost leaf; return the new root and the removed value.

    Raises ValueError when the tree is empty.
    """
    if root is None:
        raise ValueError("tree is empty")
    return _delete_leftmost(root)


def _delete_leftmost(root: Node) -> Tuple[Optional[Node], str]:
    if is_leaf(root):
        return None, root.info
    if root.left is not None:
        root.left, value = _delete_leftmost(root.left)
    else:
        assert root.right is not None
        root.right, value = _delete_leftmost(root.right)
    return root, value


def delete_leaf(root: Optional[Node], value: str) -> Optional[Node]:
    """Remove the leaf holding value and return the new root."""
    if root is None:
        return None
    if is_leaf(root) and root.info == value:
        return None
    if contains(root.left, value):
        root.left = delete_leaf(root.left, value)
    elif contains(root.right, value):
        root.right = delete_leaf(root.right, value)
    return root


def delete(root: Optional[Node], value: str) -> Optional[Node]:
    """Remove the first node holding value and return the new root.

    A node with two children takes values pulled up along its left spine;
    a node with one child is replaced by that child.
    """
    if root is None or not contains(root, value):
        return root
    if root.info == value:
        if is_unary_left(root) or is_leaf(root):
            return root.left
        if is_unary_right(root):
            return root.right
        while True:
            assert root.left is not None
            root.info = root.left.info
            if not is_binary(root.left):
                if is_unary_right(root.left):
                    root.left = root.left.right
                else:
                    root.left = root.left.left
                return root
            assert root.left.left is not None
            root.left.info = root.left.left.info
            root.left = root.left.left
    if contains(root.left, value):
        root.left = delete(root.left, value)
    else:
        root.right = delete(root.right, value)
    return root


def update_all(root: Optional[Node], old: str, new: str) -> None:
    """Replace every value equal to old with new."""
    if root is None:
        return
    if root.info == old:
        root.info = new
    update_all(root.left, old, new)
    update_all(root.right, old, new)


def max_value(root: Optional[Node]) -> str:
    """Return the largest value, never below 'A'."""
    best = MAX_START
    if root is not None:
        best = max(best, root.info, max_value(root.left), max_value(root.right))
    return best


def min_value(root: Optional[Node]) -> str:
    """Return the smallest value, never above 'Z'."""
    best = MIN_START
    if root is not None:
        best = min(best, root.info, min_value(root.left), min_value(root.right))
    return best


def bst_contains(root: Optional[Node], value: str) -> bool:
    """Return True when the search tree holds value."""
    while root is not None:
        if root.info == value:
            return True
        root = root.left if value < root.info else root.right
    return False


def bst_insert(root: Optional[Node], value: str) -> Node:
    """Insert value into the search tree, ignoring duplicates; return the root."""
    if root is None:
        return Node(value)
    if value < root.info:
        root.left = bst_insert(root.left, value)
    elif value > root.info:
        root.right = bst_insert(root.right, value)
    return root


def bst_delete(root: Optional[Node], value: str) -> Optional[Node]:
    """Remove value from the search tree and return the new root."""
    if root is None:
        return None
    if value < root.info:
        root.left = bst_delete(root.left, value)
    elif value > root.info:
        root.right = bst_delete(root.right, value)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.info = successor.info
        root.right = bst_delete(root.right, successor.info)
    return root