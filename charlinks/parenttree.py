"""Binary trees of characters whose nodes also link back to their parent."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from charlinks.slist import SinglyLinkedList


@dataclass(eq=False)
class PNode:
    """A tree node with a value, a visited flag and links to parent and children."""

    info: str
    parent: Optional["PNode"] = field(default=None, repr=False)
    visited: bool = False
    left: Optional["PNode"] = None
    right: Optional["PNode"] = None


def tree3(
    parent: Optional[PNode],
    info: str,
    visited: bool = False,
    left: Optional[PNode] = None,
    right: Optional[PNode] = None,
) -> PNode:
    """Build a node from its parts and make it the parent of both subtrees."""
    node = PNode(info, parent, visited, left, right)
    for child in (left, right):
        if child is not None:
            child.parent = node
    return node


def reset_visited(root: Optional[PNode]) -> None:
    """Clear the visited flag on every node of the tree."""
    for node in _preorder(root):
        node.visited = False


def is_empty(root: Optional[PNode]) -> bool:
    """Return True when the tree is empty."""
    return root is None


def is_leaf(root: Optional[PNode]) -> bool:
    """Return True for a non-empty tree with no children."""
    return root is not None and root.left is None and root.right is None


def is_binary(root: Optional[PNode]) -> bool:
    """Return True for a non-empty tree with both subtrees present."""
    return root is not None and root.left is not None and root.right is not None


def is_unary_left(root: Optional[PNode]) -> bool:
    """Return True for a non-empty tree with only a left subtree."""
    return root is not None and root.left is not None and root.right is None


def is_unary_right(root: Optional[PNode]) -> bool:
    """Return True for a non-empty tree with only a right subtree."""
    return root is not None and root.left is None and root.right is not None


def _preorder(root: Optional[PNode]) -> Iterator[PNode]:
    if root is not None:
        yield root
        yield from _preorder(root.left)
        yield from _preorder(root.right)


def _postorder(root: Optional[PNode]) -> Iterator[PNode]:
    if root is not None:
        yield from _postorder(root.left)
        yield from _postorder(root.right)
        yield root


def _inorder(root: Optional[PNode]) -> Iterator[PNode]:
    if root is not None:
        yield from _inorder(root.left)
        yield root
        yield from _inorder(root.right)


def _path_from_top(node: PNode) -> List[str]:
    path: List[str] = []
    current: Optional[PNode] = node
    while current is not None:
        path.append(current.info)
        current = current.parent
    path.reverse()
    return path


def dfs(root: Optional[PNode]) -> List[str]:
    """Return the values in depth-first (root, left, right) order."""
    return [node.info for node in _preorder(root)]


def paths_to(root: Optional[PNode], value: str) -> List[List[str]]:
    """Return, for each node holding value, the path from the topmost ancestor to it.

    The search does not descend below a matching node.
    """
    if root is None:
        return []
    if root.info == value:
        return [_path_from_top(root)]
    return paths_to(root.left, value) + paths_to(root.right, value)


def leaf_paths_to(root: Optional[PNode], value: str) -> List[List[str]]:
    """Return the paths from the topmost ancestor to every leaf holding value."""
    return [
        _path_from_top(node)
        for node in _preorder(root)
        if is_leaf(node) and node.info == value
    ]


def all_paths(root: Optional[PNode]) -> List[List[str]]:
    """Return the path from the topmost ancestor to every leaf, left to right."""
    return [_path_from_top(node) for node in _preorder(root) if is_leaf(node)]


def size(root: Optional[PNode]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _preorder(root))


def leaf_count(root: Optional[PNode]) -> int:
    """Return the number of leaves in the tree."""
    return sum(1 for node in _preorder(root) if is_leaf(node))


def max2(a: int, b: int) -> int:
    """Return the larger of a and b."""
    return a if a > b else b


def height(root: Optional[PNode]) -> int:
    """Return the number of levels: 0 for an empty tree, 1 for a single node."""
    if root is None:
        return 0
    return 1 + max2(height(root.left), height(root.right))


def level(root: Optional[PNode]) -> int:
    """Return the deepest generation of the tree, the root being generation 1."""
    if root is None:
        return 0
    if is_leaf(root):
        return 1
    return 1 + max2(level(root.left), level(root.right))


def count_level(root: Optional[PNode], level: int) -> int:
    """Return the number of nodes on the given level (root is level 1)."""
    return len(level_values(root, level))


def level_values(root: Optional[PNode], level: int) -> List[str]:
    """Return the values on the given level (root is level 1), left to right."""
    if root is None or level < 1:
        return []
    if level == 1:
        return [root.info]
    return level_values(root.left, level - 1) + level_values(root.right, level - 1)


def bfs(root: Optional[PNode]) -> List[str]:
    """Return the values level by level, from the root down."""
    return [value for depth in range(1, level(root) + 1) for value in level_values(root, depth)]


def pconcat(original: SinglyLinkedList, extra: SinglyLinkedList) -> None:
    """Link the cells of extra onto the end of original; the cells are shared."""
    last = original.first
    if last is None:
        original.first = extra.first
        return
    while last.next is not None:
        last = last.next
    last.next = extra.first


def fconcat(original: SinglyLinkedList, extra: SinglyLinkedList) -> SinglyLinkedList:
    """Return a new list of original's values followed by extra's; both stay unchanged."""
    return SinglyLinkedList([*original, *extra])


def linear_prefix(root: Optional[PNode]) -> SinglyLinkedList:
    """Return the values in prefix order (root, left, right) as a list."""
    return SinglyLinkedList(node.info for node in _preorder(root))


def linear_postfix(root: Optional[PNode]) -> SinglyLinkedList:
    """Return the values in postfix order (left, right, root) as a list."""
    return SinglyLinkedList(node.info for node in _postorder(root))


def linear_infix(root: Optional[PNode]) -> SinglyLinkedList:
    """Return the values in infix order (left, root, right) as a list."""
    return SinglyLinkedList(node.info for node in _inorder(root))


def level_list(root: Optional[PNode], level: int) -> SinglyLinkedList:
    """Return the values on the given level as a list."""
    return SinglyLinkedList(level_values(root, level))


def linear_bfs(root: Optional[PNode]) -> SinglyLinkedList:
    """Return the values level by level as a list."""
    result = SinglyLinkedList()
    for depth in range(1, height(root) + 1):
        pconcat(result, level_list(root, depth))
    return result