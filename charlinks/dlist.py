"""Doubly linked list of single characters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

EMPTY_MARK = "#"


@dataclass(eq=False)
class DNode:
    """A list cell holding one value and links to both neighbours."""

    info: str
    prev: Optional["DNode"] = field(default=None, repr=False)
    next: Optional["DNode"] = field(default=None, repr=False)


class DoublyLinkedList:
    """A linked list whose cells know both their predecessor and successor."""

    def __init__(self, values: Iterable[str] = ()) -> None:
        self.first: Optional[DNode] = None
        for value in values:
            self.insert_last(value)

    def __iter__(self) -> Iterator[str]:
        node = self.first
        while node is not None:
            yield node.info
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        if self.is_empty():
            return "List Kosong"
        return "List: " + "".join(f"{value} " for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return self.first is None

    def _nodes(self) -> Iterator[DNode]:
        node = self.first
        while node is not None:
            yield node
            node = node.next

    def _last(self) -> Optional[DNode]:
        last = None
        for last in self._nodes():
            pass
        return last

    def _find(self, value: str) -> Optional[DNode]:
        return next((node for node in self._nodes() if node.info == value), None)

    def _unlink(self, node: DNode) -> str:
        if node.prev is None:
            self.first = node.next
        else:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        node.prev = node.next = None
        return node.info

    def insert_first(self, value: str) -> None:
        """Put a new element holding value at the front."""
        node = DNode(value, None, self.first)
        if self.first is not None:
            self.first.prev = node
        self.first = node

    def insert_last(self, value: str) -> None:
        """Put a new element holding value at the back."""
        node = DNode(value)
        last = self._last()
        if last is None:
            self.first = node
        else:
            last.next = node
            node.prev = last

    def delete_first(self) -> str:
        """Remove the first element and return its value, or '#' if empty."""
        if self.first is None:
            return EMPTY_MARK
        return self._unlink(self.first)

    def delete_last(self) -> str:
        """Remove the last element and return its value, or '#' if empty."""
        last = self._last()
        if last is None:
            return EMPTY_MARK
        return self._unlink(last)

    def delete(self, value: str) -> None:
        """Remove the first element equal to value, if any."""
        node = self._find(value)
        if node is not None:
            self._unlink(node)

    def search(self, value: str) -> Optional[DNode]:
        """Return the first node holding value, or None."""
        return self._find(value)

    def update(self, old: str, new: str) -> None:
        """Replace the first occurrence of old with new."""
        node = self._find(old)
        if node is not None:
            node.info = new

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        values = list(self)
        self.first = None
        for value in values:
            self.insert_first(value)

    def insert_after(self, target: str, value: str) -> None:
        """Insert value right after the first element equal to target."""
        node = self._find(target)
        if node is None:
            return
        new = DNode(value, node, node.next)
        if node.next is not None:
            node.next.prev = new
        node.next = new

    def insert_before(self, target: str, value: str) -> None:
        """Insert value right before the first element equal to target."""
        node = self._find(target)
        if node is None:
            return
        new = DNode(value, node.prev, node)
        if node.prev is None:
            self.first = new
        else:
            node.prev.next = new
        node.prev = new

    def delete_after(self, target: str) -> Optional[str]:
        """Remove the element following the first target; return its value or None."""
        node = self._find(target)
        if node is None or node.next is None:
            return None
        return self._unlink(node.next)

    def delete_before(self, target: str) -> str:
        """Remove the element preceding the first target and return its value.

        Raises ValueError when the list is empty or no such element exists.
        """
        if self.first is None:
            raise ValueError("list is empty")
        node = self._find(target)
        if node is None or node.prev is None:
            raise ValueError(f"no element before {target!r} in list")
        return self._unlink(node.prev)