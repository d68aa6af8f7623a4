"""Singly linked list of single characters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

EMPTY_MARK = "#"


@dataclass(eq=False)
class SNode:
    """A list cell holding one value and a link to its successor."""

    info: str
    next: Optional["SNode"] = field(default=None, repr=False)


class SinglyLinkedList:
    """A linked list whose cells know only their successor."""

    def __init__(self, values: Iterable[str] = ()) -> None:
        self.first: Optional[SNode] = None
        for value in values:
            self.insert_last(value)

    def __iter__(self) -> Iterator[str]:
        for node in self._nodes():
            yield node.info

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{value} " for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[SNode]:
        node = self.first
        while node is not None:
            yield node
            node = node.next

    def _last(self) -> Optional[SNode]:
        last = None
        for last in self._nodes():
            pass
        return last

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return self.first is None

    def insert_first(self, value: str) -> None:
        """Put a new element holding value at the front."""
        self.first = SNode(value, self.first)

    def insert_last(self, value: str) -> None:
        """Put a new element holding value at the back."""
        node = SNode(value)
        last = self._last()
        if last is None:
            self.first = node
        else:
            last.next = node

    def delete_first(self) -> str:
        """Remove the first element and return its value, or '#' if empty."""
        node = self.first
        if node is None:
            return EMPTY_MARK
        self.first = node.next
        node.next = None
        return node.info

    def delete_last(self) -> str:
        """Remove the last element and return its value, or '#' if empty."""
        previous: Optional[SNode] = None
        last: Optional[SNode] = None
        for node in self._nodes():
            previous, last = last, node
        if last is None:
            return EMPTY_MARK
        if previous is None:
            self.first = None
        else:
            previous.next = None
        return last.info

    def search(self, value: str) -> Optional[SNode]:
        """Return the first node holding value, or None."""
        return next((node for node in self._nodes() if node.info == value), None)

    def update(self, old: str, new: str) -> None:
        """Replace the first occurrence of old with new."""
        node = self.search(old)
        if node is not None:
            node.info = new

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        values = list(self)
        self.first = None
        for value in values:
            self.insert_first(value)

    def count(self, value: str) -> int:
        """Return how many elements equal value."""
        return sum(1 for item in self if item == value)

    def frequency(self, value: str) -> float:
        """Return the share of elements equal to value, 0.0 for an empty list."""
        total = len(self)
        if total == 0:
            return 0.0
        return self.count(value) / total

    def positions(self, value: str) -> List[int]:
        """Return the 1-based positions of every element equal to value."""
        return [index for index, item in enumerate(self, start=1) if item == value]

    def update_all(self, old: str, new: str) -> None:
        """Replace every element equal to old with new."""
        for node in self._nodes():
            if node.info == old:
                node.info = new

    def insert_after(self, target: str, value: str) -> None:
        """Insert value right after the first element equal to target."""
        node = self.search(target)
        if node is not None:
            node.next = SNode(value, node.next)

    def max_member(self) -> int:
        """Return how often the most frequent value occurs, 0 when empty."""
        return max((self.count(item) for item in self), default=0)

    def mode(self) -> Optional[str]:
        """Return the most frequent value, the earliest on ties; None when empty."""
        best: Optional[str] = None
        best_count = 0
        for item in self:
            occurrences = self.count(item)
            if occurrences > best_count:
                best, best_count = item, occurrences
        return best

    def concat(self, other: "SinglyLinkedList") -> "SinglyLinkedList":
        """Return a new list holding this list's elements followed by other's."""
        return SinglyLinkedList([*self, *other])

    def split(self) -> Tuple["SinglyLinkedList", "SinglyLinkedList"]:
        """Return two new lists: elements with an even character code, then odd."""
        values = list(self)
        even = SinglyLinkedList(v for v in values if ord(v) % 2 == 0)
        odd = SinglyLinkedList(v for v in values if ord(v) % 2 == 1)
        return even, odd

    def copy(self) -> "SinglyLinkedList":
        """Return an independent list with the same elements."""
        return SinglyLinkedList(self)