"""Counting, searching and whole-list operations on doubly linked lists."""

from __future__ import annotations

from typing import List, Tuple

from charlinks.dlist import DoublyLinkedList

VOWELS = frozenset("AIUEOaiueo")
NO_MODE = "-"


def count(lst: DoublyLinkedList, value: str) -> int:
    """Return how many elements equal value."""
    return sum(1 for item in lst if item == value)


def frequency(lst: DoublyLinkedList, value: str) -> float:
    """Return the share of elements equal to value, 0.0 for an empty list."""
    total = len(lst)
    if total == 0:
        return 0.0
    return count(lst, value) / total


def max_member(lst: DoublyLinkedList) -> int:
    """Return how often the most frequent value occurs, 0 for an empty list."""
    return max((count(lst, item) for item in lst), default=0)


def mode(lst: DoublyLinkedList) -> str:
    """Return the most frequent value, the earliest on ties, or '-' when empty."""
    best, best_count = NO_MODE, 0
    for item in lst:
        occurrences = count(lst, item)
        if occurrences > best_count:
            best, best_count = item, occurrences
    return best


def count_vowels(lst: DoublyLinkedList) -> int:
    """Return how many elements are vowels, either case."""
    return sum(1 for item in lst if item in VOWELS)


def count_ng(lst: DoublyLinkedList) -> int:
    """Return how many times 'N' is directly followed by 'G'."""
    values = list(lst)
    return sum(1 for a, b in zip(values, values[1:]) if a == "N" and b == "G")


def positions(lst: DoublyLinkedList, value: str) -> List[int]:
    """Return the 1-based positions of every element equal to value."""
    return [index for index, item in enumerate(lst, start=1) if item == value]


def delete_all(lst: DoublyLinkedList, value: str) -> None:
    """Remove every element equal to value."""
    for _ in range(count(lst, value)):
        lst.delete(value)


def concat(first: DoublyLinkedList, second: DoublyLinkedList) -> DoublyLinkedList:
    """Return a new list holding the elements of first followed by second."""
    return DoublyLinkedList([*first, *second])


def split(lst: DoublyLinkedList) -> Tuple[DoublyLinkedList, DoublyLinkedList]:
    """Return two new lists: the first half (rounded down) and the rest."""
    values = list(lst)
    middle = len(values) // 2
    return DoublyLinkedList(values[:middle]), DoublyLinkedList(values[middle:])


def copy(lst: DoublyLinkedList) -> DoublyLinkedList:
    """Return an independent list with the same elements."""
    return DoublyLinkedList(lst)