import pytest

from charlinks.dlist import DNode, DoublyLinkedList


def backward(lst):
    """Walk the prev links from the last node back to the first."""
    node = lst.first
    if node is None:
        return []
    while node.next is not None:
        node = node.next
    values = []
    while node is not None:
        values.append(node.info)
        node = node.prev
    return values


def assert_consistent(lst):
    assert backward(lst) == list(reversed(list(lst)))
    if lst.first is not None:
        assert lst.first.prev is None


def test_empty_list():
    lst = DoublyLinkedList()
    assert lst.is_empty()
    assert len(lst) == 0
    assert str(lst) == "List Kosong"


def test_construct_preserves_order():
    lst = DoublyLinkedList("RAJWA")
    assert list(lst) == list("RAJWA")
    assert len(lst) == 5
    assert not lst.is_empty()
    assert_consistent(lst)


def test_str_format():
    lst = DoublyLinkedList("AB")
    assert str(lst) == "List: A B "


def test_insert_first_reverses_order():
    lst = DoublyLinkedList()
    for ch in "AAWJAR":
        lst.insert_first(ch)
    assert list(lst) == list(reversed("AAWJAR"))
    assert_consistent(lst)


def test_insert_last_appends():
    lst = DoublyLinkedList("XY")
    lst.insert_last("Z")
    assert list(lst) == ["X", "Y", "Z"]
    assert_consistent(lst)


def test_delete_first_and_last():
    lst = DoublyLinkedList("RAJ")
    assert lst.delete_first() == "R"
    assert lst.delete_last() == "J"
    assert list(lst) == ["A"]
    assert lst.delete_last() == "A"
    assert lst.is_empty()
    assert_consistent(lst)


def test_delete_on_empty_returns_mark():
    lst = DoublyLinkedList()
    assert lst.delete_first() == "#"
    assert lst.delete_last() == "#"


def test_delete_removes_first_occurrence_only():
    lst = DoublyLinkedList("ABAB")
    lst.delete("A")
    assert list(lst) == list("BAB")
    lst.delete("Q")
    assert list(lst) == list("BAB")
    assert_consistent(lst)


def test_delete_last_element_value():
    lst = DoublyLinkedList("ABC")
    lst.delete("C")
    assert list(lst) == list("AB")
    assert_consistent(lst)


def test_search():
    lst = DoublyLinkedList("MANDA")
    node = lst.search("A")
    assert isinstance(node, DNode)
    assert node is lst.first.next
    assert lst.search("J") is None


def test_update_first_only():
    lst = DoublyLinkedList("AXA")
    lst.update("A", "Z")
    assert list(lst) == list("ZXA")
    lst.update("Q", "W")
    assert list(lst) == list("ZXA")


def test_reverse():
    lst = DoublyLinkedList("RAJWAA")
    lst.reverse()
    assert list(lst) == list(reversed("RAJWAA"))
    assert_consistent(lst)


def test_reverse_empty():
    lst = DoublyLinkedList()
    lst.reverse()
    assert lst.is_empty()


def test_insert_after():
    lst = DoublyLinkedList("BAC")
    lst.insert_after("A", "O")
    assert list(lst) == list("BAOC")
    lst.insert_after("C", "E")
    assert list(lst)[-1] == "E"
    lst.insert_after("Q", "R")
    assert len(lst) == 5
    assert_consistent(lst)


def test_insert_before():
    lst = DoublyLinkedList("BAC")
    lst.insert_before("A", "U")
    assert list(lst) == list("BUAC")
    lst.insert_before("B", "S")
    assert lst.first.info == "S"
    lst.insert_before("Q", "R")
    assert len(lst) == 5
    assert_consistent(lst)


def test_delete_after():
    lst = DoublyLinkedList("BAOC")
    assert lst.delete_after("A") == "O"
    assert list(lst) == list("BAC")
    assert lst.delete_after("C") is None
    assert lst.delete_after("Q") is None
    assert list(lst) == list("BAC")
    assert_consistent(lst)


def test_delete_before():
    lst = DoublyLinkedList("BUAC")
    assert lst.delete_before("A") == "U"
    assert list(lst) == list("BAC")
    assert lst.delete_before("A") == "B"
    assert lst.first.info == "A"
    assert_consistent(lst)


def test_delete_before_first_element_raises():
    lst = DoublyLinkedList("AB")
    with pytest.raises(ValueError):
        lst.delete_before("A")
    assert list(lst) == list("AB")


def test_delete_before_missing_raises():
    with pytest.raises(ValueError):
        DoublyLinkedList("AB").delete_before("Z")


def test_delete_before_empty_raises():
    with pytest.raises(ValueError):
        DoublyLinkedList().delete_before("A")


def test_insert_then_delete_round_trip():
    values = "HELLO"
    lst = DoublyLinkedList()
    for ch in values:
        lst.insert_last(ch)
    removed = [lst.delete_first() for _ in values]
    assert "".join(removed) == values
    assert lst.is_empty()