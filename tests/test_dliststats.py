import pytest

from charlinks import dliststats
from charlinks.dlist import DoublyLinkedList


def make(text):
    return DoublyLinkedList(text)


def test_count_and_positions_example():
    lst = make("MANDA")
    assert dliststats.count(lst, "A") == 2
    assert dliststats.positions(lst, "A") == [2, 5]
    assert dliststats.positions(lst, "J") == []
    assert dliststats.count(lst, "J") == 0


@pytest.mark.parametrize("text", ["MANDA", "AAAB", "X"])
def test_frequency_is_count_over_length(text):
    lst = make(text)
    for value in set(text):
        assert dliststats.frequency(lst, value) == pytest.approx(
            dliststats.count(lst, value) / len(text)
        )


def test_frequency_empty():
    assert dliststats.frequency(make(""), "A") == 0.0


@pytest.mark.parametrize("text", ["RAJWAAKHSA", "ABAB", "Z"])
def test_max_member_and_mode_agree(text):
    lst = make(text)
    best = dliststats.max_member(lst)
    assert best == max(dliststats.count(lst, v) for v in text)
    assert dliststats.count(lst, dliststats.mode(lst)) == best


def test_mode_tie_prefers_earliest():
    assert dliststats.mode(make("ABAB")) == "A"
    assert dliststats.mode(make("BABA")) == "B"


def test_empty_mode_and_max_member():
    assert dliststats.mode(make("")) == "-"
    assert dliststats.max_member(make("")) == 0


def test_count_vowels():
    assert dliststats.count_vowels(make("aiueoAIUEO")) == len("aiueoAIUEO")
    assert dliststats.count_vowels(make("BCDXYZ")) == 0


def test_count_ng():
    assert dliststats.count_ng(make("NGANG")) == 2
    assert dliststats.count_ng(make("ng")) == 0
    assert dliststats.count_ng(make("GN")) == 0


def test_delete_all_removes_every_match():
    text = "RAJWAAKHSA"
    lst = make(text)
    dliststats.delete_all(lst, "A")
    assert dliststats.count(lst, "A") == 0
    assert list(lst) == [c for c in text if c != "A"]


def test_delete_all_can_empty_list():
    lst = make("AAA")
    dliststats.delete_all(lst, "A")
    assert lst.is_empty()


def test_concat_builds_new_list():
    first, second = make("RAS"), make("JW")
    joined = dliststats.concat(first, second)
    assert list(joined) == list(first) + list(second)
    joined.insert_last("Q")
    assert list(first) == list("RAS")
    assert list(second) == list("JW")


@pytest.mark.parametrize("text", ["", "A", "RASJW", "ABCD"])
def test_split_halves(text):
    lst = make(text)
    left, right = dliststats.split(lst)
    assert list(left) + list(right) == list(lst)
    assert len(left) == len(text) // 2


def test_copy_is_independent():
    original = make("RAS")
    duplicate = dliststats.copy(original)
    assert list(duplicate) == list(original)
    duplicate.delete_first()
    assert list(original) == list("RAS")
    assert len(duplicate) == len(original) - 1