import pytest

from cityroutes.errors import BadIterator
from cityroutes.linkedlist import LinkedList, ListIterator


def test_new_list_is_empty():
    lst = LinkedList()
    assert lst.is_empty()
    assert len(lst) == 0
    assert lst.first().is_past_end()


def test_items_kept_in_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3
    assert not lst.is_empty()


def test_insert_at_zeroth_prepends():
    lst = LinkedList([2, 3])
    lst.insert(1, lst.zeroth())
    assert list(lst) == [1, 2, 3]


def test_insert_after_found_position():
    lst = LinkedList(["a", "c"])
    lst.insert("b", lst.find("a"))
    assert list(lst) == ["a", "b", "c"]


def test_insert_past_end_does_nothing():
    lst = LinkedList(["a"])
    lst.insert("z", lst.find("missing"))
    assert list(lst) == ["a"]


def test_find_present_and_missing():
    lst = LinkedList(["x", "y", "z"])
    assert lst.find("y").retrieve() == "y"
    assert lst.find("q").is_past_end()


def test_find_previous():
    lst = LinkedList(["x", "y", "z"])
    assert lst.find_previous("y").retrieve() == "x"
    assert lst.find_previous("missing").retrieve() == "z"


def test_retrieve_past_end_raises():
    with pytest.raises(BadIterator):
        LinkedList().first().retrieve()
    with pytest.raises(BadIterator):
        ListIterator().retrieve()


def test_advance_walks_and_stops():
    lst = LinkedList([1, 2])
    it = lst.first()
    collected = []
    while not it.is_past_end():
        collected.append(it.retrieve())
        it.advance()
    it.advance()
    assert collected == [1, 2]
    assert it.is_past_end()


def test_remove_first_occurrence_only():
    lst = LinkedList([1, 2, 1, 3])
    lst.remove(1)
    assert list(lst) == [2, 1, 3]


def test_remove_missing_is_harmless():
    lst = LinkedList([1, 2])
    lst.remove(9)
    assert list(lst) == [1, 2]


def test_make_empty():
    lst = LinkedList([1, 2, 3])
    lst.make_empty()
    assert lst.is_empty()
    assert list(lst) == []


def test_copy_is_independent():
    original = LinkedList(["a", "b"])
    duplicate = original.copy()
    duplicate.remove("a")
    duplicate.insert("z", duplicate.zeroth())
    assert list(original) == ["a", "b"]
    assert list(duplicate) == ["z", "b"]