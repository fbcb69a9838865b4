import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.circular import CircularDoublyLinkedList, CircularSinglyLinkedList

KINDS = ["singly", "doubly"]


@pytest.mark.parametrize("kind", KINDS)
def test_source_example(kind):
    lst = CircularSinglyLinkedList() if kind == "singly" else CircularDoublyLinkedList()
    lst.insert_at_beginning(10)
    lst.insert_at_beginning(5)
    lst.insert_at_end(20)
    assert str(lst) == "5 10 20"
    lst.delete(10)
    assert str(lst) == "5 20"


@pytest.mark.parametrize("kind", KINDS)
@given(values=st.lists(st.integers()))
def test_construction_round_trip(kind, values):
    if kind == "singly":
        lst = CircularSinglyLinkedList(values)
    else:
        lst = CircularDoublyLinkedList(values)
    assert list(lst) == values
    assert len(lst) == len(values)


@pytest.mark.parametrize("kind", KINDS)
def test_empty_list(kind):
    lst = CircularSinglyLinkedList() if kind == "singly" else CircularDoublyLinkedList()
    lst.delete(1)
    assert list(lst) == []
    assert str(lst) == ""


@pytest.mark.parametrize("kind", KINDS)
def test_delete_only_element(kind):
    if kind == "singly":
        lst = CircularSinglyLinkedList([7])
    else:
        lst = CircularDoublyLinkedList([7])
    lst.delete(7)
    assert len(lst) == 0
    assert list(lst) == []
    lst.insert_at_end(8)
    assert list(lst) == [8]


@pytest.mark.parametrize("kind", KINDS)
def test_delete_head(kind):
    if kind == "singly":
        lst = CircularSinglyLinkedList([1, 2, 3])
    else:
        lst = CircularDoublyLinkedList([1, 2, 3])
    lst.delete(1)
    assert list(lst) == [2, 3]
    lst.insert_at_beginning(0)
    assert list(lst) == [0, 2, 3]


@pytest.mark.parametrize("kind", KINDS)
def test_delete_tail_then_append(kind):
    if kind == "singly":
        lst = CircularSinglyLinkedList([1, 2, 3])
    else:
        lst = CircularDoublyLinkedList([1, 2, 3])
    lst.delete(3)
    assert list(lst) == [1, 2]
    lst.insert_at_end(4)
    assert list(lst) == [1, 2, 4]


@pytest.mark.parametrize("kind", KINDS)
def test_delete_first_occurrence_only(kind):
    if kind == "singly":
        lst = CircularSinglyLinkedList([2, 5, 2, 5])
    else:
        lst = CircularDoublyLinkedList([2, 5, 2, 5])
    lst.delete(5)
    assert list(lst) == [2, 2, 5]


@pytest.mark.parametrize("kind", KINDS)
def test_delete_missing_key_changes_nothing(kind):
    if kind == "singly":
        lst = CircularSinglyLinkedList([1, 2, 3])
    else:
        lst = CircularDoublyLinkedList([1, 2, 3])
    lst.delete(9)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_doubly_reversed():
    lst = CircularDoublyLinkedList([1, 2, 3])
    lst.insert_at_beginning(0)
    assert list(reversed(lst)) == [3, 2, 1, 0]
    lst.delete(3)
    assert list(reversed(lst)) == [2, 1, 0]


def test_doubly_reversed_empty():
    assert list(reversed(CircularDoublyLinkedList())) == []


@pytest.mark.parametrize("kind", KINDS)
@given(
    operations=st.lists(
        st.tuples(
            st.sampled_from(["begin", "end", "delete"]),
            st.integers(min_value=0, max_value=4),
        )
    )
)
def test_operations_keep_structure_consistent(kind, operations):
    lst = CircularSinglyLinkedList() if kind == "singly" else CircularDoublyLinkedList()
    for name, argument in operations:
        before = list(lst)
        if name == "begin":
            lst.insert_at_beginning(argument)
            assert list(lst) == [argument, *before]
        elif name == "end":
            lst.insert_at_end(argument)
            assert list(lst) == [*before, argument]
        else:
            lst.delete(argument)
            if argument in before:
                assert len(lst) == len(before) - 1
                assert sorted(list(lst) + [argument]) == sorted(before)
            else:
                assert list(lst) == before
        assert len(list(lst)) == len(lst)
        if isinstance(lst, CircularDoublyLinkedList):
            assert list(reversed(lst)) == list(lst)[::-1]