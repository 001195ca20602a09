import pytest

from fdf.chain import LinkedList, Node


def test_empty_list():
    chain = LinkedList()
    assert len(chain) == 0
    assert list(chain) == []
    assert chain.last() is None


def test_push_back_keeps_order():
    chain = LinkedList()
    for value in ["a", "b", "c"]:
        chain.push_back(value)
    assert list(chain) == ["a", "b", "c"]
    assert len(chain) == 3


def test_push_front_reverses_order():
    chain = LinkedList()
    for value in [1, 2, 3]:
        chain.push_front(value)
    assert list(chain) == [3, 2, 1]


def test_push_returns_node():
    chain = LinkedList()
    node = chain.push_back(7)
    assert isinstance(node, Node)
    assert node.value == 7
    assert chain.last() is node


def test_last_is_tail():
    chain = LinkedList([1, 2, 3])
    assert chain.last().value == 3
    assert chain.last().next is None


def test_pop_front_calls_delete():
    deleted = []
    chain = LinkedList(["x", "y"])
    value = chain.pop_front(deleted.append)
    assert value == "x"
    assert deleted == ["x"]
    assert list(chain) == ["y"]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_in_order():
    deleted = []
    values = [4, 5, 6]
    chain = LinkedList(values)
    chain.clear(deleted.append)
    assert deleted == values
    assert len(chain) == 0
    assert chain.head is None


def test_for_each_visits_all():
    seen = []
    chain = LinkedList([10, 20])
    chain.for_each(seen.append)
    assert seen == [10, 20]


def test_map_builds_new_list():
    chain = LinkedList(["ab", "cde"])
    mapped = chain.map(len)
    assert list(mapped) == [len("ab"), len("cde")]
    assert list(chain) == ["ab", "cde"]


def test_map_failure_deletes_partial_result():
    deleted = []

    def transform(value):
        if value == "bad":
            raise ValueError(value)
        return value.upper()

    chain = LinkedList(["ok", "fine", "bad", "never"])
    with pytest.raises(ValueError):
        chain.map(transform, deleted.append)
    assert deleted == ["OK", "FINE"]


def test_map_empty():
    mapped = LinkedList().map(str)
    assert len(mapped) == 0


def test_len_matches_iteration():
    chain = LinkedList(range(5))
    chain.push_front(-1)
    assert len(chain) == len(list(chain))