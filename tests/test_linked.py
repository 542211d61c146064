import pytest

from cubkit.linked import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_build_from_items_keeps_order():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_push_front_reverses():
    lst = LinkedList()
    for item in [1, 2, 3]:
        lst.push_front(item)
    assert list(lst) == [3, 2, 1]


def test_push_back_appends():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert list(lst) == [1, 2]
    assert lst.last() is node
    assert node.content == 2


def test_push_front_returns_head():
    lst = LinkedList([5])
    node = lst.push_front(4)
    assert lst.head is node
    assert node.next.content == 5


def test_last_node():
    lst = LinkedList(["x", "y", "z"])
    tail = lst.last()
    assert tail.content == "z"
    assert tail.next is None


def test_node_links():
    second = Node("second")
    first = Node("first", second)
    assert first.next is second
    assert second.next is None


def test_clear_calls_delete_in_order():
    items = [10, 20, 30]
    lst = LinkedList(items)
    deleted = []
    lst.clear(deleted.append)
    assert deleted == items
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_all():
    items = ["p", "q", "r"]
    lst = LinkedList(items)
    seen = []
    lst.for_each(seen.append)
    assert seen == items


def test_map_builds_new_list():
    items = [1, 2, 3]
    lst = LinkedList(items)
    mapped = lst.map(lambda x: x * 10)
    assert list(mapped) == [x * 10 for x in items]
    assert list(lst) == items
    assert mapped is not lst


def test_map_of_empty_list():
    mapped = LinkedList().map(str)
    assert len(mapped) == 0


def test_map_failure_deletes_produced_contents():
    lst = LinkedList([1, 2, 3, 4])
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 2

    with pytest.raises(RuntimeError):
        lst.map(f, deleted.append)
    assert deleted == [2, 4]
    assert list(lst) == [1, 2, 3, 4]


def test_len_matches_iteration():
    lst = LinkedList(range(7))
    lst.push_front(-1)
    lst.push_back(99)
    assert len(lst) == len(list(lst))
    assert list(lst)[0] == -1
    assert lst.last().content == 99