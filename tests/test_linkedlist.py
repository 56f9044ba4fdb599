import pytest

from ftlib.linkedlist import LinkedList, Node


def test_build_from_items_keeps_order():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_add_front_prepends():
    lst = LinkedList(["b"])
    node = lst.add_front("a")
    assert lst.head is node
    assert list(lst) == ["a", "b"]


def test_add_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.add_back("x")
    assert lst.head is node
    assert lst.last() is node


def test_add_back_appends():
    lst = LinkedList([1])
    lst.add_back(2)
    lst.add_back(3)
    assert list(lst) == [1, 2, 3]
    assert lst.last().content == 3


def test_last_has_no_next():
    lst = LinkedList(range(5))
    tail = lst.last()
    assert tail.next is None
    assert tail.content == 4


def test_node_delete_calls_deleter():
    released = []
    node = Node("data", Node("other"))
    node.delete(released.append)
    assert released == ["data"]
    assert node.next is None


def test_clear_releases_every_content_in_order():
    released = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(released.append)
    assert released == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_deleter():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_all():
    seen = []
    LinkedList([3, 1, 2]).iterate(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list_and_leaves_original():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_map_failure_releases_partial_results():
    released = []

    def f(x):
        if x == 3:
            raise ValueError("bad item")
        return x * 2

    with pytest.raises(ValueError):
        LinkedList([1, 2, 3, 4]).map(f, released.append)
    assert released == [2, 4]


def test_len_matches_iteration_after_mixed_adds():
    lst = LinkedList()
    for i in range(4):
        lst.add_back(i)
        lst.add_front(-i)
    assert len(lst) == len(list(lst)) == 8