import pytest

from dsakit.doubly_linked_list import DoublyLinkedList


def build(*values):
    dll = DoublyLinkedList(values[0])
    for value in values[1:]:
        dll.append(value)
    return dll


def assert_consistent(dll):
    forward = list(dll)
    assert list(reversed(dll)) == forward[::-1]
    assert len(dll) == len(forward)
    if forward:
        assert dll.head.prev is None
        assert dll.tail.next is None
        assert dll.head.value == forward[0]
        assert dll.tail.value == forward[-1]
    else:
        assert dll.head is None and dll.tail is None


def test_constructor_describe():
    dll = DoublyLinkedList(7)
    assert dll.describe() == "Head: 7\nTail: 7\nLength: 1"
    assert list(dll) == [7]


def test_append_describe():
    dll = DoublyLinkedList(1)
    dll.append(2)
    assert dll.describe() == "Head: 1\nTail: 2\nLength: 2"
    assert list(dll) == [1, 2]
    assert_consistent(dll)


def test_delete_last_until_empty():
    dll = build(1, 2)
    assert dll.delete_last().value == 2
    assert list(dll) == [1]
    assert dll.delete_last().value == 1
    assert list(dll) == []
    assert dll.delete_last() is None
    assert len(dll) == 0
    assert dll.describe() == "Head: None\nTail: None\nLength: 0"


def test_prepend():
    dll = build(2, 3)
    assert dll.describe() == "Head: 2\nTail: 3\nLength: 2"
    dll.prepend(1)
    assert list(dll) == [1, 2, 3]
    assert dll.describe() == "Head: 1\nTail: 3\nLength: 3"
    assert_consistent(dll)


def test_prepend_on_empty():
    dll = DoublyLinkedList(1)
    dll.delete_first()
    dll.prepend(5)
    assert list(dll) == [5]
    assert_consistent(dll)


def test_delete_first_until_empty():
    dll = build(2, 1)
    assert dll.delete_first().value == 2
    assert list(dll) == [1]
    assert_consistent(dll)
    assert dll.delete_first().value == 1
    assert list(dll) == []
    assert dll.delete_first() is None
    assert_consistent(dll)


def test_get_both_halves():
    dll = build(0, 1, 2, 3)
    assert dll.get(1).value == 1
    assert dll.get(2).value == 2
    assert [dll.get(i).value for i in range(len(dll))] == list(dll)


@pytest.mark.parametrize("index", [-1, 4])
def test_get_out_of_range(index):
    dll = build(0, 1, 2, 3)
    with pytest.raises(IndexError):
        dll.get(index)


def test_set():
    dll = build(0, 1, 2, 3)
    dll.set(2, 99)
    assert list(dll) == [0, 1, 99, 3]
    with pytest.raises(IndexError):
        dll.set(4, 1)
    assert list(dll) == [0, 1, 99, 3]


def test_insert_middle_start_end():
    dll = build(1, 3)
    dll.insert(1, 2)
    assert list(dll) == [1, 2, 3]
    dll.insert(0, 0)
    assert list(dll) == [0, 1, 2, 3]
    dll.insert(4, 4)
    assert list(dll) == [0, 1, 2, 3, 4]
    assert_consistent(dll)


@pytest.mark.parametrize("index", [-1, 3])
def test_insert_out_of_range(index):
    dll = build(1, 3)
    with pytest.raises(IndexError):
        dll.insert(index, 9)
    assert list(dll) == [1, 3]


def test_delete_node_sequence():
    dll = build(1, 2, 3, 4, 5)
    assert dll.delete_node(2).value == 3
    assert list(dll) == [1, 2, 4, 5]
    assert dll.delete_node(0).value == 1
    assert list(dll) == [2, 4, 5]
    assert dll.delete_node(2).value == 5
    assert list(dll) == [2, 4]
    assert_consistent(dll)


@pytest.mark.parametrize("index", [-1, 5])
def test_delete_node_out_of_range(index):
    dll = build(1, 2, 3, 4, 5)
    assert dll.delete_node(index) is None
    assert list(dll) == [1, 2, 3, 4, 5]


def test_removed_node_is_detached():
    dll = build(1, 2, 3)
    removed = dll.delete_node(1)
    assert removed.next is None and removed.prev is None
    assert dll.head.next is dll.tail
    assert dll.tail.prev is dll.head


def test_mixed_operations_keep_links_consistent():
    dll = build(10, 20, 30)
    dll.prepend(5)
    dll.insert(2, 15)
    dll.delete_last()
    dll.append(40)
    dll.delete_node(1)
    assert list(dll) == [5, 15, 20, 40]
    assert_consistent(dll)