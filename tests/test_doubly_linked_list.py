import pytest

from algokit.doubly_linked_list import ERROR_MESSAGE, DLListError, DoublyLinkedList


def make(*values):
    dll = DoublyLinkedList()
    for value in values:
        dll.insert_last(value)
    return dll


def assert_consistent(dll, expected):
    assert list(dll) == expected
    assert list(reversed(dll)) == expected[::-1]
    assert len(dll) == len(expected)


def test_new_list_is_empty_and_inactive():
    dll = DoublyLinkedList()
    assert_consistent(dll, [])
    assert dll.is_active() is False


def test_insert_first_and_last():
    dll = DoublyLinkedList()
    dll.insert_first(2)
    dll.insert_last(3)
    dll.insert_first(1)
    assert_consistent(dll, [1, 2, 3])
    assert dll.get_first() == 1
    assert dll.get_last() == 3


def test_get_first_and_last_on_empty_raise():
    dll = DoublyLinkedList()
    with pytest.raises(DLListError) as info:
        dll.get_first()
    assert str(info.value) == ERROR_MESSAGE
    with pytest.raises(DLListError):
        dll.get_last()


def test_get_value_inactive_raises():
    dll = make(1, 2)
    with pytest.raises(DLListError):
        dll.get_value()


def test_navigation_forward_and_back():
    dll = make(10, 20, 30)
    dll.first()
    assert dll.get_value() == 10
    dll.next()
    assert dll.get_value() == 20
    dll.previous()
    assert dll.get_value() == 10
    dll.previous()
    assert dll.is_active() is False
    dll.last()
    assert dll.get_value() == 30
    dll.next()
    assert dll.is_active() is False


def test_next_and_previous_when_inactive_do_nothing():
    dll = make(1)
    dll.next()
    dll.previous()
    assert dll.is_active() is False


def test_first_on_empty_list_is_inactive():
    dll = DoublyLinkedList()
    dll.first()
    assert dll.is_active() is False


def test_set_value():
    dll = make(1, 2, 3)
    dll.set_value(99)
    assert_consistent(dll, [1, 2, 3])
    dll.last()
    dll.set_value(99)
    assert_consistent(dll, [1, 2, 99])


def test_delete_first_loses_activity():
    dll = make(1, 2, 3)
    dll.first()
    dll.delete_first()
    assert_consistent(dll, [2, 3])
    assert dll.is_active() is False


def test_delete_last_loses_activity():
    dll = make(1, 2, 3)
    dll.last()
    dll.delete_last()
    assert_consistent(dll, [1, 2])
    assert dll.is_active() is False


def test_delete_single_element_empties_list():
    dll = make(5)
    dll.delete_first()
    assert_consistent(dll, [])
    dll.insert_first(6)
    dll.delete_last()
    assert_consistent(dll, [])


def test_delete_on_empty_does_nothing():
    dll = DoublyLinkedList()
    dll.delete_first()
    dll.delete_last()
    assert_consistent(dll, [])


def test_delete_after():
    dll = make(1, 2, 3)
    dll.first()
    dll.delete_after()
    assert_consistent(dll, [1, 3])
    dll.delete_after()
    assert_consistent(dll, [1])
    assert dll.get_last() == 1
    dll.delete_after()
    assert_consistent(dll, [1])


def test_delete_before():
    dll = make(1, 2, 3)
    dll.last()
    dll.delete_before()
    assert_consistent(dll, [1, 3])
    dll.delete_before()
    assert_consistent(dll, [3])
    assert dll.get_first() == 3
    dll.delete_before()
    assert_consistent(dll, [3])


def test_insert_after_and_before():
    dll = make(1, 3)
    dll.first()
    dll.insert_after(2)
    assert_consistent(dll, [1, 2, 3])
    dll.last()
    dll.insert_after(4)
    assert_consistent(dll, [1, 2, 3, 4])
    assert dll.get_last() == 4
    dll.first()
    dll.insert_before(0)
    assert_consistent(dll, [0, 1, 2, 3, 4])
    assert dll.get_first() == 0
    dll.next()
    dll.insert_before(7)
    assert_consistent(dll, [0, 1, 7, 2, 3, 4])
    assert dll.get_value() == 2


def test_inactive_operations_do_nothing():
    dll = make(1, 2)
    dll.insert_after(9)
    dll.insert_before(9)
    dll.delete_after()
    dll.delete_before()
    assert_consistent(dll, [1, 2])


def test_dispose():
    dll = make(1, 2, 3)
    dll.first()
    dll.dispose()
    assert_consistent(dll, [])
    assert dll.is_active() is False
    dll.insert_last(4)
    assert_consistent(dll, [4])