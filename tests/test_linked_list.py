import io

import pytest

from algokit.linked_list import SinglyLinkedList, main


def test_construction_round_trip():
    values = [3, 1, 4, 1, 5]
    items = SinglyLinkedList(values)
    assert list(items) == values
    assert len(items) == len(values)


def test_empty_list():
    items = SinglyLinkedList()
    assert list(items) == []
    assert len(items) == 0


def test_insert_front():
    values = [2, 3]
    items = SinglyLinkedList(values)
    items.insert_front(9)
    assert list(items) == [9, *values]
    assert len(items) == len(values) + 1


def test_append():
    values = [2, 3]
    items = SinglyLinkedList(values)
    items.append(9)
    assert list(items) == [*values, 9]


def test_insert_after_first():
    a, b = 4, 6
    items = SinglyLinkedList([a, b])
    items.insert_after(0, 5)
    assert list(items) == [a, 5, b]


def test_insert_after_last():
    values = [4, 6]
    items = SinglyLinkedList(values)
    items.insert_after(len(values) - 1, 8)
    assert list(items) == [*values, 8]


@pytest.mark.parametrize("position", [2, 5, -1])
def test_insert_after_out_of_range(position):
    items = SinglyLinkedList([4, 6])
    with pytest.raises(IndexError):
        items.insert_after(position, 1)
    assert list(items) == [4, 6]


def test_insert_after_on_empty_raises():
    with pytest.raises(IndexError):
        SinglyLinkedList().insert_after(0, 1)


def test_delete_front():
    values = [7, 8, 9]
    items = SinglyLinkedList(values)
    assert items.delete_front() == values[0]
    assert list(items) == values[1:]


def test_delete_last():
    values = [7, 8, 9]
    items = SinglyLinkedList(values)
    assert items.delete_last() == values[-1]
    assert list(items) == values[:-1]


def test_delete_last_single_node():
    items = SinglyLinkedList([42])
    assert items.delete_last() == 42
    assert list(items) == []
    assert len(items) == 0


@pytest.mark.parametrize("method", ["delete_front", "delete_last"])
def test_delete_on_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(SinglyLinkedList(), method)()


def test_delete_after():
    values = [7, 8, 9]
    items = SinglyLinkedList(values)
    assert items.delete_after(0) == values[1]
    assert list(items) == [values[0], values[2]]


def test_delete_after_last_raises():
    items = SinglyLinkedList([7, 8])
    with pytest.raises(IndexError):
        items.delete_after(1)
    assert len(items) == 2


def test_search_positions():
    values = [4, 7, 4, 2]
    items = SinglyLinkedList(values)
    positions = items.search(4)
    assert len(positions) == values.count(4)
    assert all(values[p - 1] == 4 for p in positions)


def test_search_missing():
    assert SinglyLinkedList([1, 2]).search(99) == []


def test_drop_dominated_source_example():
    items = SinglyLinkedList([12, 15, 10, 11, 5, 6, 2, 3])
    items.drop_dominated()
    assert list(items) == [15, 11, 6, 3]
    assert len(items) == 4


def test_drop_dominated_invariant():
    values = [1, 9, 3, 8, 2, 8, 0, 5, 5]
    items = SinglyLinkedList(values)
    items.drop_dominated()
    kept = list(items)
    assert all(v >= max(kept[i + 1:], default=v) for i, v in enumerate(kept))
    assert kept[0] == max(values)
    assert kept[-1] == values[-1]


def test_drop_dominated_empty():
    items = SinglyLinkedList()
    items.drop_dominated()
    assert list(items) == []


def test_main_menu(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n5\n2\n7\n8\n9\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "printing values" in out
    assert "\n5\n7" in out


def test_main_invalid_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("42\n"))
    assert main([]) == 0
    assert "Please enter valid choice.." in capsys.readouterr().out


def test_main_delete_from_empty(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n9\n"))
    assert main([]) == 0
    assert "List is empty" in capsys.readouterr().out