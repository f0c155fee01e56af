import pytest

from labworks.dynamic_array import DynamicArray
from labworks.geometry import Hexagon, Octagon, Point


def _hexagon_a():
    return Hexagon(
        Point(0, 0), Point(1, 0), Point(2, 0), Point(2, 1), Point(1, 1), Point(0, 1)
    )


def _hexagon_b():
    return Hexagon(
        Point(0, 0), Point(1, 0), Point(2, 0), Point(2, 1), Point(1, 2), Point(0, 1)
    )


def _octagon():
    return Octagon(
        Point(0, 0),
        Point(1, 0),
        Point(2, 0),
        Point(3, 0),
        Point(3, 1),
        Point(2, 1),
        Point(1, 2),
        Point(0, 1),
    )


def test_array_of_hexagons():
    array = DynamicArray()
    array.append(_hexagon_a())
    array.append(_hexagon_b())

    size_sum = sum(hexagon.area() for hexagon in array)

    assert size_sum == 2 + 3


def test_array_of_figures():
    array = DynamicArray()
    array.append(_hexagon_a())
    array.append(_hexagon_b())
    array.append(_octagon())

    size_sum = sum(figure.area() for figure in array)

    assert size_sum == 2 + 3 + 4


def test_capacity_doubles():
    array = DynamicArray()
    assert array.capacity() == 0
    capacities = []
    for value in range(5):
        array.append(value)
        capacities.append(array.capacity())
    assert capacities == [1, 2, 4, 4, 8]


def test_init_from_items_keeps_order():
    array = DynamicArray([1, 2, 3])
    assert list(array) == [1, 2, 3]
    assert len(array) == 3
    assert array.capacity() == 4


def test_pop_returns_last():
    array = DynamicArray(["a", "b"])
    assert array.pop() == "b"
    assert list(array) == ["a"]


def test_pop_empty_raises():
    with pytest.raises(IndexError, match="Array is empty"):
        DynamicArray().pop()


def test_remove_at_shifts_items():
    array = DynamicArray([10, 20, 30, 40])
    assert array.remove_at(1) == 20
    assert list(array) == [10, 30, 40]
    assert array[1] == 30


def test_remove_at_out_of_range():
    array = DynamicArray([1])
    with pytest.raises(IndexError, match="Index out of range"):
        array.remove_at(1)
    with pytest.raises(IndexError):
        array.remove_at(-1)


def test_getitem_out_of_range():
    array = DynamicArray([1, 2])
    assert array[0] == 1
    assert array[1] == 2
    with pytest.raises(IndexError):
        _ = array[2]
    with pytest.raises(IndexError):
        _ = array[-1]
    assert len(array) == 2
    assert list(array) == [1, 2]


def test_setitem_replaces_value():
    array = DynamicArray([1, 2, 3])
    array[2] = 9
    assert list(array) == [1, 2, 9]
    with pytest.raises(IndexError):
        array[3] = 0


def test_clear_keeps_capacity():
    array = DynamicArray([1, 2, 3])
    capacity = array.capacity()
    array.clear()
    assert len(array) == 0
    assert array.capacity() == capacity
    array.append(7)
    assert list(array) == [7]
    assert array.capacity() == capacity


def test_sequence_helpers():
    array = DynamicArray(["x", "y", "z"])
    assert "y" in array
    assert array.index("z") == 2
    assert list(reversed(array)) == ["z", "y", "x"]