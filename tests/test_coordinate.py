"""Tests for Coordinate."""

import pytest

from connect4core.errors import InvalidArgumentError
from connect4core.game import Coordinate


def test_accessors():
    point = Coordinate(3, -2)
    assert point.x == 3
    assert point.y == -2
    assert tuple(point) == (3, -2)


def test_add_returns_new_point_and_leaves_operands_alone():
    a = Coordinate(1, 2)
    b = Coordinate(-1, 5)
    result = a.add(b)
    assert result == Coordinate(0, 7)
    assert a == Coordinate(1, 2)
    assert b == Coordinate(-1, 5)
    assert a + b == result


def test_add_null_raises():
    with pytest.raises(InvalidArgumentError):
        Coordinate(0, 0).add(None)


def test_add_non_coordinate_is_type_error():
    with pytest.raises(TypeError):
        Coordinate(0, 0) + (1, 1)


def test_value_equality_and_hash():
    assert Coordinate(2, 4) == Coordinate(2, 4)
    assert Coordinate(2, 4) != Coordinate(4, 2)
    assert len({Coordinate(2, 4), Coordinate(2, 4)}) == 1


def test_immutable():
    point = Coordinate(1, 1)
    with pytest.raises(AttributeError):
        point.x = 5
    with pytest.raises(AttributeError):
        point._x = 5
