"""Tests for Direction."""

import pytest

from connect4core.game import Coordinate, Direction


def test_eight_directions():
    assert len(list(Direction)) == 8


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_is_involution(direction):
    assert direction.opposite() != direction
    assert direction.opposite().opposite() == direction


@pytest.mark.parametrize("direction", list(Direction))
def test_unit_vector_points_back_from_opposite(direction):
    vector = direction.unit_vector()
    assert vector.x in (-1, 0, 1)
    assert vector.y in (-1, 0, 1)
    assert (vector.x, vector.y) != (0, 0)
    assert vector.add(direction.opposite().unit_vector()) == Coordinate(0, 0)


def test_unit_vectors_are_distinct():
    assert len({d.unit_vector() for d in Direction}) == 8


def test_known_vectors():
    assert Direction.UP.unit_vector() == Coordinate(0, 1)
    assert Direction.RIGHT.unit_vector() == Coordinate(1, 0)
    assert Direction.LOWER_RIGHT.unit_vector() == Coordinate(1, -1)
    assert Direction.UP.opposite() == Direction.DOWN
    assert Direction.UPPER_RIGHT.opposite() == Direction.LOWER_LEFT


def test_unique_line_directions_one_per_line():
    unique = Direction.unique_line_directions()
    assert len(unique) == 4
    assert not any(d.opposite() in unique for d in unique)
    covered = set(unique) | {d.opposite() for d in unique}
    assert covered == set(Direction)


def test_unique_line_directions_picks_first_of_each_pair():
    assert Direction.unique_line_directions() == {
        Direction.UP, Direction.UPPER_RIGHT, Direction.RIGHT, Direction.LOWER_RIGHT}
    assert Direction.unique_line_directions() == Direction.unique_line_directions()
