"""
direction.py - Compass directions used to walk lines across the board

Directions come in opposite pairs, and each pair describes one line through a
point. The win check only needs one member of each pair, which is what
Direction.unique_line_directions() provides.
"""

from enum import Enum
from typing import FrozenSet

from connect4core.game.coordinate import Coordinate


class Direction(Enum):
    """The eight compass directions, listed clockwise starting from UP."""
    UP = 0
    UPPER_RIGHT = 1
    RIGHT = 2
    LOWER_RIGHT = 3
    DOWN = 4
    LOWER_LEFT = 5
    LEFT = 6
    UPPER_LEFT = 7

    def opposite(self) -> 'Direction':
        """The direction lying on the same line, pointing the other way."""
        members = list(Direction)
        return members[(self.value + len(members) // 2) % len(members)]

    def unit_vector(self) -> Coordinate:
        """Step of length one in this direction; y grows upwards."""
        return _UNIT_VECTORS[self]

    @classmethod
    def unique_line_directions(cls) -> FrozenSet['Direction']:
        """
        One direction per line through a point.

        Walks the members in declaration order and keeps each one whose
        opposite has not been kept already, so the result is always
        UP, UPPER_RIGHT, RIGHT and LOWER_RIGHT.

        Returns:
            Four directions; none is the opposite of another, and together with
            their opposites they cover all eight.
        """
        unique = set()
        for direction in cls:
            if direction.opposite() not in unique:
                unique.add(direction)
        return frozenset(unique)


_UNIT_VECTORS = {
    Direction.UP: Coordinate(0, 1),
    Direction.UPPER_RIGHT: Coordinate(1, 1),
    Direction.RIGHT: Coordinate(1, 0),
    Direction.LOWER_RIGHT: Coordinate(1, -1),
    Direction.DOWN: Coordinate(0, -1),
    Direction.LOWER_LEFT: Coordinate(-1, -1),
    Direction.LEFT: Coordinate(-1, 0),
    Direction.UPPER_LEFT: Coordinate(-1, 1),
}
