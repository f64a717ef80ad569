"""
coordinate.py - Immutable integer points on the board plane
"""

from connect4core.utils import validate_not_none


class Coordinate:
    """
    A point (x, y) on the board, x being the column and y the row counted from
    the bottom. Coordinates never change once built; add() returns a new one.
    """

    __slots__ = ('_x', '_y')

    def __init__(self, x: int, y: int):
        object.__setattr__(self, '_x', x)
        object.__setattr__(self, '_y', y)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    def add(self, other: 'Coordinate') -> 'Coordinate':
        """Return the component-wise sum of this point and other."""
        validate_not_none(other, "Cannot add a null Coordinate")
        return Coordinate(self._x + other._x, self._y + other._y)

    def __add__(self, other: 'Coordinate') -> 'Coordinate':
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.add(other)

    def __iter__(self):
        yield self._x
        yield self._y

    def __eq__(self, other) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __repr__(self) -> str:
        return f"Coordinate({self._x}, {self._y})"
