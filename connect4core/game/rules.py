"""
rules.py - Board dimensions and winning conditions as one policy object

A BoardRules instance holds everything that differs between variants of the
column-drop game: the board size, how many discs in a line win, and which line
directions are scanned. GameBoard takes one of these instead of being
subclassed per variant.
"""

from typing import FrozenSet, Iterable, Optional

from connect4core.debug import debug
from connect4core.errors import InvalidArgumentError, InvalidDimensionError
from connect4core.game.direction import Direction
from connect4core.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH, WIN_LENGTH, validate_positive


class BoardRules:
    """Immutable description of a board variant."""

    __slots__ = ('_width', '_height', '_win_length', '_line_directions')

    def __init__(self, width: int, height: int, win_length: int = WIN_LENGTH,
                 line_directions: Optional[Iterable[Direction]] = None):
        """
        Args:
            width: Number of columns, must be positive
            height: Number of rows, must be positive
            win_length: Discs in a line needed to win, must be positive
            line_directions: Directions to scan; one per line, defaults to
                Direction.unique_line_directions()

        Raises:
            InvalidDimensionError: width or height is not a positive int
            InvalidArgumentError: win_length is not positive, or two line
                directions lie on the same line
        """
        validate_positive(width, "Board width must be a positive int, got {value!r}",
                          InvalidDimensionError)
        validate_positive(height, "Board height must be a positive int, got {value!r}",
                          InvalidDimensionError)
        validate_positive(win_length, "Win length must be a positive int, got {value!r}")

        if line_directions is None:
            directions = Direction.unique_line_directions()
        else:
            directions = frozenset(line_directions)
            if not directions:
                raise InvalidArgumentError("At least one line direction is required")
            if any(d.opposite() in directions for d in directions):
                raise InvalidArgumentError("Line directions must not contain opposite pairs")

        object.__setattr__(self, '_width', width)
        object.__setattr__(self, '_height', height)
        object.__setattr__(self, '_win_length', win_length)
        object.__setattr__(self, '_line_directions', directions)
        debug.trace(f"Created {self!r}", "rules")

    def __setattr__(self, name, value):
        raise AttributeError("BoardRules is immutable")

    @classmethod
    def standard(cls) -> 'BoardRules':
        """The classic 7 wide, 6 high, four-in-a-row game."""
        return cls(DEFAULT_WIDTH, DEFAULT_HEIGHT, WIN_LENGTH)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def win_length(self) -> int:
        return self._win_length

    @property
    def line_directions(self) -> FrozenSet[Direction]:
        return self._line_directions

    @property
    def capacity(self) -> int:
        """Total number of discs the board can hold."""
        return self._width * self._height

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoardRules):
            return NotImplemented
        return (self._width, self._height, self._win_length, self._line_directions) == \
            (other._width, other._height, other._win_length, other._line_directions)

    def __hash__(self) -> int:
        return hash((self._width, self._height, self._win_length, self._line_directions))

    def __repr__(self) -> str:
        return (f"BoardRules(width={self._width}, height={self._height}, "
                f"win_length={self._win_length})")
