"""
move.py - A single disc drop

A Move only says which column a player drops into. It knows nothing about the
board, so a column that is off the board or already full is only rejected when
the move is applied to a GameBoard.
"""

from connect4core.game.player import Player
from connect4core.utils import is_int, validate_not_none
from connect4core.errors import InvalidArgumentError


class Move:
    """
    Immutable (column, player) value. Two moves are equal when both fields
    are equal, so moves can be used as dict keys and set members.
    """

    __slots__ = ('_column', '_player')

    def __init__(self, column: int, player: Player):
        """
        Create a move.

        Args:
            column: Column to drop into (0-indexed)
            player: Player making the move

        Raises:
            InvalidArgumentError: player is None or column is not an int
        """
        validate_not_none(player, "Cannot create a move without a valid player")
        if not isinstance(player, Player):
            raise InvalidArgumentError(f"Expected a Player, got {player!r}")
        if not is_int(column):
            raise InvalidArgumentError(f"Move column must be an int, got {column!r}")
        object.__setattr__(self, '_column', column)
        object.__setattr__(self, '_player', player)

    def __setattr__(self, name, value):
        raise AttributeError("Move is immutable")

    @property
    def column(self) -> int:
        return self._column

    @property
    def player(self) -> Player:
        return self._player

    def display(self) -> str:
        return self._player.display()

    def __str__(self) -> str:
        return self.display()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self._column == other._column and self._player == other._player

    def __hash__(self) -> int:
        return hash((self._column, self._player))

    def __repr__(self) -> str:
        return f"Move(column={self._column}, player={self._player.name})"
