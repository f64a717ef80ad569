"""
board.py - Board state and win detection for the column-drop game

This module implements the GameBoard class. The board keeps one stack of moves
per column (bottom to top, in drop order) plus the full move history, checks
moves for legality before applying them, and answers whether a move would
complete a line.
"""

from typing import List, Optional

import numpy as np

from connect4core.debug import debug
from connect4core.errors import InvalidArgumentError, InvalidMoveError
from connect4core.game.coordinate import Coordinate
from connect4core.game.direction import Direction
from connect4core.game.move import Move
from connect4core.game.player import Player
from connect4core.game.rules import BoardRules
from connect4core.utils import validate_in_range, validate_not_none


class GameBoard:
    """
    A column-drop game board.

    Moves are only ever added through add_move() (or checked_add_move()), and
    every move is validated before any state changes, so a rejected move leaves
    the board exactly as it was. The board holds no notion of a winner: the
    caller asks whether a move wins and decides what to do about it.
    """

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None,
                 *, rules: Optional[BoardRules] = None):
        """
        Create an empty board.

        Args:
            width: Number of columns
            height: Number of rows
            rules: Complete board variant; replaces width and height

        Raises:
            InvalidDimensionError: width or height is not positive
            InvalidArgumentError: both rules and explicit dimensions were given
        """
        if rules is None:
            rules = BoardRules(width, height)
        elif width is not None or height is not None:
            raise InvalidArgumentError("Pass either width/height or rules, not both")

        self._rules = rules
        self._columns: List[List[Move]] = [[] for _ in range(rules.width)]
        self._history: List[Move] = []
        debug.debug(f"Initializing {rules.width}x{rules.height} board "
                    f"(win length {rules.win_length})", "board")

    @classmethod
    def standard(cls) -> 'GameBoard':
        """Create an empty 7x6 board."""
        return cls(rules=BoardRules.standard())

    @classmethod
    def from_board(cls, other: 'GameBoard') -> 'GameBoard':
        """
        Create an independent copy of another board.

        Args:
            other: Board to copy

        Returns:
            A new board with the same columns and history; changing either
            board afterwards does not affect the other

        Raises:
            InvalidArgumentError: other is None
        """
        validate_not_none(other, "Provided GameBoard cannot be null")
        debug.trace("Creating board copy", "board")
        new_board = cls(rules=other._rules)
        # Moves are immutable; copying the lists is enough.
        new_board._columns = [column[:] for column in other._columns]
        new_board._history = other._history[:]
        return new_board

    def copy(self) -> 'GameBoard':
        """Create an independent copy of this board."""
        return GameBoard.from_board(self)

    @property
    def rules(self) -> BoardRules:
        return self._rules

    @property
    def width(self) -> int:
        return self._rules.width

    @property
    def height(self) -> int:
        return self._rules.height

    @property
    def win_length(self) -> int:
        return self._rules.win_length

    def get_width(self) -> int:
        return self._rules.width

    def get_height(self) -> int:
        return self._rules.height

    @property
    def move_count(self) -> int:
        """Number of moves applied so far."""
        return len(self._history)

    @property
    def last_move(self) -> Optional[Move]:
        """The most recently applied move, or None on an empty board."""
        return self._history[-1] if self._history else None

    def add_move(self, move: Move) -> None:
        """
        Drop a disc.

        Args:
            move: Move to apply

        Raises:
            InvalidMoveError: move is None, its column is off the board, or the
                column is already full
        """
        self._validate_move(move)
        debug.debug(f"Player {move.player} drops into column {move.column} "
                    f"(row {len(self._columns[move.column])})", "board")
        self._columns[move.column].append(move)
        self._history.append(move)

    def checked_add_move(self, move: Move) -> bool:
        """
        Apply a move and report whether it won the game.

        The win is evaluated against the board as it was before the move,
        since the landing row depends on the column height at that point.

        Args:
            move: Move to apply

        Returns:
            True if the move completed a line

        Raises:
            InvalidMoveError: the move is not legal on this board
        """
        won = self.check_if_winning_move(move)
        self.add_move(move)
        return won

    def check_if_winning_move(self, move: Move) -> bool:
        """
        Check whether a move would complete a line if it were played now.

        The board is not modified.

        Args:
            move: Candidate move

        Returns:
            True if the move would win

        Raises:
            InvalidMoveError: the move is not legal on this board
        """
        self._validate_move(move)

        landing = Coordinate(move.column, len(self._columns[move.column]))
        debug.start_timer("win_check")
        won = any(self._completes_line(landing, direction, move.player)
                  for direction in self._rules.line_directions)
        debug.end_timer("win_check", "board")

        if won:
            debug.info(f"Player {move.player} wins with a drop into column {move.column}",
                       "board")
        return won

    def _completes_line(self, landing: Coordinate, direction: Direction,
                        player: Player) -> bool:
        # The landing cell itself is not on the board yet, hence the +1.
        towards = self._consecutive_moves(landing, direction, player)
        away = self._consecutive_moves(landing, direction.opposite(), player)
        debug.trace(f"{direction.name} through {tuple(landing)}: "
                    f"{towards} + {away} + 1", "board")
        return towards + away + 1 >= self._rules.win_length

    def _consecutive_moves(self, start: Coordinate, direction: Direction,
                           player: Player) -> int:
        """Count discs owned by player walking from start's neighbour in direction."""
        step = direction.unit_vector()
        position = start.add(step)
        count = 0
        while self._is_occupied(position) and self._owner(position) == player:
            count += 1
            position = position.add(step)
        return count

    def _is_occupied(self, position: Coordinate) -> bool:
        x, y = position.x, position.y
        return 0 <= x < len(self._columns) and 0 <= y < len(self._columns[x])

    def _owner(self, position: Coordinate) -> Player:
        return self._columns[position.x][position.y].player

    def _validate_move(self, move: Move) -> None:
        if move is None:
            debug.debug("Rejected null move", "board")
            raise InvalidMoveError("Provided move cannot be null")
        if not isinstance(move, Move):
            raise InvalidMoveError(f"Expected a Move, got {move!r}")

        validate_in_range(move.column, 0, self.width,
                          "Column {value} is not within [{low}, {high})", InvalidMoveError)
        if len(self._columns[move.column]) >= self.height:
            debug.debug(f"Rejected move into full column {move.column}", "board")
            raise InvalidMoveError(f"Column {move.column} is full")

    def player_at(self, position: Optional[Coordinate]) -> Optional[Player]:
        """
        Get the player whose disc occupies a cell.

        Args:
            position: Cell to look at; y counts up from the bottom row

        Returns:
            The owning player, or None for an empty cell, a cell off the board,
            or a None position
        """
        if position is None or not self._is_occupied(position):
            return None
        return self._owner(position)

    def column_height(self, column: int) -> int:
        """
        Number of discs in a column.

        Raises:
            InvalidMoveError: column is off the board
        """
        validate_in_range(column, 0, self.width,
                          "Column {value} is not within [{low}, {high})", InvalidMoveError)
        return len(self._columns[column])

    def _open_columns(self) -> List[int]:
        return [index for index, column in enumerate(self._columns)
                if len(column) < self.height]

    def available_moves_for(self, player: Player) -> List[Move]:
        """
        Get every legal move for a player.

        Args:
            player: Player the moves are built for

        Returns:
            One move per column that still has room, in column order

        Raises:
            InvalidArgumentError: player is None
        """
        validate_not_none(player, "Cannot list moves for a null player")
        return [Move(column, player) for column in self._open_columns()]

    def board_full(self) -> bool:
        """True once every column holds height discs."""
        return not self._open_columns()

    def get_board_representation(self) -> List[List[Optional[Player]]]:
        """
        Get a snapshot of the board for display.

        Returns:
            Grid indexed [column][row] where row 0 is the top row, as the board
            is drawn, and None marks an empty cell
        """
        representation: List[List[Optional[Player]]] = [
            [None] * self.height for _ in range(self.width)]
        for x, column in enumerate(self._columns):
            for y, move in enumerate(column):
                representation[x][self.height - 1 - y] = move.player
        return representation

    def to_array(self) -> np.ndarray:
        """
        Get the board as a numeric array.

        Returns:
            int8 array of shape (height, width), row 0 at the top, holding 0 for
            empty cells and Player.value otherwise
        """
        grid = np.zeros((self.height, self.width), dtype=np.int8)
        for x, column in enumerate(self._columns):
            for y, move in enumerate(column):
                grid[self.height - 1 - y, x] = move.player.value
        return grid

    def get_move_history(self) -> List[Move]:
        """All moves applied so far, oldest first. The list is a copy."""
        return self._history[:]

    def render(self) -> str:
        """
        Render the board as text, top row first.

        Each cell is two characters: two spaces when empty, otherwise a space
        followed by the player's display string. Every row ends with a newline.
        """
        rows = []
        for y in range(self.height - 1, -1, -1):
            cells = ["  " if len(column) <= y else " " + column[y].display()
                     for column in self._columns]
            rows.append("".join(cells) + "\n")
        return "".join(rows)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"GameBoard(width={self.width}, height={self.height}, "
                f"moves={len(self._history)})")

    def __eq__(self, other) -> bool:
        # History is not compared, only the arrangement of discs.
        if not isinstance(other, GameBoard):
            return NotImplemented
        if other is self:
            return True
        return (self.width == other.width and self.height == other.height
                and self._columns == other._columns)

    def __hash__(self) -> int:
        return hash((self.width, self.height,
                     tuple(tuple(column) for column in self._columns)))
