"""
base.py - Interface every AI strategy implements

An AI is bound to one player and, given a board, returns the move it wants to
play. It receives a copy of the live board, so it may explore by adding moves
to what it is given without affecting the game.
"""

from abc import ABC, abstractmethod

from connect4core.game.board import GameBoard
from connect4core.game.move import Move
from connect4core.game.player import Player
from connect4core.utils import validate_not_none


class AI(ABC):
    """Base class for move-choosing strategies."""

    def __init__(self, player: Player):
        """
        Args:
            player: Player this AI moves for

        Raises:
            InvalidArgumentError: player is None
        """
        validate_not_none(player, "Cannot create an AI based on a null Player")
        self._player = player

    @property
    def player(self) -> Player:
        return self._player

    @abstractmethod
    def determine_move(self, board: GameBoard) -> Move:
        """
        Choose a move.

        Args:
            board: Snapshot of the current game

        Returns:
            The move to play, made by self.player
        """

    def __str__(self) -> str:
        return f"{type(self).__name__} piloting {self._player}"
