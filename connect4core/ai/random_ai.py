"""
random_ai.py - Strategy that drops into a random open column
"""

from typing import Optional

import numpy as np

from connect4core.ai.base import AI
from connect4core.debug import debug
from connect4core.errors import InvalidMoveError
from connect4core.game.board import GameBoard
from connect4core.game.move import Move
from connect4core.game.player import Player


class RandomAI(AI):
    """Picks uniformly among the columns that still have room."""

    def __init__(self, player: Player, seed: Optional[int] = None):
        """
        Args:
            player: Player this AI moves for
            seed: Seed for the random generator, for reproducible games
        """
        super().__init__(player)
        self._rng = np.random.default_rng(seed)

    def determine_move(self, board: GameBoard) -> Move:
        moves = board.available_moves_for(self.player)
        if not moves:
            raise InvalidMoveError("No moves available: the board is full")

        move = moves[int(self._rng.integers(len(moves)))]
        debug.debug(f"{self} picked column {move.column} of {len(moves)} options", "ai")
        return move
