"""
human.py - Adapter that asks a person for moves

HumanAI lets a person sit in the same seat as any other AI. It reads a column
number from an input function (the builtin input() by default) and keeps
asking until it gets an integer. Whether that column is legal is left to the
board, so the driver decides what to do with a rejected move.
"""

from typing import Callable

from connect4core.ai.base import AI
from connect4core.debug import debug
from connect4core.game.board import GameBoard
from connect4core.game.move import Move
from connect4core.game.player import Player


class HumanAI(AI):
    """Reads 0-indexed column numbers from a prompt."""

    def __init__(self, player: Player, input_fn: Callable[[str], str] = input):
        super().__init__(player)
        self._input = input_fn

    def determine_move(self, board: GameBoard) -> Move:
        prompt = f"Player {self.player} move (columns 0-{board.width - 1}): "
        while True:
            raw = self._input(prompt).strip()
            try:
                column = int(raw)
            except ValueError:
                debug.debug(f"Could not parse human input {raw!r}", "ai")
                prompt = f"Please enter a column number (0-{board.width - 1}): "
                continue
            return Move(column, self.player)
