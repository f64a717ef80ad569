"""
env.py - Gymnasium environment driving a GameBoard

The environment lets agents play the column-drop game through the standard
Gymnasium reset/step interface. It only uses the public GameBoard API: it
supplies moves and reads snapshots, and keeps the turn and the game outcome
itself, since the board does neither.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect4core.debug import debug
from connect4core.errors import InvalidMoveError
from connect4core.game.board import GameBoard
from connect4core.game.move import Move
from connect4core.game.player import Player
from connect4core.game.rules import BoardRules
from connect4core.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH, WIN_LENGTH


class ConnectFourEnv(gym.Env):
    """
    Two-player column-drop environment. Each step plays one disc for whichever
    player is to move; rewards are from that player's point of view.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    reward_win = 1.0
    reward_draw = 0.1
    reward_invalid_move = -0.5
    reward_step = -0.01

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 win_length: int = WIN_LENGTH, render_mode: Optional[str] = None):
        """
        Args:
            width: Number of columns
            height: Number of rows
            win_length: Discs in a line needed to win
            render_mode: None, "ascii" or "human"
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.rules = BoardRules(width, height, win_length)
        self.action_space = spaces.Discrete(width)
        self.observation_space = spaces.Box(
            low=0, high=len(Player), shape=(height, width), dtype=np.int8)
        self.render_mode = render_mode

        self.board = GameBoard(rules=self.rules)
        self.current_player = Player.PLAYER_1
        self.winner: Optional[Player] = None
        self.done = False
        debug.debug(f"Initializing ConnectFourEnv with {self.rules!r}", "env")

    def reset(self, *, seed: Optional[int] = None,
              options: Optional[Dict[str, Any]] = None) -> Tuple[np.ndarray, Dict]:
        """
        Start a new game.

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)
        debug.debug("Resetting environment", "env")

        self.board = GameBoard(rules=self.rules)
        self.current_player = Player.PLAYER_1
        self.winner = None
        self.done = False

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play a disc for the current player.

        Args:
            action: Column to drop into (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        if self.done:
            debug.warning("step() called on a finished game", "env")
            return self._reject("game is over")

        try:
            won = self.board.checked_add_move(Move(int(action), self.current_player))
        except InvalidMoveError as e:
            debug.warning(f"Invalid action {action}: {e}", "env")
            return self._reject(str(e))

        reward = self.reward_step
        terminated = False
        if won:
            debug.info(f"Game over: player {self.current_player} wins", "env")
            self.winner = self.current_player
            reward = self.reward_win
            terminated = True
        elif self.board.board_full():
            debug.info("Game over: draw", "env")
            reward = self.reward_draw
            terminated = True

        if terminated:
            self.done = True
        else:
            self.current_player = self.current_player.opponent()

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), reward, terminated, False, self._get_info()

    def _reject(self, reason: str) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        info = self._get_info()
        info['invalid_move'] = True
        info['reason'] = reason
        return self._get_observation(), self.reward_invalid_move, False, True, info

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.board.render()
        if self.render_mode == "human":
            print(self.board.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.board.to_array()

    def _get_info(self) -> Dict[str, Any]:
        if self.done:
            valid_moves = []
        else:
            valid_moves = [m.column for m in self.board.available_moves_for(self.current_player)]
        return {
            'valid_moves': valid_moves,
            'current_player': self.current_player.value,
            'moves_made': self.board.move_count,
            'winner': self.winner.value if self.winner else None,
        }
