"""
connect4core.game - Board state machine for the column-drop game

This package contains the value types (coordinates, directions, players and
moves), the board rules, the GameBoard itself and a Gymnasium environment
that drives it.
"""

from connect4core.game.coordinate import Coordinate
from connect4core.game.direction import Direction
from connect4core.game.player import Player
from connect4core.game.move import Move
from connect4core.game.rules import BoardRules
from connect4core.game.board import GameBoard

# ConnectFourEnv is not imported here so the core does not pull in gymnasium.
__all__ = ['Coordinate', 'Direction', 'Player', 'Move', 'BoardRules', 'GameBoard']
