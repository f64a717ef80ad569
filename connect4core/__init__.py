"""
connect4core - State machine for a two-player column-drop game

This package provides the game board for a Connect Four style game: move
application, legality checks and win detection, along with a small set of
AI strategies and a Gymnasium environment for driving games.
"""

# Version number
__version__ = '0.1.0'
