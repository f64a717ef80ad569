"""
errors.py - Exception types raised by the game core

Every error is a ValueError so callers that only care about "bad input" can
catch that, while drivers that need to tell a bad move from a bad board can
catch the specific type.
"""


class Connect4Error(ValueError):
    """Base class for all errors raised by connect4core."""


class InvalidDimensionError(Connect4Error):
    """A board was requested with a non-positive width or height."""


class InvalidMoveError(Connect4Error):
    """A move is missing, targets a column off the board, or a full column."""


class InvalidArgumentError(Connect4Error):
    """A required argument was missing or of the wrong kind."""
