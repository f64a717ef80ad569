"""
utils.py - Constants and argument checks shared across connect4core

This module holds the game constants (default board size, length of a winning
line) and the small validation helpers the board and its collaborators use to
reject bad input before touching any state.
"""

from typing import Any, Type

from connect4core.errors import Connect4Error, InvalidArgumentError

# Game constants
DEFAULT_WIDTH = 7   # columns
DEFAULT_HEIGHT = 6  # rows
WIN_LENGTH = 4      # discs in a line needed to win


def validate_not_none(argument: Any, message: str,
                      error: Type[Connect4Error] = InvalidArgumentError) -> None:
    """
    Raise if an argument is None.

    Args:
        argument: Value to check
        message: Error message
        error: Exception type to raise
    """
    if argument is None:
        raise error(message)


def validate_in_range(value: int, low: int, high: int, message: str,
                      error: Type[Connect4Error] = InvalidArgumentError) -> None:
    """
    Raise unless low <= value < high.

    Args:
        value: Integer to check
        low: Inclusive lower bound
        high: Exclusive upper bound
        message: Error message; formatted with value, low and high
        error: Exception type to raise
    """
    if not (low <= value < high):
        raise error(message.format(value=value, low=low, high=high))


def validate_positive(value: int, message: str,
                      error: Type[Connect4Error] = InvalidArgumentError) -> None:
    """Raise unless value is an int greater than zero."""
    if not is_int(value) or value <= 0:
        raise error(message.format(value=value))


def is_int(value: Any) -> bool:
    """True for real integers; bool is rejected even though it subclasses int."""
    return isinstance(value, int) and not isinstance(value, bool)
