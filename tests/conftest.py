"""Shared fixtures for the connect4core tests."""

import pytest

from connect4core.debug import debug
from connect4core.game import GameBoard, Move, Player

P1 = Player.PLAYER_1
P2 = Player.PLAYER_2


def drop_all(board, moves):
    """Apply (column, player) pairs with add_move."""
    for column, player in moves:
        board.add_move(Move(column, player))
    return board


@pytest.fixture
def board():
    """Empty standard 7x6 board."""
    return GameBoard(7, 6)


@pytest.fixture
def small_board():
    """Empty 3 wide, 2 high board."""
    return GameBoard(3, 2)


@pytest.fixture(autouse=True)
def restore_debug_level():
    """Keep tests that reconfigure logging from leaking into each other."""
    level = debug.level
    yield
    debug.configure(level=level, enabled=True, components=[])
