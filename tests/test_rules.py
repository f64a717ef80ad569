"""Tests for BoardRules."""

import pytest

from connect4core.errors import InvalidArgumentError, InvalidDimensionError
from connect4core.game import BoardRules, Direction, GameBoard, Move, Player

P1 = Player.PLAYER_1


def test_standard_rules():
    rules = BoardRules.standard()
    assert (rules.width, rules.height, rules.win_length) == (7, 6, 4)
    assert rules.capacity == 42
    assert rules.line_directions == Direction.unique_line_directions()


@pytest.mark.parametrize("width,height", [(0, 6), (7, 0), (-1, 6), (7, -3), (None, 6), ("7", 6)])
def test_invalid_dimensions(width, height):
    with pytest.raises(InvalidDimensionError):
        BoardRules(width, height)


def test_no_upper_bound_tied_to_win_length():
    rules = BoardRules(20, 15, 4)
    assert rules.width == 20
    # Smaller than a winning line is allowed too; such a board just cannot be won
    assert BoardRules(2, 2, 4).width == 2


def test_invalid_win_length():
    with pytest.raises(InvalidArgumentError):
        BoardRules(7, 6, 0)


def test_line_directions_validation():
    with pytest.raises(InvalidArgumentError):
        BoardRules(7, 6, line_directions=[])
    with pytest.raises(InvalidArgumentError):
        BoardRules(7, 6, line_directions=[Direction.RIGHT, Direction.LEFT])


def test_rules_equality_and_immutability():
    assert BoardRules(7, 6) == BoardRules.standard()
    assert BoardRules(7, 6, 5) != BoardRules.standard()
    assert hash(BoardRules(7, 6)) == hash(BoardRules.standard())
    with pytest.raises(AttributeError):
        BoardRules(7, 6).width = 9


def test_custom_line_directions_limit_wins():
    board = GameBoard(rules=BoardRules(5, 5, 3, line_directions=[Direction.RIGHT]))
    board.add_move(Move(0, P1))
    board.add_move(Move(0, P1))
    # Vertical lines are not scanned with these rules
    assert not board.check_if_winning_move(Move(0, P1))

    board.add_move(Move(1, P1))
    board.add_move(Move(2, P1))
    assert board.check_if_winning_move(Move(3, P1))


def test_win_length_one_wins_immediately():
    board = GameBoard(rules=BoardRules(3, 3, 1))
    assert board.checked_add_move(Move(1, P1))
