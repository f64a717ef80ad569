"""Tests for the command-line driver."""

import argparse

import pytest

from connect4core.ai import AI, RandomAI
from connect4core.errors import InvalidMoveError
from connect4core.game import GameBoard, Move, Player
from connect4core.interfaces.cli import (column_header, main, parse_columns,
                                         play_game, replay_moves)

P1 = Player.PLAYER_1
P2 = Player.PLAYER_2


class StubbornAI(AI):
    """Always plays off the board."""

    def determine_move(self, board):
        return Move(board.width, self.player)


def test_column_header():
    assert column_header(3) == " 0 1 2"


def test_parse_columns():
    assert parse_columns("3,3, 4") == [3, 3, 4]
    with pytest.raises(argparse.ArgumentTypeError):
        parse_columns("3,x")


def test_replay_stops_at_win():
    board = GameBoard(7, 6)
    lines = []
    winner = replay_moves(board, [0, 1, 0, 1, 0, 1, 0, 1], out=lines.append)
    assert winner == P1
    assert board.move_count == 7
    assert lines[-1] == "\nPlayer 1 wins!"


def test_replay_without_winner():
    board = GameBoard(7, 6)
    assert replay_moves(board, [0, 1, 2], out=lambda _: None) is None
    assert board.move_count == 3


def test_replay_illegal_move():
    with pytest.raises(InvalidMoveError):
        replay_moves(GameBoard(3, 3), [0, 5], out=lambda _: None)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_play_game_between_random_ais(seed):
    board = GameBoard(7, 6)
    winner = play_game(board, [RandomAI(P1, seed=seed), RandomAI(P2, seed=seed + 50)],
                       out=lambda _: None)
    if winner is None:
        assert board.board_full()
    else:
        assert board.last_move.player == winner


def test_play_game_draw():
    lines = []
    winner = play_game(GameBoard(2, 1), [RandomAI(P1, seed=0), RandomAI(P2, seed=0)],
                       out=lines.append)
    assert winner is None
    assert lines[-1] == "\nGame over! It's a draw!"


def test_play_game_abandoned_after_invalid_moves():
    board = GameBoard(3, 3)
    lines = []
    winner = play_game(board, [StubbornAI(P1), RandomAI(P2)], out=lines.append)
    assert winner is None
    assert board.move_count == 0
    assert lines[-1] == "Too many invalid moves, game abandoned."


def test_main_replay(capsys):
    assert main(['replay', '--moves', '0,1,0,1,0,1,0']) == 0
    assert "Player 1 wins!" in capsys.readouterr().out


def test_main_play_random(capsys):
    assert main(['--width', '4', '--height', '4', 'play',
                 '--player1', 'random', '--player2', 'random', '--seed', '5']) == 0
    out = capsys.readouterr().out
    assert "RandomAI piloting 1" in out
    assert "Game over!" in out


def test_main_bad_dimensions(capsys):
    assert main(['--width', '0', 'replay', '--moves', '0']) == 2
    assert "Error" in capsys.readouterr().err


def test_main_without_command(capsys):
    assert main([]) == 1
