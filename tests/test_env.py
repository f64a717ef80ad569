"""Tests for the Gymnasium environment driver."""

import numpy as np
import pytest

from connect4core.game.env import ConnectFourEnv


@pytest.fixture
def env():
    env = ConnectFourEnv()
    env.reset(seed=0)
    return env


def test_reset(env):
    observation, info = env.reset()
    assert observation.shape == (6, 7)
    assert observation.dtype == np.int8
    assert not observation.any()
    assert env.observation_space.contains(observation)
    assert info['valid_moves'] == list(range(7))
    assert info['current_player'] == 1
    assert info['moves_made'] == 0
    assert info['winner'] is None


def test_step_places_disc_and_passes_turn(env):
    observation, reward, terminated, truncated, info = env.step(3)
    assert observation[5, 3] == 1
    assert reward == env.reward_step
    assert not terminated and not truncated
    assert info['current_player'] == 2

    observation, *_ = env.step(3)
    assert observation[4, 3] == 2


def test_vertical_win_terminates(env):
    for action in [0, 1, 0, 1, 0, 1]:
        _, _, terminated, _, _ = env.step(action)
        assert not terminated

    _, reward, terminated, truncated, info = env.step(0)
    assert terminated and not truncated
    assert reward == env.reward_win
    assert info['winner'] == 1
    assert info['valid_moves'] == []


def test_invalid_action_leaves_board_unchanged(env):
    env.step(2)
    before = env.board.copy()
    observation, reward, terminated, truncated, info = env.step(7)
    assert truncated and not terminated
    assert reward == env.reward_invalid_move
    assert info['invalid_move']
    assert env.board == before
    assert info['current_player'] == 2


def test_step_after_game_over_is_rejected(env):
    for action in [0, 1, 0, 1, 0, 1, 0]:
        env.step(action)
    _, reward, terminated, truncated, info = env.step(2)
    assert truncated
    assert reward == env.reward_invalid_move
    assert env.board.move_count == 7


def test_draw_on_full_board():
    env = ConnectFourEnv(width=1, height=1)
    env.reset()
    _, reward, terminated, _, info = env.step(0)
    assert terminated
    assert reward == env.reward_draw
    assert info['winner'] is None


def test_ascii_render():
    env = ConnectFourEnv(width=3, height=2, render_mode="ascii")
    env.reset()
    env.step(1)
    assert env.render() == "      \n   1  \n"


def test_unknown_render_mode():
    with pytest.raises(ValueError):
        ConnectFourEnv(render_mode="rgb_array")
