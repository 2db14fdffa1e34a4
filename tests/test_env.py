import numpy as np
import pytest

from loa import LinesOfActionEnv
from loa.core import Move, Piece
from loa.env import ACTION_VECTOR_SIZE, decode_action, encode_move


def test_reset_returns_valid_observation():
    env = LinesOfActionEnv()
    obs, info = env.reset()

    assert obs.shape == (3, 8, 8)
    assert "legal_action_mask" in info
    assert info["legal_action_mask"].shape == (ACTION_VECTOR_SIZE,)
    assert info["turn"] == Piece.BLACK


def test_legal_mask_matches_enumeration():
    env = LinesOfActionEnv()
    env.reset()
    mask = env.legal_action_mask()
    legal = env.board.legal_moves()
    assert np.count_nonzero(mask) == len(legal)
    for move in legal:
        assert mask[encode_move(move)] == 1
        assert decode_action(env.board, encode_move(move)) == move


def test_step_advances_state_and_returns_reward():
    env = LinesOfActionEnv()
    obs, info = env.reset()
    legal_actions = np.flatnonzero(info["legal_action_mask"])
    action = int(legal_actions[0])

    next_obs, reward, terminated, truncated, next_info = env.step(action)

    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert np.any(next_obs != obs)
    assert next_info["turn"] == Piece.WHITE
    assert next_info["moves_made"] == 1


def test_illegal_action_rejected():
    env = LinesOfActionEnv()
    env.reset()
    illegal = encode_move(Move.parse("a2-c2"))
    with pytest.raises(ValueError):
        env.step(illegal)
    with pytest.raises(ValueError):
        env.step(ACTION_VECTOR_SIZE)


def test_move_limit_ends_game_in_tie():
    env = LinesOfActionEnv(move_limit=1)
    env.reset()
    env.step(encode_move(Move.parse("b1-b3")))
    _, reward, terminated, _, _ = env.step(encode_move(Move.parse("a2-c2")))
    assert terminated
    assert reward == 0.0
    with pytest.raises(ValueError):
        env.step(encode_move(Move.parse("c1-c3")))


def test_render_ansi():
    env = LinesOfActionEnv(render_mode="ansi")
    env.reset()
    assert env.render().startswith("===")
