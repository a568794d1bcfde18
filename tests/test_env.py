import numpy as np
import pytest

from loa import LinesOfActionEnv
from loa.core import MOVE_VECTOR_SIZE, Board, Piece, encode_move, parse_move
from loa.game import GameResult, TieBreak


def near_win_board() -> Board:
    board = Board(np.zeros((8, 8), dtype=np.int8), Piece.BLACK)
    board.set(1, 1, Piece.BLACK)  # a1
    board.set(3, 1, Piece.BLACK)  # c1
    board.set(8, 8, Piece.WHITE)  # h8
    board.set(8, 6, Piece.WHITE)  # h6
    return board


def test_reset_returns_valid_observation():
    env = LinesOfActionEnv()
    obs, info = env.reset()

    assert obs["board"].shape == (3, 8, 8)
    assert obs["aux"].shape == (2,)
    assert info["legal_action_mask"].shape == (MOVE_VECTOR_SIZE,)
    assert info["result"] == GameResult.ONGOING


def test_legal_mask_matches_enumeration():
    env = LinesOfActionEnv()
    env.reset()
    mask = env.legal_action_mask()
    legal = env.board.enumerate_legal_moves()
    assert np.count_nonzero(mask) == len(legal) == 36
    for move in legal:
        assert mask[encode_move(move)] == 1


def test_step_advances_state_and_returns_reward():
    env = LinesOfActionEnv()
    obs, info = env.reset()
    action = int(np.flatnonzero(info["legal_action_mask"])[0])

    next_obs, reward, terminated, truncated, next_info = env.step(action)

    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert np.any(next_obs["board"] != obs["board"])
    assert env.board.turn == Piece.WHITE
    assert next_info["moves_made"] == 1


def test_step_rejects_illegal_and_out_of_range_actions():
    env = LinesOfActionEnv()
    env.reset()
    illegal = encode_move(parse_move("b1-b4", Board()))
    with pytest.raises(ValueError):
        env.step(illegal)
    with pytest.raises(ValueError):
        env.step(MOVE_VECTOR_SIZE)


def test_unenforced_illegal_action_is_penalised_no_op():
    env = LinesOfActionEnv(enforce_legal_actions=False)
    env.reset()
    illegal = encode_move(parse_move("b1-b4", Board()))
    _, reward, terminated, truncated, info = env.step(illegal)
    assert reward == -1.0
    assert not terminated and not truncated
    assert info["moves_made"] == 0


def test_connecting_move_wins_for_mover():
    env = LinesOfActionEnv()
    env.reset()
    env._board = near_win_board()
    move = parse_move("c1-b2", env._board)

    _, reward, terminated, truncated, info = env.step(encode_move(move))

    assert terminated
    assert not truncated
    assert reward == 1.0
    assert info["result"] == GameResult.BLACK_WIN
    assert not info["legal_action_mask"].any()
    with pytest.raises(ValueError):
        env.step(0)

    env.undo()
    assert env.result == GameResult.ONGOING
    assert env.board.get("c1") == Piece.BLACK


def test_truncates_at_max_moves():
    env = LinesOfActionEnv(max_moves=2)
    _, info = env.reset()
    truncated = False
    for _ in range(2):
        action = int(np.flatnonzero(info["legal_action_mask"])[0])
        _, _, terminated, truncated, info = env.step(action)
    assert truncated


def test_reset_options_and_render():
    env = LinesOfActionEnv(render_mode="ansi")
    env.reset(options={"max_moves": 10, "tie_break": "draw"})
    assert env._tie_break == TieBreak.DRAW
    rendered = env.render().splitlines()
    assert rendered[0] == "-bbbbbb-"
    assert rendered[1] == "w------w"
