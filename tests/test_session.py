import io

import numpy as np

from loa.core import Board, Piece
from loa.game import GameConfig, GameResult, GameSession, TieBreak, format_board


def run_session(text: str, *, board: Board = None, config: GameConfig = None):
    output = io.StringIO()
    session = GameSession(
        io.StringIO(text),
        output,
        config=config or GameConfig(prompt=False),
        board=board,
    )
    moves = session.run()
    return session, moves, output.getvalue().splitlines()


def test_format_board_start_position():
    lines = format_board(Board()).splitlines()
    assert lines[0] == "==="
    assert lines[1] == "    - b b b b b b -"
    assert lines[2] == "    w - - - - - - w"
    assert lines[8] == "    - b b b b b b -"
    assert lines[9] == "Next move: black"
    assert lines[10] == "==="


def test_moves_are_played_after_start():
    session, moves, lines = run_session("start\nb1-b3\ndump\nquit\nb8-b6\n")
    assert moves == 1
    assert session.board.get("b3") == Piece.BLACK
    assert "    w b - - - - - w" in lines
    assert "Next move: white" in lines


def test_move_errors_are_reported():
    _, moves, lines = run_session("b1-b3\nstart\nzz\nb1-b4\nb1-c3\n")
    assert moves == 0
    assert lines == [
        "game not started",
        "invalid move: zz",
        "illegal move: b1-b4",
        "invalid move: b1-c3",
    ]


def test_comments_blank_lines_and_help():
    _, _, lines = run_session("# a comment\n\nhelp\n")
    assert lines[0].startswith("Commands:")
    assert any("undo" in line for line in lines)


def test_set_places_piece_and_stops_game():
    session, _, lines = run_session("start\nset d4 w\nset zz b\nb1-b3\n")
    assert session.board.get("d4") == Piece.WHITE
    assert session.board.turn == Piece.BLACK
    assert not session.playing
    assert lines == ["invalid arguments to set: cr, p", "game not started"]


def test_undo_and_moves_commands():
    session, moves, lines = run_session("undo\nstart\nb1-b3\nundo\nmoves\n")
    assert lines[0] == "no move to undo"
    assert lines[1] == "Took back b1-b3."
    assert lines[2].split()[:3] == ["b1-b3", "b1-d3", "b1-h1"]
    assert len(lines[2].split()) == 36
    assert moves == 0
    assert session.board.moves_made == 0


def test_winning_move_is_announced():
    board = Board(np.zeros((8, 8), dtype=np.int8), Piece.BLACK)
    board.set(1, 1, Piece.BLACK)
    board.set(3, 1, Piece.BLACK)
    board.set(8, 8, Piece.WHITE)
    board.set(8, 6, Piece.WHITE)

    session, moves, lines = run_session("start\nc1-b2\nh8-h7\n", board=board)
    assert moves == 1
    assert lines == ["Black wins.", "game not started"]
    assert session.result == GameResult.BLACK_WIN


def test_simultaneous_connection_uses_tie_break():
    # Black's capture on d5 joins black and leaves white with a single piece.
    def fixture() -> Board:
        board = Board(np.zeros((8, 8), dtype=np.int8), Piece.BLACK)
        board.set(4, 3, Piece.BLACK)  # d3
        board.set(5, 6, Piece.BLACK)  # e6
        board.set(4, 5, Piece.WHITE)  # d5
        board.set(8, 8, Piece.WHITE)  # h8
        return board

    for tie_break, announcement in [
        (TieBreak.MOVER, "Black wins."),
        (TieBreak.SIDE_TO_MOVE, "White wins."),
        (TieBreak.DRAW, "Draw."),
    ]:
        config = GameConfig(tie_break=tie_break, prompt=False)
        _, _, lines = run_session("start\nd3-d5\n", board=fixture(), config=config)
        assert lines == [announcement]


def test_max_moves_ends_in_draw():
    config = GameConfig(max_moves=1, prompt=False, show_board_after_move=True)
    session, _, lines = run_session("start\nb1-b3\n", config=config)
    assert lines[-1] == "Draw."
    assert "Next move: white" in lines
    assert session.result == GameResult.DRAW


def test_prompts_follow_play_state():
    output = io.StringIO()
    GameSession(io.StringIO("start\nb1-b3\n"), output).run()
    assert output.getvalue() == "-> b> w> "


def test_clear_restores_start():
    session, _, _ = run_session("start\nb1-b3\nclear\n")
    assert not session.playing
    assert session.board.moves_made == 0
    assert session.board.get("b1") == Piece.BLACK


def test_undo_after_a_win_resumes_play():
    board = Board(np.zeros((8, 8), dtype=np.int8), Piece.BLACK)
    board.set(1, 1, Piece.BLACK)
    board.set(3, 1, Piece.BLACK)
    board.set(8, 8, Piece.WHITE)
    board.set(8, 6, Piece.WHITE)

    session, moves, lines = run_session("start\nc1-b2\nundo\nc1-b2\n", board=board)
    assert lines == ["Black wins.", "Took back c1-b2.", "Black wins."]
    assert moves == 1
    assert session.result == GameResult.BLACK_WIN


def test_undo_before_start_does_not_start_play():
    session, _, lines = run_session("set d4 w\nundo\nb1-b3\n")
    assert lines == ["no move to undo", "game not started"]
    assert not session.playing


def test_manual_command_stops_game():
    session, moves, lines = run_session("start\nmanual white\nb1-b3\nmanual x\nmanual\n")
    assert moves == 0
    assert not session.playing
    assert lines == ["game not started", "unknown player: x", "unknown player: "]
