"""Text command session: reads commands and moves from a stream, reports to another."""

from __future__ import annotations

import logging
import re
from typing import Optional, TextIO

from loa.core import BOARD_SIZE, Board, FormatError, Piece, parse_move, to_square

from .config import GameConfig
from .outcome import GameResult, decide_result

logger = logging.getLogger(__name__)

COMMAND_PATTERN = re.compile(r"(#|\S+)\s*(\S*)\s*(\S*).*")

HELP_TEXT = """\
Commands: Commands are whitespace-delimited. Other trailing text on a
            line is ignored. Comment lines begin with # and are ignored.

  b
  board     Display the board, showing row and column designations.
  start     Start playing from the current position.
  uv-xy     A move from square uv to square xy. Here u and x are column
            designations (a-h) and v and y are row designations (1-8).
  clear     Stop game and return to initial position.
  set cr P  Put P ('w', 'b', or '-') into square cr. Stops game.
  manual P  Moves for player P ('white' or 'black') are entered by hand.
            Stops game.
  moves     List the legal moves of the side to move.
  undo      Take back the last move.
  dump      Display the board in standard format.
  quit      End program.
  help
  ?         This text."""

_ANNOUNCEMENTS = {
    GameResult.BLACK_WIN: "Black wins.",
    GameResult.WHITE_WIN: "White wins.",
    GameResult.DRAW: "Draw.",
}


def format_board(board: Board) -> str:
    lines = ["==="]
    for row in range(BOARD_SIZE, 0, -1):
        cells = " ".join(board.get(col, row).abbrev for col in range(1, BOARD_SIZE + 1))
        lines.append(f"    {cells}")
    lines.append(f"Next move: {board.turn.full_name}")
    lines.append("===")
    return "\n".join(lines)


class GameSession:
    """One console game. Input and output streams are supplied by the caller."""

    def __init__(
        self,
        input_stream: TextIO,
        output_stream: TextIO,
        *,
        config: Optional[GameConfig] = None,
        board: Optional[Board] = None,
    ) -> None:
        self._input = input_stream
        self._output = output_stream
        self.config = config or GameConfig()
        self.board = board if board is not None else Board()
        self.playing = False
        self.result = GameResult.ONGOING
        self._moves_played = 0
        self._running = True

    def run(self) -> int:
        """Process input until 'quit' or end of input; return the number of moves played."""
        while self._running:
            self._prompt()
            line = self._input.readline()
            if not line:
                break
            self.execute(line)
        return self._moves_played

    def execute(self, line: str) -> None:
        line = line.strip()
        if not line:
            return
        logger.debug("input %r", line)
        if not self._process_command(line):
            self._process_move(line)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def _process_command(self, line: str) -> bool:
        command = COMMAND_PATTERN.match(line)
        if command is None:
            return False
        name = command.group(1).lower()
        if name == "#":
            pass
        elif name in ("start", "play"):
            self._start()
        elif name == "clear":
            self.playing = False
            self.result = GameResult.ONGOING
            self.board.clear()
        elif name == "set":
            self._set(command.group(2), command.group(3))
        elif name == "manual":
            self._manual(command.group(2))
        elif name in ("b", "board", "dump"):
            self._write(format_board(self.board))
        elif name == "moves":
            moves = [str(move) for move in self.board.legal_moves()]
            self._write(" ".join(moves) if moves else "no legal moves")
        elif name == "undo":
            self._undo()
        elif name in ("help", "?"):
            self._write(HELP_TEXT)
        elif name == "quit":
            self._running = False
        else:
            return False
        return True

    def _start(self) -> None:
        self.playing = True
        self._check_outcome()

    def _set(self, square: str, piece_text: str) -> None:
        try:
            col, row = to_square(square.lower())
            piece = Piece.from_text(piece_text)
        except FormatError:
            self._error("invalid arguments to set: cr, p")
            return
        contents = self.board.grid.copy()
        contents[row - 1, col - 1] = int(piece)
        next_turn = self.board.turn if piece == Piece.EMPTY else piece.opposite()
        self.board.initialize(contents, next_turn)
        self.playing = False
        self.result = GameResult.ONGOING

    def _manual(self, player: str) -> None:
        """Both sides are always entered by hand; the command only stops the game."""
        try:
            piece = Piece.from_text(player)
        except FormatError:
            piece = Piece.EMPTY
        if piece == Piece.EMPTY:
            self._error(f"unknown player: {player}")
            return
        self.playing = False

    def _undo(self) -> None:
        if self.board.moves_made == 0:
            self._error("no move to undo")
            return
        move = self.board.unmake()
        if self.result != GameResult.ONGOING:
            self.playing = True
        self.result = GameResult.ONGOING
        self._moves_played = max(0, self._moves_played - 1)
        self._write(f"Took back {move}.")

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------
    def _process_move(self, text: str) -> None:
        move = parse_move(text, self.board)
        if move is None:
            self._error(f"invalid move: {text}")
        elif not self.playing:
            self._error("game not started")
        elif not self.board.is_legal(move):
            self._error(f"illegal move: {text}")
        else:
            mover = self.board.turn
            self.board.apply(move)
            self._moves_played += 1
            logger.debug("%s played %s", mover.full_name, move)
            if self.config.show_board_after_move:
                self._write(format_board(self.board))
            self._check_outcome()

    def _check_outcome(self) -> None:
        result = decide_result(self.board, self.config.tie_break)
        max_moves = self.config.max_moves
        if result == GameResult.ONGOING and max_moves is not None and self.board.moves_made >= max_moves:
            result = GameResult.DRAW
        self.result = result
        if result != GameResult.ONGOING:
            logger.info("game over after %d moves: %s", self.board.moves_made, result.value)
            self._write(_ANNOUNCEMENTS[result])
            self.playing = False

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def _prompt(self) -> None:
        if not self.config.prompt:
            return
        marker = self.board.turn.abbrev if self.playing else "-"
        self._output.write(f"{marker}> ")
        self._output.flush()

    def _write(self, text: str) -> None:
        self._output.write(text + "\n")

    def _error(self, text: str) -> None:
        logger.debug("error: %s", text)
        self._write(text)
