from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from loa.core import BOARD_SIZE, MOVE_VECTOR_SIZE, Board, decode_move, encode_move
from loa.features import AUX_VECTOR_SIZE, BOARD_CHANNELS, build_aux_vector, build_board_tensor
from loa.game.outcome import GameResult, TieBreak, decide_result, winner_of


class LinesOfActionEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        max_moves: int = 400,
        tie_break: TieBreak = TieBreak.MOVER,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._max_moves = max_moves
        self._tie_break = tie_break
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        board_shape = (BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE)
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32),
                "aux": spaces.Box(low=0.0, high=1.0, shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(MOVE_VECTOR_SIZE)

        self._board = Board()
        self._result = GameResult.ONGOING

    @property
    def board(self) -> Board:
        return self._board.copy()

    @property
    def result(self) -> GameResult:
        return self._result

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        if options:
            self._max_moves = options.get("max_moves", self._max_moves)
            self._tie_break = TieBreak(options.get("tie_break", self._tie_break))
        self._board = Board()
        self._result = GameResult.ONGOING
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")
        if self._result != GameResult.ONGOING:
            raise ValueError("Game is over; call reset().")

        move = decode_move(int(action_index), self._board)
        if not self._board.is_legal(move):
            if self._enforce_legal:
                raise ValueError("Illegal action provided and enforce_legal_actions=True.")
            # Unenforced illegal actions are a no-op with a penalty for the side to move.
            return self._build_observation(), -1.0, False, False, self._build_info()

        mover = self._board.turn
        self._board.apply(move)
        self._result = decide_result(self._board, self._tie_break)

        terminated = self._result != GameResult.ONGOING
        truncated = not terminated and self._board.moves_made >= self._max_moves
        reward = self._compute_reward(mover)
        return self._build_observation(), reward, terminated, truncated, self._build_info()

    def undo(self) -> None:
        self._board.unmake()
        self._result = decide_result(self._board, self._tie_break)

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self._result != GameResult.ONGOING:
            return mask
        for move in self._board.legal_moves():
            mask[encode_move(move)] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._render_ascii()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, np.ndarray]:
        return {"board": build_board_tensor(self._board), "aux": build_aux_vector(self._board)}

    def _build_info(self) -> Dict[str, object]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "result": self._result,
            "moves_made": self._board.moves_made,
        }

    def _compute_reward(self, mover) -> float:
        winner = winner_of(self._result)
        if winner is None:
            return 0.0
        return 1.0 if winner == mover else -1.0

    def _render_ascii(self) -> str:
        rows = []
        for row in range(BOARD_SIZE, 0, -1):
            rows.append("".join(self._board.get(col, row).abbrev for col in range(1, BOARD_SIZE + 1)))
        return "\n".join(rows)
