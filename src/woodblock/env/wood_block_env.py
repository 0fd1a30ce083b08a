from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from woodblock.game import BlockPuzzleEngine, GameConfig, GameState, Place, Rotate, Swap
from woodblock.game.core import Action
from woodblock.game.pieces import MAX_SHAPE_SIDE
from woodblock.game.rng import numpy_source
from woodblock.game.rules import ScoringRules


def _compute_action_mask(engine: BlockPuzzleEngine, state: GameState) -> np.ndarray:
    """Flat mask over [placements (slot, row, col) | rotations (slot) | swap]."""
    size = engine.config.grid_size
    k = engine.config.queue_size
    place_mask = np.zeros((k, size, size), dtype=np.bool_)
    for slot, (r, c) in engine.valid_placements(state):
        place_mask[slot, r, c] = True
    rotate_mask = np.array([piece is not None for piece in state.queue], dtype=np.bool_)
    swap_mask = np.array([not state.game_over and engine.rules.can_swap(state.score)], dtype=np.bool_)
    return np.concatenate([place_mask.reshape(-1), rotate_mask, swap_mask])


class WoodBlockEnv(gym.Env):
    """Gymnasium host around the pure engine.

    Actions (Discrete):
      [0, k*N*N)            place slot s at (r, c), index = (s*N + r)*N + c
      [k*N*N, k*N*N + k)    rotate slot s
      k*N*N + k             paid swap
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None,
                 render_mode: Optional[str] = None,
                 invalid_action_penalty: float = -1.0,
                 terminal_penalty: float = 0.0) -> None:
        super().__init__()
        self.engine = BlockPuzzleEngine(config or GameConfig(), rules or ScoringRules())
        self.render_mode = render_mode
        self.invalid_action_penalty = float(invalid_action_penalty)
        self.terminal_penalty = float(terminal_penalty)

        size = self.engine.config.grid_size
        k = self.engine.config.queue_size
        self.n_place = k * size * size
        self.n_actions = self.n_place + k + 1

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0, high=1, shape=(size, size), dtype=np.int8),
                "pieces": spaces.Box(low=0, high=1, shape=(k, MAX_SHAPE_SIDE, MAX_SHAPE_SIDE), dtype=np.int8),
                "pieces_remaining": spaces.Discrete(k + 1),
                "score": spaces.Box(low=0, high=np.iinfo(np.int64).max, shape=(1,), dtype=np.int64),
            }
        )
        self.action_space = spaces.Discrete(self.n_actions)

        self.state: Optional[GameState] = None
        self._source = None

    def decode_action(self, index: int) -> Action:
        size = self.engine.config.grid_size
        index = int(index)
        if not 0 <= index < self.n_actions:
            raise ValueError(f"action {index} outside [0, {self.n_actions})")
        if index < self.n_place:
            slot, rest = divmod(index, size * size)
            r, c = divmod(rest, size)
            return Place(slot, (r, c))
        if index < self.n_actions - 1:
            return Rotate(index - self.n_place)
        return Swap()

    def _get_obs(self) -> Dict[str, Any]:
        assert self.state is not None
        k = self.engine.config.queue_size
        pieces = np.zeros((k, MAX_SHAPE_SIDE, MAX_SHAPE_SIDE), dtype=np.int8)
        for slot, piece in enumerate(self.state.queue):
            if piece is not None:
                h, w = piece.shape.shape
                pieces[slot, :h, :w] = piece.shape
        return {
            "board": self.state.board.occupancy(),
            "pieces": pieces,
            "pieces_remaining": sum(piece is not None for piece in self.state.queue),
            "score": np.array([self.state.score], dtype=np.int64),
        }

    def _get_info(self) -> Dict[str, Any]:
        assert self.state is not None
        return {
            "action_mask": self.get_action_mask(),
            "score": self.state.score,
            "lines_cleared_total": self.state.lines_cleared_total,
            "pieces_placed": self.state.pieces_placed,
        }

    def get_action_mask(self) -> np.ndarray:
        assert self.state is not None
        return _compute_action_mask(self.engine, self.state)

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        self._source = numpy_source(rng=self.np_random)
        self.state = self.engine.initialize(self._source)
        return self._get_obs(), self._get_info()

    def step(self, action):
        if self.state is None:
            raise RuntimeError("call reset() before step()")
        previous = self.state
        self.state, error = self.engine.apply(previous, self.decode_action(action), self._source)

        if error is None:
            reward = float(self.state.score - previous.score)
        else:
            reward = self.invalid_action_penalty
        terminated = bool(self.state.game_over)
        if terminated and not previous.game_over:
            reward += self.terminal_penalty

        info = self._get_info()
        info["error"] = None if error is None else error.value
        info["engine_score_delta"] = self.state.score - previous.score
        return self._get_obs(), reward, terminated, False, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array" or self.state is None:
            return None
        grid = self.state.board.occupancy()
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                color = (180, 110, 40) if grid[y, x] else (207, 192, 176)
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
        return img

    def close(self) -> None:
        pass
