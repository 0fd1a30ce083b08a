from __future__ import annotations

from typing import Optional

import numpy as np
import gymnasium as gym


class ResampleInvalidActionWrapper(gym.Wrapper):
    """Replace a rejected action with a valid one before it reaches the engine.

    Legal placements are preferred over rotations and swaps. The replaced
    index is reported as ``info["resampled_from"]``.
    """

    def _replacement(self, action: int) -> Optional[int]:
        base = self.env.unwrapped
        mask = base.get_action_mask()
        if not 0 <= action < mask.shape[0] or mask[action]:
            return None
        placements = np.flatnonzero(mask[: base.n_place])
        candidates = placements if placements.size else np.flatnonzero(mask)
        if candidates.size == 0:
            return None
        return int(self.np_random.choice(candidates))

    def step(self, action):  # type: ignore[override]
        action = int(action)
        replacement = self._replacement(action)
        obs, reward, terminated, truncated, info = self.env.step(action if replacement is None else replacement)
        info["resampled_from"] = None if replacement is None else action
        return obs, reward, terminated, truncated, info
