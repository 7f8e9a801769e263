from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Action, GameConfig, TetrisGame, BlockColor


class FallingBlocksEnv(gym.Env):
    """
    One action per engine command; the reward is the number of rows completed.

    Actions (6 total), see `Action`:
      0: Move Left
      1: Move Right
      2: Rotate
      3: Soft Drop (may lock)
      4: Hard Drop
      5: No-op

    Observation is `TetrisGame.get_state()`: locked blocks as colour codes,
    the falling piece as negated colour codes, row 0 at the bottom.
    """

    metadata = {"render_modes": []}

    def __init__(self, config: Optional[GameConfig] = None, max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.game = TetrisGame(config)
        self.max_episode_steps = int(max_episode_steps)

        top = max(int(c) for c in BlockColor)
        height, width = self.game.config.height, self.game.config.width
        self.observation_space = spaces.Box(low=-top, high=top, shape=(height, width), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.game.get_state().astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "rows_completed": self.game.rows_completed(),
            "drop_y": None if self.game.has_lost() else self.game.get_current_piece_drop_y(),
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset(seed)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = Action(int(action))
        rows_before = self.game.rows_completed()
        piece_before = self.game.current

        accepted = self.game.step(action)

        rows = self.game.rows_completed() - rows_before
        self._steps += 1
        terminated = bool(self.game.has_lost())
        truncated = self._steps >= self.max_episode_steps

        info = self._get_info()
        info["accepted"] = bool(accepted)
        info["locked"] = self.game.current is not piece_before
        return self._get_obs(), float(rows), terminated, truncated, info

    def render(self) -> None:
        # Drawing is left to the embedding application
        return None

    def close(self) -> None:
        pass
