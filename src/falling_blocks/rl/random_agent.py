from __future__ import annotations

import argparse
from typing import Optional

import gymnasium as gym

# Ensure envs are registered
import falling_blocks.env  # noqa: F401


def run_random(steps: int = 200, seed: Optional[int] = None) -> int:
    env = gym.make("FallingBlocks-10x24-v0")
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)
    total_rows = 0
    games = 1
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_rows += int(reward)
        if terminated or truncated:
            obs, info = env.reset()
            games += 1
    env.close()
    print(f"Random agent completed {total_rows} rows over {games} game(s)")
    return total_rows


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=200)
    p.add_argument("--seed", type=int, default=None)
    return p


def main() -> None:
    args = build_parser().parse_args()
    run_random(args.steps, args.seed)


if __name__ == "__main__":  # pragma: no cover
    main()
