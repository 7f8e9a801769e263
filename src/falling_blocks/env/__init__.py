"""Gymnasium environments for Falling Blocks."""

from __future__ import annotations

from gymnasium.envs.registration import register

from .falling_blocks_env import FallingBlocksEnv

# Register the reference 10x24 board
register(
    id="FallingBlocks-10x24-v0",
    entry_point="falling_blocks.env.falling_blocks_env:FallingBlocksEnv",
)

__all__ = ["FallingBlocksEnv"]
