"""Gymnasium environments for Wood Block."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="WoodBlock-8x8-v0",
    entry_point="woodblock.env.wood_block_env:WoodBlockEnv",
)

__all__ = ["WoodBlock-8x8-v0"]
