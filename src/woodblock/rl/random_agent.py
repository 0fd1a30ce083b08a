from __future__ import annotations

import argparse
import logging
from typing import Optional

import gymnasium as gym
import numpy as np

# Ensure envs are registered
import woodblock.env  # noqa: F401


logger = logging.getLogger(__name__)


def run_random(steps: int = 200, seed: Optional[int] = None) -> float:
    """Play uniformly among masked-valid actions; returns the total reward."""
    env = gym.make("WoodBlock-8x8-v0")
    rng = np.random.default_rng(seed)
    obs, info = env.reset(seed=seed)
    total_reward = 0.0
    episodes = 0
    for _ in range(steps):
        valid = np.flatnonzero(info["action_mask"])
        if valid.size:
            action = int(rng.choice(valid))
        else:
            action = int(env.action_space.sample())
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated or truncated:
            episodes += 1
            logger.info("Episode %d finished with score %d", episodes, info["score"])
            obs, info = env.reset()
    env.close()
    return total_reward


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=200)
    p.add_argument("--seed", type=int, default=None)
    return p


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="[RANDOM_AGENT] %(asctime)s - %(message)s")
    args = build_parser().parse_args()
    total_reward = run_random(args.steps, args.seed)
    print(f"Random agent total reward: {total_reward:.2f}")


if __name__ == "__main__":  # pragma: no cover
    main()
