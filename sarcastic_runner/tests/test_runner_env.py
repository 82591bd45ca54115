# sarcastic_runner/tests/test_runner_env.py
"""
Tests for RunnerEnv (Gymnasium environment).

Usage (from repo root):
  python -m pytest sarcastic_runner/tests/test_runner_env.py
  python -m sarcastic_runner.tests.test_runner_env      # same checks, plain script
"""

from __future__ import annotations
from typing import List, Tuple

import numpy as np
from gymnasium.utils.env_checker import check_env

from sarcastic_runner.env.runner_env import RunnerEnv, ACTION_RUN, ACTION_DUCK
from sarcastic_runner.game.config import WIDTH, HEIGHT


def test_api_check():
    """Verify Gym API contract (spaces, step/reset signatures, types)."""
    env = RunnerEnv(frame_skip=4)
    try:
        check_env(env, skip_render_check=True)
    finally:
        env.close()


def test_smoke(steps: int = 300, seed: int = 123):
    """Short random rollout: no crashes, obs in space, reward type, proper terminations."""
    env = RunnerEnv(frame_skip=4)
    try:
        env.action_space.seed(seed)
        obs, info = env.reset(seed=seed)
        assert env.observation_space.contains(obs), "Initial observation not in space"
        assert info["state"] == "running"

        for t in range(steps):
            obs, r, term, trunc, info = env.step(env.action_space.sample())
            assert isinstance(r, float), "Reward must be a float"
            assert env.observation_space.contains(obs), f"Step {t}: observation out of bounds"
            if term or trunc:
                break
    finally:
        env.close()


def test_determinism(steps: int = 200, seed: int = 7):
    """Same seed + same action sequence => identical obs/reward/terminal flags."""
    def rollout(action_seq: List[int]) -> List[Tuple[np.ndarray, float, bool, bool]]:
        env = RunnerEnv(frame_skip=4)
        traj = []
        try:
            env.reset(seed=seed)
            for a in action_seq:
                obs, r, term, trunc, _ = env.step(int(a))
                traj.append((obs.copy(), float(r), bool(term), bool(trunc)))
                if term or trunc:
                    break
        finally:
            env.close()
        return traj

    rng = np.random.RandomState(42)
    action_seq = [int(rng.randint(0, 3)) for _ in range(steps)]
    t1, t2 = rollout(action_seq), rollout(action_seq)

    assert len(t1) == len(t2), "Determinism: trajectory length mismatch"
    for i, ((o1, r1, te1, tr1), (o2, r2, te2, tr2)) in enumerate(zip(t1, t2)):
        assert np.allclose(o1, o2), f"Determinism: obs mismatch at step {i}"
        assert (r1, te1, tr1) == (r2, te2, tr2), f"Determinism: transition mismatch at step {i}"


def test_idle_runner_eventually_crashes():
    env = RunnerEnv(frame_skip=4, time_limit_seconds=None)
    try:
        env.reset(seed=0)
        for _ in range(60 * 15):
            obs, r, term, trunc, info = env.step(ACTION_RUN)
            if term:
                break
        assert term, "A runner that never reacts must hit something"
        assert r == -1.0 and info["state"] == "gameover"
    finally:
        env.close()


def test_time_limit_truncates():
    env = RunnerEnv(frame_skip=4, time_limit_seconds=1.0)   # 15 decisions
    try:
        env.reset(seed=1)
        for i in range(15):
            obs, r, term, trunc, info = env.step(ACTION_RUN)
        assert trunc and not term, "Expected truncation after 1 simulated second"
        assert r == 1.0
    finally:
        env.close()


def test_duck_action_is_held_then_released():
    env = RunnerEnv(frame_skip=2)
    try:
        env.reset(seed=2)
        obs, *_ = env.step(ACTION_DUCK)
        assert obs[3] == 1.0, "Duck action should duck"
        obs, *_ = env.step(ACTION_DUCK)
        assert obs[3] == 1.0, "Repeated duck keeps ducking"
        obs, *_ = env.step(ACTION_RUN)
        assert obs[3] == 0.0, "Any other action releases the duck"
    finally:
        env.close()


def test_rgb_array_render(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    env = RunnerEnv(render_mode="rgb_array")
    try:
        env.reset(seed=3)
        env.step(ACTION_RUN)
        frame = env.render()
        assert frame.shape == (HEIGHT, WIDTH, 3) and frame.dtype == np.uint8
    finally:
        env.close()


def main():
    test_api_check(); print("✓ API check ok")
    test_smoke(); print("✓ Smoke test ok")
    test_determinism(); print("✓ Determinism ok")
    test_idle_runner_eventually_crashes(); print("✓ Crash ok")
    test_time_limit_truncates(); print("✓ Truncation ok")
    print("🎉 All selected tests passed")


if __name__ == "__main__":
    main()
