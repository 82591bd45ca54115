# /experiments/sanity_rollout.py
"""
Sanity rollouts for RunnerEnv:
- Runs RANDOM and/or TINY-HEURISTIC policies over fixed seeds
- Appends one row per episode to an episodes CSV for notebook analysis

Usage examples (from repo root):
  # Run both policies over 20 default seeds, frame_skip=4:
  python -m experiments.sanity_rollout --policies both

  # Only heuristic, custom seeds:
  python -m experiments.sanity_rollout --policies heuristic --seeds 111,222,333

  # Quick random-only smoke with fewer steps:
  python -m experiments.sanity_rollout --policies random --steps 300 --out-dir /tmp/sanity
"""

from __future__ import annotations
import argparse
import csv
from pathlib import Path
from typing import List, Tuple

import numpy as np

from sarcastic_runner.env.runner_env import RunnerEnv, ACTION_RUN, ACTION_JUMP, ACTION_DUCK


# ------------------------ Policies ------------------------

def random_policy_init(action_seed: int):
    rng = np.random.RandomState(action_seed)
    def act(_obs: np.ndarray) -> int:
        # mostly run, sometimes jump or duck
        return int(rng.choice(3, p=[0.8, 0.1, 0.1]))
    return act

def tiny_heuristic_policy_init(react_dx: float = 0.12):
    """
    Very small rule on the nearest obstacle (obs[6:9] = dx, air, width):
      - missile close ahead -> duck
      - rock close ahead and feet on the ground -> jump
      - otherwise keep running
    """
    def act(obs: np.ndarray) -> int:
        height, dx, air = obs[0], obs[6], obs[7]
        if dx > react_dx:
            return ACTION_RUN
        if air == 1.0:
            return ACTION_DUCK
        return ACTION_JUMP if height <= 0.001 else ACTION_RUN
    return act


# ------------------------ Rollout core ------------------------

def ensure_dir(p: Path):
    p.mkdir(parents=True, exist_ok=True)

def write_episode_row(csv_path: Path, header: List[str], row: List):
    exists = csv_path.exists()
    with csv_path.open("a", newline="") as f:
        w = csv.writer(f)
        if not exists:
            w.writerow(header)
        w.writerow(row)

def run_one_episode(policy_name: str,
                    seed: int,
                    frame_skip: int,
                    steps_limit: int,
                    time_limit_seconds: float = 60.0) -> Tuple[int, float, float, bool, bool, bool]:
    """
    Returns: (ep_len, ret_sum, score, terminated, truncated, reached_final_level)
    """
    env = RunnerEnv(frame_skip=frame_skip, time_limit_seconds=time_limit_seconds)

    if policy_name == "random":
        # Make action RNG seed a function of seed for determinism
        policy = random_policy_init(10_000 + seed)
    elif policy_name == "heuristic":
        policy = tiny_heuristic_policy_init()
    else:
        raise ValueError("Unknown policy")

    ret_sum = 0.0
    ep_len = 0
    term = trunc = False
    info = {}

    try:
        obs, info = env.reset(seed=seed)
        for _ in range(steps_limit):
            obs, r, term, trunc, info = env.step(policy(obs))
            ret_sum += float(r)
            ep_len += 1
            if term or trunc:
                break
    finally:
        env.close()

    score = float(info.get("score", 0.0))
    return ep_len, ret_sum, score, bool(term), bool(trunc), bool(info.get("final_level", False))


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--policies", type=str, default="both",
                    choices=["random", "heuristic", "both"],
                    help="Which policy to run")
    ap.add_argument("--seeds", type=str, default="",
                    help="Comma-separated seeds. If empty, uses 20 defaults: 101..120")
    ap.add_argument("--frame-skip", type=int, default=4,
                    help="Sim frames per decision step")
    ap.add_argument("--steps", type=int, default=10_000,
                    help="Hard cap on decision steps (env may truncate earlier)")
    ap.add_argument("--time-limit", type=float, default=60.0,
                    help="Env truncation in simulated seconds")
    ap.add_argument("--out-dir", type=str, default="experiments/runs",
                    help="Directory to store episodes.csv")
    args = ap.parse_args()

    out_dir = Path(args.out_dir)
    ensure_dir(out_dir)

    if args.seeds.strip():
        seeds = [int(s) for s in args.seeds.split(",") if s.strip()]
    else:
        seeds = list(range(101, 121))  # 20 fixed eval seeds by default

    episodes_csv = out_dir / "episodes.csv"
    header = [
        "env_name", "policy_name", "seed",
        "frame_skip", "decision_hz",
        "episode_len_decisions", "return_sum", "score",
        "terminated", "truncated", "final_level",
    ]
    sim_fps = 60
    decision_hz = sim_fps / max(1, args.frame_skip)

    to_run = ["random", "heuristic"] if args.policies == "both" else [args.policies]

    print(f"Running policies={to_run} on {len(seeds)} seeds "
          f"(frame_skip={args.frame_skip}, decision_hz≈{decision_hz:.1f})")
    print(f"Writing summaries to {episodes_csv}")

    for policy_name in to_run:
        for seed in seeds:
            ep_len, ret_sum, score, terminated, truncated, final_level = run_one_episode(
                policy_name=policy_name,
                seed=seed,
                frame_skip=args.frame_skip,
                steps_limit=args.steps,
                time_limit_seconds=args.time_limit,
            )
            row = [
                "RunnerEnv", policy_name, seed,
                args.frame_skip, decision_hz,
                ep_len, f"{ret_sum:.1f}", f"{score:.1f}",
                int(terminated), int(truncated), int(final_level),
            ]
            write_episode_row(episodes_csv, header, row)

            print(f"[{policy_name}] seed={seed}  len={ep_len}  score={score:.1f}  "
                  f"ret={ret_sum:.1f}  term={terminated} trunc={truncated}  final={final_level}")

    print("✓ Sanity rollouts complete")


if __name__ == "__main__":
    main()
