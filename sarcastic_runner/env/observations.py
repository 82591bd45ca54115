# sarcastic_runner/env/observations.py
from __future__ import annotations
from typing import List, Tuple
import numpy as np

from sarcastic_runner.game.config import (
    WIDTH, GROUND_Y, BASE_SPEED, MAX_SPEED, MAX_JUMPS, JUMP_VY,
    CHAOS_W_RANGE, NORMAL_W_RANGE, OBS_NEXT_OBSTACLES
)

VY_SCALE = abs(JUMP_VY) * 1.5          # |vy| beyond this is clipped
MAX_OBS_W = max(CHAOS_W_RANGE[1], NORMAL_W_RANGE[1])
OBS_DIM = 6 + 3 * OBS_NEXT_OBSTACLES

def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)

def observation_bounds() -> Tuple[np.ndarray, np.ndarray]:
    """(low, high) matching build_observation's layout."""
    low = np.array([0.0, -1.0, 0.0, 0.0, 0.0, 0.0] + [0.0, 0.0, 0.0] * OBS_NEXT_OBSTACLES, dtype=np.float32)
    high = np.ones(OBS_DIM, dtype=np.float32)
    return low, high

def build_observation(session) -> np.ndarray:
    """
    Returns a fixed (6 + 3*N,) float32 vector:
      [ height_above_ground, vy_norm, jumps_used, ducking, speed_norm, cinematic,
        dx@1, air@1, w@1, ..., dx@N, air@N, w@N ]
    - height_above_ground in [0,1] (0 = feet on the ground line)
    - vy_norm in [-1,1] (negative = moving up)
    - dx is the gap from the player's right edge to the obstacle's left edge / WIDTH,
      0 when the obstacle already reaches the player
    - missing obstacle slots: dx=1, air=0, w=0
    """
    p = session.player
    height = _clamp01((GROUND_Y - p.feet) / float(GROUND_Y))
    vy_norm = max(-1.0, min(1.0, p.vy / VY_SCALE))
    jumps = _clamp01(p.jumps_used / float(MAX_JUMPS))
    ducking = 1.0 if p.ducking else 0.0
    speed = _clamp01((session.speed - BASE_SPEED) / (MAX_SPEED - BASE_SPEED))
    cinematic = 1.0 if session.cinematic.active else 0.0

    feats: List[float] = [height, vy_norm, jumps, ducking, speed, cinematic]

    player_right = p.x + p.width
    ahead = sorted((o for o in session.field.obstacles if o.right > p.x), key=lambda o: o.x)
    for i in range(OBS_NEXT_OBSTACLES):
        if i < len(ahead):
            ob = ahead[i]
            dx = _clamp01((ob.x - player_right) / float(WIDTH))
            feats.extend([dx, 1.0 if ob.kind == "air" else 0.0, _clamp01(ob.w / float(MAX_OBS_W))])
        else:
            feats.extend([1.0, 0.0, 0.0])

    return np.asarray(feats, dtype=np.float32)
