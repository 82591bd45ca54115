# sarcastic_runner/game/obstacles.py
from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import pygame
from .config import (
    SPAWN_X, AIR_Y, AIR_H, GROUND_Y, GROUND_OBS_H,
    NORMAL_SPAWN_INTERVAL_S, NORMAL_MIN_GAP, NORMAL_AIR_CHANCE, NORMAL_W_RANGE,
    CHAOS_AIR_CHANCE, CHAOS_W_RANGE, CHAOS_INTERVAL_RANGE_S,
    GROUND_CLEARANCE_TOL, COLOR_ROCK, COLOR_MISSILE, COLOR_MISSILE_CHAOS
)

logger = logging.getLogger(__name__)

Box = Tuple[float, float, float, float]  # x, y, w, h


class SpawnMode(Enum):
    NORMAL = "normal"
    CHAOS = "chaos"
    PAUSED = "paused"


@dataclass
class Obstacle:
    x: float
    y: float
    w: float
    h: float
    kind: str  # "ground" or "air"
    color: Tuple[int, int, int]

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def hitbox(self) -> Box:
        return (self.x, self.y, self.w, self.h)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.w), int(self.h))


def boxes_overlap(a: Box, b: Box) -> bool:
    """Strict AABB overlap: boxes that only touch along an edge do not collide."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return not (ax + aw <= bx or bx + bw <= ax or ay + ah <= by or by + bh <= ay)


def first_hit(player, obstacles: List[Obstacle]) -> Optional[Obstacle]:
    """
    First obstacle that actually ends the run, or None.
    Exemptions only apply to boxes that already overlap:
      - missile (air) while the player ducks
      - rock (ground) while the player's feet are above its top (+ tolerance)
    """
    me = player.hitbox
    for ob in obstacles:
        if not boxes_overlap(me, ob.hitbox):
            continue
        if ob.kind == "air" and player.ducking:
            continue
        if ob.kind == "ground" and player.feet < ob.y + GROUND_CLEARANCE_TOL:
            continue
        return ob
    return None


class ObstacleField:
    """
    Active obstacles plus the spawner that feeds them from the right edge.
    - NORMAL: one attempt per fixed interval, candidates too close to the
      rightmost obstacle are dropped
    - CHAOS: randomized interval per spawn, no spacing rule
    - PAUSED: nothing spawns (chaser cinematic)
    """
    def __init__(self, seed: int | None = None,
                 chaos_interval_range: Tuple[float, float] = CHAOS_INTERVAL_RANGE_S):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.chaos_interval_range = chaos_interval_range
        self.obstacles: List[Obstacle] = []
        self.spawn_elapsed = 0.0
        self.chaos_interval = self._draw_chaos_interval()

    def _draw_chaos_interval(self) -> float:
        lo, hi = self.chaos_interval_range
        return self.rng.uniform(lo, hi)

    def reset_timer(self):
        self.spawn_elapsed = 0.0

    def rightmost_x(self) -> Optional[float]:
        return max((o.x for o in self.obstacles), default=None)

    def _make(self, air_chance: float, w_range: Tuple[int, int], air_color) -> Obstacle:
        is_air = self.rng.random() < air_chance
        w = self.rng.randint(*w_range)
        if is_air:
            return Obstacle(x=float(SPAWN_X), y=float(AIR_Y), w=float(w), h=float(AIR_H),
                            kind="air", color=air_color)
        return Obstacle(x=float(SPAWN_X), y=float(GROUND_Y - GROUND_OBS_H), w=float(w),
                        h=float(GROUND_OBS_H), kind="ground", color=COLOR_ROCK)

    def spawn_normal(self) -> Optional[Obstacle]:
        candidate = self._make(NORMAL_AIR_CHANCE, NORMAL_W_RANGE, COLOR_MISSILE)
        rightmost = self.rightmost_x()
        if rightmost is not None and rightmost > 0:
            gap = candidate.x - rightmost
            if gap < NORMAL_MIN_GAP:
                logger.debug("spawn skipped: gap %.1f < %d", gap, NORMAL_MIN_GAP)
                return None
        self.obstacles.append(candidate)
        return candidate

    def spawn_chaos(self) -> Obstacle:
        ob = self._make(CHAOS_AIR_CHANCE, CHAOS_W_RANGE, COLOR_MISSILE_CHAOS)
        self.obstacles.append(ob)
        return ob

    def scroll(self, speed: float, dt: float):
        """Move everything left and drop obstacles fully past the left edge."""
        dx = speed * dt
        for ob in self.obstacles:
            ob.x -= dx
        self.obstacles = [o for o in self.obstacles if o.right > 0]

    def tick(self, dt: float, mode: SpawnMode) -> Optional[Obstacle]:
        """Advance the spawn timer and maybe emit one obstacle."""
        if mode is SpawnMode.PAUSED:
            return None
        self.spawn_elapsed += dt

        if mode is SpawnMode.NORMAL:
            if self.spawn_elapsed >= NORMAL_SPAWN_INTERVAL_S:
                self.spawn_elapsed = 0.0   # reset on every attempt, even a skipped one
                return self.spawn_normal()
            return None

        if self.spawn_elapsed >= self.chaos_interval:
            self.spawn_elapsed = 0.0
            self.chaos_interval = self._draw_chaos_interval()
            return self.spawn_chaos()
        return None

    def draw(self, surf: pygame.Surface, t: float = 0.0):
        for ob in self.obstacles:
            if ob.kind == "ground":
                draw_rock(surf, ob)
            else:
                draw_missile(surf, ob, t)


def draw_rock(surf: pygame.Surface, ob: Obstacle):
    """Rough rock: bumpy top edge over a flat base."""
    x, y, w, h = ob.rect
    segments = 5
    pts = [(x, y + h * 0.6)]
    for i in range(segments + 1):
        px = x + i * w / segments
        py = y + h * 0.6 - math.sin(i * math.pi / segments) * h * 0.3
        pts.append((px, py))
    pts += [(x + w, y + h), (x, y + h)]
    pygame.draw.polygon(surf, ob.color, pts)
    shade = (200, 200, 200)
    pygame.draw.lines(surf, shade, False,
                      [(x + w * 0.2, y + h * 0.7), (x + w * 0.4, y + h * 0.5), (x + w * 0.6, y + h * 0.7)], 2)


def draw_missile(surf: pygame.Surface, ob: Obstacle, t: float):
    """Missile flying left, with a flickering exhaust behind it."""
    x, y, w, h = ob.rect
    pygame.draw.rect(surf, (136, 136, 136), pygame.Rect(int(x), int(y + h * 0.25), int(w * 0.7), int(h * 0.5)))
    pygame.draw.polygon(surf, (85, 85, 85), [(x, y + h * 0.5), (x + w * 0.3, y + h * 0.25), (x + w * 0.3, y + h * 0.75)])
    pygame.draw.polygon(surf, (102, 102, 102), [(x + w * 0.5, y + h * 0.25), (x + w * 0.8, y + h * 0.1), (x + w * 0.7, y + h * 0.4)])
    pygame.draw.polygon(surf, (102, 102, 102), [(x + w * 0.5, y + h * 0.75), (x + w * 0.8, y + h * 0.9), (x + w * 0.7, y + h * 0.6)])

    fire_h = h * 0.6 + math.sin(t * 10.0) * h * 0.1
    fire_w = w * 0.3
    fx, fy = x + w * 0.7, y + h * 0.5
    pygame.draw.ellipse(surf, (255, 60, 0), pygame.Rect(int(fx), int(fy - fire_h / 2), int(fire_w), int(fire_h)))
    pygame.draw.ellipse(surf, ob.color, pygame.Rect(int(fx), int(fy - fire_h / 4), int(fire_w * 0.6), int(fire_h / 2)))
