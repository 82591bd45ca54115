# sarcastic_runner/game/player.py
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Tuple
from .config import (
    PLAYER_X, PLAYER_W, PLAYER_STAND_H, PLAYER_DUCK_H,
    GROUND_Y, GRAVITY, JUMP_VY, MAX_JUMPS, GROUNDED_EPS
)

@dataclass
class Player:
    """
    Runner with a fixed x; only the vertical axis is simulated.
    - y is the TOP of the hitbox, feet = y + height
    - height toggles between the stand and duck presets, feet stay anchored
    """
    x: float = float(PLAYER_X)
    y: float = float(GROUND_Y - PLAYER_STAND_H)
    width: float = float(PLAYER_W)
    height: float = float(PLAYER_STAND_H)
    vy: float = 0.0
    jumps_used: int = 0
    ducking: bool = False

    @property
    def feet(self) -> float:
        return self.y + self.height

    @property
    def grounded(self) -> bool:
        return abs(self.feet - GROUND_Y) < GROUNDED_EPS

    @property
    def hitbox(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    def _set_height(self, h: float):
        feet = self.feet
        self.height = float(h)
        self.y = feet - self.height   # top moves, bottom does not

    def try_jump(self) -> bool:
        """Jump (or double jump). Returns False once both jumps are spent."""
        if self.jumps_used >= MAX_JUMPS:
            return False
        if self.ducking:
            self.stand_up()
        self.vy = JUMP_VY
        self.jumps_used += 1
        return True

    def try_duck(self) -> bool:
        if self.ducking or not self.grounded:
            return False
        self.ducking = True
        self._set_height(PLAYER_DUCK_H)
        return True

    def stand_up(self) -> bool:
        if not self.ducking:
            return False
        self.ducking = False
        self._set_height(PLAYER_STAND_H)
        return True

    def update_physics(self, dt: float):
        """Integrate vertical motion under gravity, then clamp to the ground line."""
        self.vy += GRAVITY * dt
        self.y += self.vy * dt

        if self.feet >= GROUND_Y:
            self.y = GROUND_Y - self.height
            self.vy = 0.0
            self.jumps_used = 0
