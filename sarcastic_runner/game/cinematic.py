# sarcastic_runner/game/cinematic.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
import pygame
from .config import (
    WIDTH, GROUND_Y, PLAYER_X, BASE_SPEED, MAX_SPEED, FOLLOW_SPEED_GROWTH,
    CHASER_W, CHASER_H, BIG_CHASER_W, BIG_CHASER_H,
    CHASER_START_OFFSET, CHASER_FOLLOW_FACTOR, FOLLOW_DURATION_S, PASS_FACTOR,
    PASSED_WAIT_S, RETURN_FACTOR, BIG_RETURN_FACTOR, CHASER_EXIT_MARGIN,
    BIG_CHASER_SPAWN_OFFSET, BIG_CHASER_EXIT_MARGIN, FINAL_SPEED_BOOST,
    COLOR_CHASER, COLOR_BIG_CHASER
)

logger = logging.getLogger(__name__)


def clamp_speed(v: float) -> float:
    return max(BASE_SPEED, min(MAX_SPEED, v))


class ChaserPhase(Enum):
    IDLE = "idle"
    FOLLOW = "follow"
    PASS = "pass"
    PASSED = "passed"
    RETURNING = "returning"
    DONE = "done"


@dataclass
class Chaser:
    x: float
    y: float
    w: float
    h: float
    speed: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.w), int(self.h))


class ChaserCinematic:
    """
    One-shot scripted sequence played on entering the final level:
      follow (30s) -> pass (overtake at 3x) -> passed (5s wait)
      -> returning (chaser + big chaser run back left) -> done
    Timing is simulation time (sum of dt), never the wall clock.
    Chasers are not obstacles: nothing collides with them.
    """
    def __init__(self):
        self.phase = ChaserPhase.IDLE
        self.clock = 0.0
        self.phase_started_at = 0.0
        self.chaser = Chaser(x=float(PLAYER_X - CHASER_START_OFFSET), y=float(GROUND_Y - CHASER_H),
                             w=float(CHASER_W), h=float(CHASER_H))
        # parked far away until the return run
        self.big_chaser = Chaser(x=99999.0, y=float(GROUND_Y - BIG_CHASER_H),
                                 w=float(BIG_CHASER_W), h=float(BIG_CHASER_H))

    @property
    def active(self) -> bool:
        return self.phase not in (ChaserPhase.IDLE, ChaserPhase.DONE)

    @property
    def done(self) -> bool:
        return self.phase is ChaserPhase.DONE

    def _enter(self, phase: ChaserPhase):
        logger.info("cinematic %s -> %s at t=%.2fs", self.phase.value, phase.value, self.clock)
        self.phase = phase
        self.phase_started_at = self.clock

    def _in_phase_for(self) -> float:
        return self.clock - self.phase_started_at

    def start(self, world_speed: float) -> bool:
        """Begin the follow phase. Runs once: ignored unless idle."""
        if self.phase is not ChaserPhase.IDLE:
            return False
        self.chaser.x = float(PLAYER_X - CHASER_START_OFFSET)
        self.chaser.y = float(GROUND_Y - self.chaser.h)
        self.chaser.speed = world_speed * CHASER_FOLLOW_FACTOR
        self._enter(ChaserPhase.FOLLOW)
        return True

    def update(self, dt: float, world_speed: float) -> float:
        """Advance the sequence; returns the (possibly modified) world speed."""
        if not self.active:
            return world_speed
        self.clock += dt

        if self.phase is ChaserPhase.FOLLOW:
            self.chaser.x += self.chaser.speed * dt
            world_speed = clamp_speed(world_speed + FOLLOW_SPEED_GROWTH * dt)
            if self._in_phase_for() >= FOLLOW_DURATION_S:
                self.chaser.speed = world_speed * PASS_FACTOR
                self._enter(ChaserPhase.PASS)

        elif self.phase is ChaserPhase.PASS:
            self.chaser.x += self.chaser.speed * dt
            if self.chaser.x > WIDTH + CHASER_EXIT_MARGIN:
                self._enter(ChaserPhase.PASSED)

        elif self.phase is ChaserPhase.PASSED:
            if self._in_phase_for() >= PASSED_WAIT_S:
                self.chaser.x = float(WIDTH + CHASER_EXIT_MARGIN)
                self.chaser.speed = -world_speed * RETURN_FACTOR
                self.big_chaser.x = float(WIDTH + BIG_CHASER_SPAWN_OFFSET)
                self.big_chaser.speed = -world_speed * BIG_RETURN_FACTOR
                self._enter(ChaserPhase.RETURNING)

        elif self.phase is ChaserPhase.RETURNING:
            self.chaser.x += self.chaser.speed * dt
            self.big_chaser.x += self.big_chaser.speed * dt
            if self.big_chaser.right < -BIG_CHASER_EXIT_MARGIN:
                world_speed = clamp_speed(world_speed * FINAL_SPEED_BOOST)
                self._enter(ChaserPhase.DONE)

        return world_speed

    def draw(self, surf: pygame.Surface):
        if not self.active:
            return
        if self.phase in (ChaserPhase.FOLLOW, ChaserPhase.PASS, ChaserPhase.RETURNING):
            pygame.draw.rect(surf, COLOR_CHASER, self.chaser.rect)
        if self.phase is ChaserPhase.RETURNING:
            pygame.draw.rect(surf, COLOR_BIG_CHASER, self.big_chaser.rect)
