# sarcastic_runner/game/session.py
from __future__ import annotations
import logging
import math
import random
from collections import deque
from enum import Enum
from typing import Deque, Optional
from .config import (
    BASE_SPEED, SPEED_GROWTH, SCORE_PER_S, FINAL_LEVEL_SCORE,
    FIRST_MESSAGE_AT, MESSAGE_STEP, MESSAGES, FINAL_LEVEL_MESSAGE, QUIT_NOTICE
)
from .player import Player
from .obstacles import ObstacleField, Obstacle, SpawnMode, first_hit
from .cinematic import ChaserCinematic, clamp_speed

logger = logging.getLogger(__name__)


class GameState(Enum):
    WAITING = "waiting"
    RUNNING = "running"
    GAMEOVER = "gameover"
    WIN = "win"


class InputEvent(Enum):
    START = "start"
    JUMP = "jump"
    ACTION = "action"  # space/up: start from the title, jump otherwise
    DUCK_PRESS = "duck_press"
    DUCK_RELEASE = "duck_release"
    RESTART = "restart"
    QUIT = "quit"
    SECRET_WIN = "secret_win"


TERMINAL_STATES = (GameState.GAMEOVER, GameState.WIN)


class Session:
    """
    Everything one player session owns: the current run, the game state and
    the high score. Inputs are queued with push() and applied at the start of
    the next update(dt), so a frame only ever sees a consistent state.

    Per running frame, in this order:
      speed growth -> obstacle scroll/cleanup -> spawn -> player physics
      -> final level / cinematic -> collision -> score & messages
    """

    def __init__(self, seed: int | None = None, highscore_store=None, audio=None):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.highscore_store = highscore_store
        self.audio = audio
        self.high_score = highscore_store.load() if highscore_store is not None else 0
        self.state = GameState.WAITING
        self.notice = ""
        self._inputs: Deque[InputEvent] = deque()
        self._new_run()

    # -------------------- Run lifecycle --------------------

    def _new_run(self):
        """Throw away the current run and build a fresh one (high score survives)."""
        self.player = Player()
        self.field = ObstacleField(self.rng.randrange(0, 2**32 - 1))
        self.cinematic = ChaserCinematic()
        self.speed = BASE_SPEED
        self.clock = 0.0
        self.score = 0.0
        self.fake_progress = 0.0
        self.final_level = False
        self.chaos = False
        self.message = ""
        self.next_msg_at = float(FIRST_MESSAGE_AT)
        self.hit: Optional[Obstacle] = None

    def _start(self):
        self._new_run()
        self.notice = ""
        self.state = GameState.RUNNING
        logger.info("run started (seed=%d)", self.field.seed)

    def _reset_to_title(self):
        self._new_run()
        self.state = GameState.WAITING

    def _finish(self, state: GameState):
        self.state = state
        best = int(math.floor(self.score))
        logger.info("run ended: %s, score=%d", state.value, best)
        if best > self.high_score:
            self.high_score = best
            if self.highscore_store is not None:
                self.highscore_store.save(best)

    # -------------------- Input --------------------

    def push(self, event: InputEvent):
        self._inputs.append(event)

    def _drain_inputs(self):
        while self._inputs:
            self._apply(self._inputs.popleft())

    def _play(self, cue: str):
        if self.audio is not None:
            self.audio.play(cue)

    def _apply(self, event: InputEvent):
        st = self.state
        if event is InputEvent.ACTION:
            event = InputEvent.START if st is GameState.WAITING else InputEvent.JUMP
        if event is InputEvent.QUIT:
            logger.info("quit requested from %s", st.value)
            self._reset_to_title()
            self.notice = QUIT_NOTICE
        elif event is InputEvent.RESTART and st in TERMINAL_STATES:
            self._reset_to_title()
        elif event is InputEvent.START and st is GameState.WAITING:
            self._start()
        elif st is not GameState.RUNNING:
            logger.debug("ignored %s while %s", event.value, st.value)
        elif event is InputEvent.JUMP:
            if self.player.try_jump():
                self._play("jump")
        elif event is InputEvent.DUCK_PRESS:
            if self.player.try_duck():
                self._play("duck")
        elif event is InputEvent.DUCK_RELEASE:
            self.player.stand_up()
        elif event is InputEvent.SECRET_WIN:
            self._finish(GameState.WIN)

    # -------------------- Simulation --------------------

    @property
    def spawn_mode(self) -> SpawnMode:
        if not self.final_level:
            return SpawnMode.NORMAL
        if self.chaos:
            return SpawnMode.CHAOS
        return SpawnMode.PAUSED

    def enter_final_level(self) -> bool:
        """Final level always opens with the chaser cinematic; chaos comes after it."""
        if self.final_level:
            return False
        self.final_level = True
        self.message = FINAL_LEVEL_MESSAGE
        self.cinematic.start(self.speed)
        self.field.reset_timer()
        logger.info("final level reached at score %d", int(self.score))
        return True

    def update(self, dt: float):
        self._drain_inputs()
        if self.state is not GameState.RUNNING:
            return

        self.clock += dt
        self.speed = clamp_speed(self.speed + SPEED_GROWTH * dt)

        self.field.scroll(self.speed, dt)
        self.field.tick(dt, self.spawn_mode)

        self.player.update_physics(dt)

        if self.score >= FINAL_LEVEL_SCORE:
            self.enter_final_level()
        self.speed = self.cinematic.update(dt, self.speed)
        if self.cinematic.done and not self.chaos:
            self.chaos = True
            logger.info("chaos spawning enabled")

        if not self.cinematic.active:
            hit = first_hit(self.player, self.field.obstacles)
            if hit is not None:
                self.hit = hit
                self._finish(GameState.GAMEOVER)
                return

        self.fake_progress += self.speed * dt
        self.score += dt * SCORE_PER_S
        if math.floor(self.score) > self.next_msg_at:
            self.message = self.rng.choice(MESSAGES)
            self.next_msg_at += self.rng.uniform(*MESSAGE_STEP)
