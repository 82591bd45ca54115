# sarcastic_runner/env/runner_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from sarcastic_runner.game.config import WIDTH, HEIGHT, FPS
from sarcastic_runner.game.session import Session, GameState, InputEvent
from sarcastic_runner.game.render import Fonts, render_session
from sarcastic_runner.env.observations import build_observation, observation_bounds

ACTION_RUN = 0
ACTION_JUMP = 1
ACTION_DUCK = 2


class RunnerEnv(gym.Env):
    """
    Sarcastic Runner Gymnasium environment (vector observations).
    - Simulation at 60 Hz (internal), fixed dt.
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Actions: 0 = keep running, 1 = jump, 2 = duck (held while repeated).
    - Observation: see observations.build_observation, float32.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)

        self.sim_fps = 60
        self.dt = 1.0 / self.sim_fps

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        self.action_space = gym.spaces.Discrete(3)
        low, high = observation_bounds()
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        self.session: Optional[Session] = None
        self.timestep: int = 0

        self.screen = None
        self.clock = None
        self.fonts = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # Session RNG derives from np_random: same reset seed -> same obstacle stream
        session_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.session = Session(seed=session_seed)
        self.session.push(InputEvent.START)
        self.session.update(0.0)
        self.timestep = 0

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), self._info()

    def step(self, action):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.session is not None, "Call reset() before step()"
        s = self.session

        if action == ACTION_JUMP:
            s.push(InputEvent.JUMP)
        if action == ACTION_DUCK and not s.player.ducking:
            s.push(InputEvent.DUCK_PRESS)
        elif action != ACTION_DUCK and s.player.ducking:
            s.push(InputEvent.DUCK_RELEASE)

        for _ in range(self.frame_skip):
            s.update(self.dt)
            if s.state is not GameState.RUNNING:
                break

        alive = s.state is GameState.RUNNING
        reward = 1.0 if alive else -1.0

        self.timestep += 1
        terminated = not alive
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = True

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._info()

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.session is not None
        return build_observation(self.session)

    def _info(self) -> Dict[str, Any]:
        s = self.session
        return {
            "seed": s.seed,
            "timestep": self.timestep,
            "score": float(s.score),
            "speed": float(s.speed),
            "final_level": s.final_level,
            "chaos": s.chaos,
            "cinematic_phase": s.cinematic.phase.value,
            "state": s.state.value,
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.session is None:
            return None
        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Sarcastic Runner - Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            self.fonts = Fonts()

        if self.render_mode == "human":
            # Pump the event queue so the OS doesn't think we're hung
            pygame.event.pump()

        render_session(self.screen, self.fonts, self.session)

        if self.render_mode == "human":
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata.get("render_fps", 60))
            return None

        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.fonts = None
