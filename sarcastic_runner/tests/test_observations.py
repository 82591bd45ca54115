# sarcastic_runner/tests/test_observations.py
import numpy as np

from sarcastic_runner.env.observations import build_observation, observation_bounds, OBS_DIM, MAX_OBS_W
from sarcastic_runner.game.config import WIDTH, AIR_Y, AIR_H, GROUND_Y, GROUND_OBS_H, COLOR_ROCK, COLOR_MISSILE
from sarcastic_runner.game.obstacles import Obstacle
from sarcastic_runner.game.session import Session, InputEvent

DT = 1.0 / 60.0


def started() -> Session:
    s = Session(seed=3)
    s.push(InputEvent.START)
    s.update(0.0)
    return s


def test_shape_dtype_and_bounds():
    obs = build_observation(started())
    low, high = observation_bounds()
    assert isinstance(obs, np.ndarray) and obs.dtype == np.float32 and obs.shape == (OBS_DIM,)
    assert np.all(obs >= low) and np.all(obs <= high), "Observation out of bounds"


def test_empty_slots_use_sentinels():
    obs = build_observation(started())
    assert obs[0] == 0.0, "Player starts on the ground"
    for i in range(6, OBS_DIM, 3):
        assert list(obs[i:i + 3]) == [1.0, 0.0, 0.0]


def test_next_obstacles_sorted_and_behind_player_ignored():
    s = started()
    s.field.obstacles = [
        Obstacle(x=700.0, y=float(GROUND_Y - GROUND_OBS_H), w=30.0, h=float(GROUND_OBS_H), kind="ground", color=COLOR_ROCK),
        Obstacle(x=400.0, y=float(AIR_Y), w=50.0, h=float(AIR_H), kind="air", color=COLOR_MISSILE),
        Obstacle(x=20.0, y=float(AIR_Y), w=50.0, h=float(AIR_H), kind="air", color=COLOR_MISSILE),  # behind
    ]
    obs = build_observation(s)
    player_right = s.player.x + s.player.width
    assert np.isclose(obs[6], (400.0 - player_right) / WIDTH)
    assert obs[7] == 1.0 and np.isclose(obs[8], 50.0 / MAX_OBS_W)
    assert np.isclose(obs[9], (700.0 - player_right) / WIDTH)
    assert obs[10] == 0.0
    assert list(obs[12:15]) == [1.0, 0.0, 0.0]


def test_jump_shows_in_observation():
    s = started()
    s.push(InputEvent.JUMP)
    s.update(DT)
    obs = build_observation(s)
    assert obs[0] > 0.0 and obs[1] < 0.0
    assert obs[2] == 0.5
