# sarcastic_runner/tests/test_cinematic.py
from sarcastic_runner.game.config import (
    WIDTH, PLAYER_X, CHASER_START_OFFSET, CHASER_FOLLOW_FACTOR, MAX_SPEED, BASE_SPEED
)
from sarcastic_runner.game.cinematic import ChaserCinematic, ChaserPhase, clamp_speed

DT = 1.0 / 60.0


def run_to_done(c: ChaserCinematic, speed: float, max_frames: int = 60 * 120):
    phases = [c.phase]
    for _ in range(max_frames):
        speed = c.update(DT, speed)
        if c.phase is not phases[-1]:
            phases.append(c.phase)
        if c.done:
            break
    return phases, speed


def test_idle_cinematic_does_nothing():
    c = ChaserCinematic()
    assert not c.active
    assert c.update(DT, 300.0) == 300.0
    assert c.phase is ChaserPhase.IDLE


def test_start_places_chaser_behind_player():
    c = ChaserCinematic()
    assert c.start(400.0)
    assert c.phase is ChaserPhase.FOLLOW and c.active
    assert c.chaser.x == PLAYER_X - CHASER_START_OFFSET
    assert abs(c.chaser.speed - 400.0 * CHASER_FOLLOW_FACTOR) < 1e-9
    assert not c.start(400.0), "Cinematic runs only once"


def test_phase_order_is_fixed():
    c = ChaserCinematic()
    c.start(300.0)
    phases, _ = run_to_done(c, 300.0)
    assert phases == [
        ChaserPhase.FOLLOW, ChaserPhase.PASS, ChaserPhase.PASSED,
        ChaserPhase.RETURNING, ChaserPhase.DONE,
    ], f"Unexpected phase order: {phases}"
    assert not c.active


def test_follow_lasts_thirty_seconds_and_ramps_speed():
    c = ChaserCinematic()
    c.start(300.0)
    speed = 300.0
    for _ in range(60 * 29):
        speed = c.update(DT, speed)
    assert c.phase is ChaserPhase.FOLLOW, "Follow ended too early"
    assert speed > 300.0, "World speed should ramp during follow"
    for _ in range(90):
        speed = c.update(DT, speed)
    assert c.phase in (ChaserPhase.PASS, ChaserPhase.PASSED)


def test_return_run_and_final_boost():
    c = ChaserCinematic()
    c.start(300.0)
    speed = 300.0
    while c.phase is not ChaserPhase.RETURNING:
        speed = c.update(DT, speed)
    assert c.chaser.x <= WIDTH + 60 and c.chaser.speed < 0
    assert c.big_chaser.speed < c.chaser.speed < 0, "Big chaser must run back faster"

    before = speed
    while not c.done:
        speed = c.update(DT, speed)
    assert c.big_chaser.right < -120
    assert speed == clamp_speed(before * 1.2)
    assert BASE_SPEED <= speed <= MAX_SPEED
    # finished: further updates change nothing
    assert c.update(DT, speed) == speed and c.done
