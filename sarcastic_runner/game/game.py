# sarcastic_runner/game/game.py
import sys, argparse, logging
import pygame
from pygame import K_SPACE, K_UP, K_DOWN, K_ESCAPE, K_r, K_q, K_w
from .config import WIDTH, HEIGHT, FPS, MAX_DT, HIGHSCORE_FILE_DEFAULT
from .session import Session, InputEvent
from .highscore import HighScoreStore
from .audio import SoundCues
from .render import Fonts, render_session

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Endless runner: jump, duck, don't look back.")
    p.add_argument("--seed", type=int, default=None,
                   help="Session seed. Omit for a random session.")
    p.add_argument("--highscore-file", type=str, default=HIGHSCORE_FILE_DEFAULT,
                   help="JSON file holding the high score")
    p.add_argument("--sounds-dir", type=str, default="sounds",
                   help="Directory with jump.mp3 / duck.mp3")
    p.add_argument("--mute", action="store_true", help="Disable sound cues")
    p.add_argument("--log-level", type=str, default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def events_for_key(key: int, pressed: bool):
    """Translate one key transition into session inputs."""
    if not pressed:
        return [InputEvent.DUCK_RELEASE] if key == K_DOWN else []
    if key in (K_SPACE, K_UP):
        return [InputEvent.ACTION]
    if key == K_DOWN:
        return [InputEvent.DUCK_PRESS]
    if key == K_r:
        return [InputEvent.RESTART]
    if key == K_q:
        return [InputEvent.QUIT]
    if key == K_w:
        return [InputEvent.SECRET_WIN]
    return []


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.display.set_caption("Sarcastic Runner")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    fonts = Fonts()

    audio = SoundCues(args.sounds_dir, enabled=not args.mute)
    audio.init()
    session = Session(seed=args.seed,
                      highscore_store=HighScoreStore(args.highscore_file),
                      audio=audio)
    logger.info("session seed=%d high score=%d", session.seed, session.high_score)

    while True:
        dt = clock.tick(FPS) / 1000.0
        if dt > MAX_DT:  # clamp stalls
            dt = MAX_DT

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                if event.type == pygame.KEYDOWN and event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                for ev in events_for_key(event.key, event.type == pygame.KEYDOWN):
                    session.push(ev)

        session.update(dt)
        render_session(screen, fonts, session)
        pygame.display.flip()


if __name__ == "__main__":
    run()
