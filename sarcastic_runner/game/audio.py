# sarcastic_runner/game/audio.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Optional
import pygame

logger = logging.getLogger(__name__)

CUE_FILES = {
    "jump": "jump.mp3",
    "duck": "duck.mp3",
}


class SoundCues:
    """
    Fire-and-forget sound effects. Nothing here is allowed to break a run:
    a missing mixer, missing files or a failed play all degrade to silence.
    """

    def __init__(self, sound_dir: str | Path = "sounds", enabled: bool = True):
        self.sound_dir = Path(sound_dir)
        self.enabled = enabled
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._initialized = False

    def init(self) -> bool:
        if not self.enabled:
            return False
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            self._initialized = True
        except pygame.error as e:
            logger.warning("Audio disabled, mixer failed to start: %s", e)
            return False

        for name, filename in CUE_FILES.items():
            path = self.sound_dir / filename
            if not path.exists():
                logger.warning("Sound not found: %s", path)
                continue
            try:
                self._sounds[name] = pygame.mixer.Sound(str(path))
            except pygame.error as e:
                logger.warning("Could not load %s: %s", path, e)
        logger.info("Loaded %d sound cues", len(self._sounds))
        return True

    def play(self, name: str):
        if not (self.enabled and self._initialized):
            return
        sound: Optional[pygame.mixer.Sound] = self._sounds.get(name)
        if sound is None:
            return
        try:
            sound.stop()   # restart from the beginning on rapid repeats
            sound.play()
        except pygame.error as e:
            logger.debug("play(%s) failed: %s", name, e)
