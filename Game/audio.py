"""
audio.py
========
Fire-and-forget sound effects.

    sink = MixerSink()
    sink(C.SFX_WING)      # plays once on a free channel, returns immediately

Nothing about a triggered sound is tracked. pygame hands each play() a free
channel and frees it again when the sample ends.
"""

from __future__ import annotations

import os
from typing import Optional

import pygame

import constants as C


class MixerSink:
    """
    Parameters
    ----------
    volume : float
        0.0 – 1.0, applied to every sound.
    enabled : bool
        False = never touch the mixer (muted / headless).
    asset_dir : str
        Directory sound paths are resolved against.
    """

    def __init__(
        self,
        volume   : float = C.GLOBAL_VOLUME,
        enabled  : bool  = True,
        asset_dir: str   = C.ASSET_DIR,
    ) -> None:
        self.volume    = volume
        self.asset_dir = asset_dir
        self._sounds   : dict[str, Optional[pygame.mixer.Sound]] = {}
        self.enabled   = enabled and self._init_mixer()

    def _init_mixer(self) -> bool:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as e:
            print(f"Warning: audio disabled ({e})")
            return False
        return True

    def load(self, path: str) -> Optional[pygame.mixer.Sound]:
        """Load once; a missing or broken file is remembered as None."""
        if path not in self._sounds:
            try:
                sound = pygame.mixer.Sound(os.path.join(self.asset_dir, path))
                sound.set_volume(self.volume)
            except (pygame.error, FileNotFoundError):
                print(f"Warning: Could not load {path}")
                sound = None
            self._sounds[path] = sound
        return self._sounds[path]

    def __call__(self, path: str) -> None:
        if not self.enabled:
            return
        sound = self.load(path)
        if sound is not None:
            sound.play()
