"""
game.py
=======
Flappy Bird: one bird, gravity, a flap on mouse click.

Human play
----------
    python game.py              # LEFT / RIGHT click = flap, SPACE = debug dump
    python game.py --mute --scale 3

Programmatic / headless API
----------------------------
    from game import Game

    g = Game(render=False)
    obs = g.reset()                        # bird at spawn, state MENU
    obs, done = g.step(flap=True)          # MENU → GAME, bird jumps
    obs, done = g.step(flap=False, dt=0.1)
    g.close()

The obs dict:
    {
      "state":     str,     # "menu" | "game" | "game_over"
      "player":    bool,    # is there a bird in the world
      "player_x":  float,   # bird centre, world units (y-up)
      "player_y":  float,
      "player_vy": float,   # vertical velocity, units/s (positive = up)
      "flapped":   bool,    # an impulse was applied this tick
      "step":      int,
    }

State machine
-------------
    MENU ──flap──▶ GAME ──floor──▶ GAME_OVER ──flap──▶ MENU
The physics only runs in GAME. The flap that starts a run also lifts the
bird on that same tick.
"""

from __future__ import annotations

import argparse
import enum
import os
from typing import Callable, Optional

import pygame

import constants as C
from controls import ButtonInput, feed_event, flap_signal
from physics import (
    Player,
    constrain_system,
    gravity_system,
    handle_flap,
    move_system,
    spawn_player,
)


class GameState(enum.Enum):
    MENU      = "menu"
    GAME      = "game"
    GAME_OVER = "game_over"


# ─────────────────────────────────────────────────────────────────────────────
# Main Game class
# ─────────────────────────────────────────────────────────────────────────────

class Game:
    """
    Core game.  Works both rendered (human) and headless (tests/agents).

    Parameters
    ----------
    render : bool
        Open a pygame window.
    audio : callable | None
        Sound sink, called with an asset path. None = silent.
    scale : int
        Window pixels per world unit.
    fps : int
        Frame-rate cap used by tick().
    debug : bool
        Draw the clamp bounds and the bird's box.
    """

    def __init__(
        self,
        render: bool = True,
        audio : Optional[Callable[[str], object]] = None,
        scale : int  = C.SCREEN_SCALE,
        fps   : int  = C.FPS,
        debug : bool = False,
    ) -> None:
        self.audio   = audio
        self.scale   = scale
        self.fps     = fps
        self.debug   = debug

        self.player : Optional[Player] = None
        self.state  : GameState = GameState.MENU
        self._step_n: int = 0
        self._flapped: bool = False

        self.window     : Optional[pygame.Surface] = None
        self.surface    : Optional[pygame.Surface] = None
        self.clock      : Optional[pygame.time.Clock] = None
        self.font       : Optional[pygame.font.Font] = None
        self.bird_img   : Optional[pygame.Surface] = None
        self.background : Optional[pygame.Surface] = None

        if render:
            self._init_display()

        self.reset()

    # ── Display ───────────────────────────────────────────────────────────────

    def _init_display(self) -> None:
        if not pygame.get_init():
            pygame.init()
        pygame.font.init()
        self.window  = pygame.display.set_mode((C.BASE_W * self.scale, C.BASE_H * self.scale))
        pygame.display.set_caption(C.WINDOW_TITLE)
        # Everything is drawn at base resolution, then scaled up in one blit.
        self.surface = pygame.Surface((C.BASE_W, C.BASE_H))
        self.clock   = pygame.time.Clock()
        self.font    = pygame.font.SysFont("monospace", 10, bold=True)
        self.bird_img   = _load_image(C.BIRD_SPRITE)
        self.background = _load_image(C.BACKGROUND_SPRITE)

    # ── State transitions ────────────────────────────────────────────────────

    def reset(self) -> dict:
        """Spawn a fresh bird and go back to the menu. Returns obs dict."""
        self.player   = spawn_player()
        self.state    = GameState.MENU
        self._step_n  = 0
        self._flapped = False
        return self._obs()

    def start_game(self) -> None:
        if self.state is GameState.MENU:
            self.state = GameState.GAME

    def die(self) -> None:
        if self.state is GameState.GAME:
            self.state = GameState.GAME_OVER

    def restart(self) -> None:
        if self.state is GameState.GAME_OVER:
            self.reset()

    # ── Step ──────────────────────────────────────────────────────────────────

    def step(self, flap: bool = False, dt: Optional[float] = None) -> tuple[dict, bool]:
        """
        Advance simulation one tick.

        Parameters
        ----------
        flap : bool   a flap button went down this tick (edge, not level)
        dt   : float  seconds since the previous tick (default 1/fps)

        Returns
        -------
        obs  : dict
        done : bool   the run just ended or is over
        """
        if dt is None:
            dt = 1.0 / self.fps
        self._step_n += 1
        self._flapped = False

        if self.state is GameState.MENU and flap:
            self.start_game()
        elif self.state is GameState.GAME_OVER:
            if flap:
                self.restart()
            return self._obs(), self.state is GameState.GAME_OVER

        if self.state is GameState.GAME:
            self._flapped = handle_flap(self.player, flap, C.JUMP_VELOCITY, self.audio)
            gravity_system(self.player, dt, C.GRAVITY)
            hit = constrain_system(self.player, C.LOWER_BOUND, C.UPPER_BOUND)
            move_system(self.player, dt)
            if hit == C.LOWER_BOUND and C.FLOOR_KILLS:
                self.die()

        return self._obs(), self.state is GameState.GAME_OVER

    # ── Render ────────────────────────────────────────────────────────────────

    def render(self) -> None:
        """Draw current state. Safe to call even if render=False (no-ops)."""
        if self.surface is None:
            return
        self._draw_bg()
        self._draw_player()
        if self.debug:
            self._draw_debug()
        self._draw_hud()
        pygame.transform.scale(self.surface, self.window.get_size(), self.window)
        pygame.display.flip()

    def tick(self) -> float:
        """Advance the clock; returns dt in seconds. Call once per frame."""
        if self.clock is None:
            return 1.0 / self.fps
        ms = self.clock.tick(self.fps)
        return min(ms / 1000.0, C.MAX_DT)

    def close(self) -> None:
        if pygame.get_init():
            pygame.quit()

    def toggle_debug(self) -> None:
        self.debug = not self.debug

    def debug_print(self) -> None:
        if self.player is None:
            return
        p = self.player
        print(f"XYZ: [{p.pos.x}, {p.pos.y}, 0], Y-Vel: {p.y_vel}")

    # ── Obs dict ──────────────────────────────────────────────────────────────

    def _obs(self) -> dict:
        p = self.player
        return {
            "state":     self.state.value,
            "player":    p is not None,
            "player_x":  p.pos.x if p else 0.0,
            "player_y":  p.pos.y if p else 0.0,
            "player_vy": p.y_vel if p else 0.0,
            "flapped":   self._flapped,
            "step":      self._step_n,
        }

    # ── Drawing ───────────────────────────────────────────────────────────────

    @staticmethod
    def _to_screen(pos: pygame.Vector2) -> tuple[int, int]:
        """World (y-up) → base-resolution surface (y-down)."""
        return int(round(pos.x)), int(round(C.BASE_H - pos.y))

    def _draw_bg(self) -> None:
        if self.background is not None:
            self.surface.blit(self.background, self.background.get_rect(center=(C.BASE_W // 2, C.BASE_H // 2)))
        else:
            self.surface.fill(C.BG_COLOR)

    def _draw_player(self) -> None:
        if self.player is None:
            return
        center = self._to_screen(self.player.pos)
        if self.bird_img is not None:
            self.surface.blit(self.bird_img, self.bird_img.get_rect(center=center))
        else:
            r = pygame.Rect(0, 0, C.PLAYER_W, C.PLAYER_H)
            r.center = center
            pygame.draw.rect(self.surface, C.PLAYER_COLOR, r, border_radius=3)

    def _draw_debug(self) -> None:
        for y in (C.LOWER_BOUND, C.UPPER_BOUND, 0, C.BASE_H):
            sy = C.BASE_H - y
            pygame.draw.line(self.surface, (255, 0, 0), (0, sy), (C.BASE_W, sy), 1)
        if self.player is not None:
            r = pygame.Rect(0, 0, C.PLAYER_W, C.PLAYER_H)
            r.center = self._to_screen(self.player.pos)
            pygame.draw.rect(self.surface, (255, 255, 0), r, 1)

    def _draw_hud(self) -> None:
        if self.font is None:
            return
        if self.state is GameState.MENU:
            lines = ["CLICK TO FLAP"]
        elif self.state is GameState.GAME_OVER:
            lines = ["GAME OVER", "click to retry"]
        else:
            return
        y = C.BASE_H // 3
        for line in lines:
            shadow = self.font.render(line, False, C.SHADOW_COLOR)
            text   = self.font.render(line, False, C.HUD_COLOR)
            x = (C.BASE_W - text.get_width()) // 2
            self.surface.blit(shadow, (x + 1, y + 1))
            self.surface.blit(text, (x, y))
            y += text.get_height() + 2


def _load_image(path: str) -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(os.path.join(C.ASSET_DIR, path)).convert_alpha()
    except (pygame.error, FileNotFoundError):
        print(f"Warning: Could not load {path}")
        return None


# ─────────────────────────────────────────────────────────────────────────────
# Human play entry point
# ─────────────────────────────────────────────────────────────────────────────

def main() -> None:
    from audio import MixerSink

    parser = argparse.ArgumentParser(description="Flappy Bird")
    parser.add_argument("--scale", type=int, default=C.SCREEN_SCALE)
    parser.add_argument("--fps",   type=int, default=C.FPS)
    parser.add_argument("--mute",  action="store_true")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    if not args.mute:
        # Small buffer keeps the wing sound in sync with the click.
        pygame.mixer.pre_init(44100, -16, 2, 512)
    game = Game(render=True, audio=MixerSink(enabled=not args.mute),
                scale=args.scale, fps=args.fps, debug=args.debug)
    mouse = ButtonInput()
    keys  = ButtonInput()
    runs  = 0

    print("LEFT/RIGHT CLICK = flap   |   SPACE = debug   |   H = bounds   |   Q = quit")

    running = True
    while running:
        dt = game.tick()

        mouse.clear()
        keys.clear()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            feed_event(mouse, keys, event)

        if any(keys.just_pressed(k) for k in C.QUIT_KEYS):
            running = False
        if keys.just_pressed(C.DEBUG_KEY):
            game.debug_print()
        if keys.just_pressed(pygame.K_h):
            game.toggle_debug()

        was_over = game.state is GameState.GAME_OVER
        obs, done = game.step(flap_signal(mouse), dt)
        game.render()

        if done and not was_over:
            runs += 1
            print(f"Run {runs} | steps={obs['step']}")

    game.close()


if __name__ == "__main__":
    main()
