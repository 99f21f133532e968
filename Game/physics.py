"""
physics.py
==========
The per-tick rules that move the bird, plus the Player entity they act on.

Every tick runs the same fixed sequence (see Game.step):

    flap_signal → handle_flap → gravity_system → constrain_system → move_system

The pure rules (apply_gravity, clamp, integrate) know nothing about the
Player; the *_system wrappers apply them to an Optional[Player] and do
nothing at all when there is no player in the world.
"""

from __future__ import annotations

from typing import Callable, Optional

import pygame

import constants as C


# ─────────────────────────────────────────────────────────────────────────────
# Entity
# ─────────────────────────────────────────────────────────────────────────────

class Player:
    def __init__(self, pos: tuple[float, float], y_vel: float = 0.0) -> None:
        self.pos   : pygame.Vector2 = pygame.Vector2(pos)
        self.y_vel : float = float(y_vel)

    def __repr__(self) -> str:
        return f"Player(pos=({self.pos.x:.2f}, {self.pos.y:.2f}), y_vel={self.y_vel:.2f})"


def spawn_player() -> Player:
    """A fresh bird at the spawn point, at rest."""
    return Player(lerp_window(C.SPAWN_UV), 0.0)


# ─────────────────────────────────────────────────────────────────────────────
# Pure rules
# ─────────────────────────────────────────────────────────────────────────────

def apply_gravity(velocity: float, dt: float, g: float = C.GRAVITY) -> float:
    return velocity + g * dt


def clamp(
    position: float,
    velocity: float,
    lower   : float = C.LOWER_BOUND,
    upper   : float = C.UPPER_BOUND,
) -> tuple[float, float]:
    """
    Stop the bird at the edge of [lower, upper].

    Only velocity that is still pushing outward gets zeroed. A bird resting
    below the floor with an upward velocity is left alone so it can fly
    back in on its own.
    """
    if position < lower and velocity < 0:
        return lower, 0.0
    if position > upper and velocity > 0:
        return upper, 0.0
    return position, velocity


def integrate(position: pygame.Vector2, velocity: float, dt: float) -> pygame.Vector2:
    """New position after `dt` seconds. x never changes."""
    return pygame.Vector2(position.x, position.y + velocity * dt)


# ─────────────────────────────────────────────────────────────────────────────
# Systems (Optional[Player] in, no-op when absent)
# ─────────────────────────────────────────────────────────────────────────────

def handle_flap(
    player       : Optional[Player],
    flap         : bool,
    jump_velocity: float = C.JUMP_VELOCITY,
    play_sound   : Optional[Callable[[str], object]] = None,
) -> bool:
    """
    Replace the bird's velocity with the jump impulse and fire the wing sound.

    The sound is fire-and-forget: whatever the sink returns is dropped.
    Returns True if an impulse was applied.
    """
    if player is None or not flap:
        return False
    player.y_vel = jump_velocity
    if play_sound is not None:
        play_sound(C.SFX_WING)
    return True


def gravity_system(player: Optional[Player], dt: float, g: float = C.GRAVITY) -> None:
    if player is None:
        return
    player.y_vel = apply_gravity(player.y_vel, dt, g)


def constrain_system(
    player: Optional[Player],
    lower : float = C.LOWER_BOUND,
    upper : float = C.UPPER_BOUND,
) -> Optional[float]:
    """
    Clamp the bird to [lower, upper].

    Returns the bound it was stopped at, or None if nothing was clamped.
    """
    if player is None:
        return None
    y, vel = clamp(player.pos.y, player.y_vel, lower, upper)
    hit = y if y != player.pos.y else None
    player.pos.y = y
    player.y_vel = vel
    return hit


def move_system(player: Optional[Player], dt: float) -> None:
    if player is None:
        return
    player.pos = integrate(player.pos, player.y_vel, dt)


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def lerp(t: float, a: float, b: float) -> float:
    return a * (1.0 - t) + b * t


def lerp_2d(size: tuple[float, float], uv: tuple[float, float]) -> pygame.Vector2:
    """Point at fraction `uv` of a box of `size` anchored at the origin."""
    return pygame.Vector2(lerp(uv[0], 0.0, size[0]), lerp(uv[1], 0.0, size[1]))


def lerp_window(uv: tuple[float, float]) -> pygame.Vector2:
    return lerp_2d((C.BASE_W, C.BASE_H), uv)
