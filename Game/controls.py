"""
controls.py
===========
Turns pygame's event stream into per-tick button edges.

    mouse = ButtonInput()
    keys  = ButtonInput()

    # once per frame
    mouse.clear(); keys.clear()
    for event in pygame.event.get():
        feed_event(mouse, keys, event)
    flap = flap_signal(mouse)

A button is "just pressed" only on the tick it went from released to
pressed. Holding it down, or a repeated DOWN event without an UP in
between, never produces a second edge.
"""

from __future__ import annotations

from typing import Hashable, Iterable

import pygame

import constants as C


class ButtonInput:
    def __init__(self) -> None:
        self._held         : set[Hashable] = set()
        self._just_pressed : set[Hashable] = set()
        self._just_released: set[Hashable] = set()

    def press(self, button: Hashable) -> None:
        if button not in self._held:
            self._held.add(button)
            self._just_pressed.add(button)

    def release(self, button: Hashable) -> None:
        if button in self._held:
            self._held.discard(button)
            self._just_released.add(button)

    def clear(self) -> None:
        """Forget this tick's edges. Held buttons stay held."""
        self._just_pressed.clear()
        self._just_released.clear()

    def reset(self) -> None:
        self._held.clear()
        self.clear()

    def pressed(self, button: Hashable) -> bool:
        return button in self._held

    def just_pressed(self, button: Hashable) -> bool:
        return button in self._just_pressed

    def just_released(self, button: Hashable) -> bool:
        return button in self._just_released

    def any_just_pressed(self, buttons: Iterable[Hashable]) -> bool:
        return any(b in self._just_pressed for b in buttons)


def flap_signal(mouse: ButtonInput) -> bool:
    """True iff either flap button went down this tick."""
    return mouse.any_just_pressed(C.FLAP_BUTTONS)


def feed_event(mouse: ButtonInput, keys: ButtonInput, event: pygame.event.Event) -> None:
    if event.type == pygame.MOUSEBUTTONDOWN:
        mouse.press(event.button)
    elif event.type == pygame.MOUSEBUTTONUP:
        mouse.release(event.button)
    elif event.type == pygame.KEYDOWN:
        keys.press(event.key)
    elif event.type == pygame.KEYUP:
        keys.release(event.key)
    elif event.type == pygame.WINDOWFOCUSLOST:
        # UP events are lost while unfocused; don't leave buttons stuck down.
        mouse.reset()
        keys.reset()
