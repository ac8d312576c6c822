"""
Keyboard as a virtual gamepad.

  arrows -> left stick (+-1.0, dashboard convention: down is +1)
  a / b  -> A / B
  s      -> Start

So "s + a" claims gamepad 1 from the keyboard, like Start+A on a real pad.
Key events only reach pygame through a focused window; see open_keyboard_window().
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple

import pygame

from gamepad_dash.controllers.types import GamepadState, StickVector

# Joysticks are keyed from 1 upward; slot 0 is the keyboard.
KEYBOARD_INDEX = 0

AXIS_KEYS: Dict[int, Tuple[str, float]] = {
    pygame.K_DOWN: ("y", 1.0),
    pygame.K_UP: ("y", -1.0),
    pygame.K_LEFT: ("x", -1.0),
    pygame.K_RIGHT: ("x", 1.0),
}

BUTTON_KEYS: Dict[int, str] = {
    pygame.K_a: "a",
    pygame.K_b: "b",
    pygame.K_s: "start",
}


class KeyboardGamepad:
    def __init__(self) -> None:
        self.index = KEYBOARD_INDEX
        self.x = 0.0
        self.y = 0.0
        self.buttons: Dict[str, bool] = {name: False for name in BUTTON_KEYS.values()}

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one KEYDOWN/KEYUP. Returns False for events it ignores."""
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False
        down = event.type == pygame.KEYDOWN

        if event.key in AXIS_KEYS:
            axis, value = AXIS_KEYS[event.key]
            # Releasing either key of an axis recenters it.
            setattr(self, axis, value if down else 0.0)
            return True

        if event.key in BUTTON_KEYS:
            self.buttons[BUTTON_KEYS[event.key]] = down
            return True

        return False

    def read_state(self) -> Optional[GamepadState]:
        return GamepadState(
            left_stick=StickVector(self.x, self.y),
            a=self.buttons["a"],
            b=self.buttons["b"],
            start=self.buttons["start"],
        )


def open_keyboard_window(size: Tuple[int, int] = (360, 120)) -> None:
    pygame.display.init()
    pygame.display.set_mode(size)
    pygame.display.set_caption("gamepad_dash: arrows move, s+a / s+b claim a player")
