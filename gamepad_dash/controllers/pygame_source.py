"""
pygame_source.py

InputSource that follows pads as they come and go.

Every read drains the pygame event queue first:
  - JOYDEVICEADDED   -> open a PygameGamepad and add it to the pair source
                        (SDL also reports pads already attached at startup this way)
  - JOYDEVICEREMOVED -> drop that pad and free its slot
  - KEYDOWN / KEYUP  -> keyboard virtual gamepad
  - QUIT             -> KeyboardInterrupt, so the runner stops like on Ctrl+C
"""
from __future__ import annotations

import os
from typing import Callable, Iterable, Optional

import pygame

from gamepad_dash.controllers.gamepad import GamepadPairSource
from gamepad_dash.controllers.keyboard import KeyboardGamepad, open_keyboard_window
from gamepad_dash.controllers.types import Gamepad, StickPair
from gamepad_dash.controllers.xbox_pygame import PygameGamepad

PadFactory = Callable[[int], Gamepad]


class PygameInputSource:
    def __init__(
        self,
        pad_factory: PadFactory,
        keyboard: Optional[KeyboardGamepad] = None,
        pairs: Optional[GamepadPairSource] = None,
        events: Callable[[], Iterable[pygame.event.Event]] = pygame.event.get,
    ) -> None:
        self.pad_factory = pad_factory
        self.keyboard = keyboard
        self.pairs = pairs or GamepadPairSource()
        self.events = events

        if keyboard is not None:
            self.pairs.add_pad(keyboard)

    @classmethod
    def create(cls, deadzone: float = 0.2, layout: str = "auto", keyboard: bool = True) -> "PygameInputSource":
        init_pygame(keyboard)

        def open_pad(device_index: int) -> Gamepad:
            return PygameGamepad(device_index, deadzone=deadzone, layout=layout)

        return cls(open_pad, keyboard=KeyboardGamepad() if keyboard else None)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            raise KeyboardInterrupt

        if event.type == pygame.JOYDEVICEADDED:
            try:
                pad = self.pad_factory(event.device_index)
            except (RuntimeError, pygame.error) as e:
                # Unplugged again before we got to it.
                print(f"[warn] gamepad {event.device_index} vanished while opening: {e}")
                return
            if pad.index not in self.pairs.pads:
                print(f"Gamepad {pad.index} connected")
            self.pairs.add_pad(pad)

        elif event.type == pygame.JOYDEVICEREMOVED:
            index = event.instance_id + 1
            if index in self.pairs.pads:
                print(f"Gamepad {index} disconnected")
            self.pairs.remove_pad(index)

        elif self.keyboard is not None:
            self.keyboard.handle_event(event)

    def read_pair(self) -> Optional[StickPair]:
        for event in self.events():
            self.handle_event(event)
        return self.pairs.read_pair()


def init_pygame(keyboard: bool) -> None:
    """
    Without the keyboard pad there is nothing to show, so run SDL headless.
    """
    if not keyboard:
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    pygame.joystick.init()
    if keyboard:
        open_keyboard_window()
