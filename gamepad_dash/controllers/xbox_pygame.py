from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional

import pygame

from gamepad_dash.controllers.gamepad import clean_stick
from gamepad_dash.controllers.types import GamepadState


@dataclass(frozen=True)
class PadLayout:
    """
    Where one controller family puts the left stick and the A/B/Start buttons.
    Axes listed in `inverted` are negated before deadzoning.
    """
    name: str
    axis_map: Dict[str, int]
    button_map: Dict[str, int]
    inverted: FrozenSet[str] = field(default_factory=frozenset)


XBOX = PadLayout(
    name="xbox",
    axis_map={"LX": 0, "LY": 1},
    button_map={"A": 0, "B": 1, "START": 7},
)

DUALSHOCK_4 = PadLayout(
    name="dualshock4",
    axis_map={"LX": 0, "LY": 1},
    button_map={"A": 0, "B": 1, "START": 6},  # cross, circle, options
)

LOGITECH_DUAL_ACTION = PadLayout(
    name="logitech_dual_action",
    axis_map={"LX": 1, "LY": 2},
    button_map={"A": 1, "B": 2, "START": 9},
    inverted=frozenset({"LX"}),
)

LAYOUTS: Dict[str, PadLayout] = {layout.name: layout for layout in (XBOX, DUALSHOCK_4, LOGITECH_DUAL_ACTION)}


def layout_for(joystick_name: str, preferred: str = "auto") -> PadLayout:
    """
    `preferred` is a LAYOUTS key, or "auto" to guess from the device name.
    Unknown devices fall back to the Xbox layout.
    """
    if preferred != "auto":
        if preferred not in LAYOUTS:
            raise ValueError(f"Unknown pad layout {preferred!r}; expected auto or one of {sorted(LAYOUTS)}")
        return LAYOUTS[preferred]

    name = joystick_name.lower()
    if "logitech dual action" in name:
        return LOGITECH_DUAL_ACTION
    if "dualshock" in name or "ps4" in name or name == "wireless controller":
        return DUALSHOCK_4
    return XBOX


class PygameGamepad:
    """
    Pygame joystick reader. Normalizes one pad into GamepadState.

    Pygame reports stick Y with up = -1.0, which is already the dashboard
    convention, so only the layout's `inverted` axes are negated.

    `index` is the joystick instance id + 1: stable for the life of the
    connection, and never 0 (that slot is the keyboard).
    """
    def __init__(self, device_index: int = 0, deadzone: float = 0.2, layout: str = "auto"):
        pygame.joystick.init()

        if pygame.joystick.get_count() <= device_index:
            raise RuntimeError("No controller found. Is it on and connected?")

        self.js = pygame.joystick.Joystick(device_index)
        self.js.init()

        self.index = self.js.get_instance_id() + 1
        self.deadzone = deadzone
        self.layout = layout_for(self.js.get_name(), layout)

    def _axis(self, name: str) -> float:
        idx = self.layout.axis_map[name]
        if idx >= self.js.get_numaxes():
            return 0.0
        v = float(self.js.get_axis(idx))
        return -v if name in self.layout.inverted else v

    def _button(self, name: str) -> bool:
        idx = self.layout.button_map[name]
        if idx >= self.js.get_numbuttons():
            return False
        return bool(self.js.get_button(idx))

    def read_state(self) -> Optional[GamepadState]:
        # Removal arrives as JOYDEVICEREMOVED; a read racing it reads as "no input this tick".
        try:
            return GamepadState(
                left_stick=clean_stick(self._axis("LX"), self._axis("LY"), self.deadzone),
                a=self._button("A"),
                b=self._button("B"),
                start=self._button("START"),
            )
        except pygame.error:
            return None
