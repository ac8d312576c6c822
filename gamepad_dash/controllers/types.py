from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple


@dataclass(frozen=True)
class StickVector:
    """
    One analog stick reading.

    Conventions (dashboard gamepad, not pygame-inverted):
      - stick_x: +1.0 right, -1.0 left
      - stick_y: +1.0 down, -1.0 up
    """
    stick_x: float = 0.0
    stick_y: float = 0.0


@dataclass(frozen=True)
class GamepadState:
    """
    Normalized gamepad state. The stick is already deadzoned and trimmed.
    """
    left_stick: StickVector = StickVector()

    a: bool = False
    b: bool = False
    start: bool = False


StickPair = Tuple[StickVector, StickVector]


class Gamepad(Protocol):
    index: int

    def read_state(self) -> Optional[GamepadState]: ...


class InputSource(Protocol):
    def read_pair(self) -> Optional[StickPair]: ...
