"""
Gamepad pairing and motion cleaning.

Two pads drive the demo. A pad claims a slot with the dashboard gesture:
  - Start + A -> gamepad 1
  - Start + B -> gamepad 2
Claiming a pad that already holds the other slot releases that slot, so one
physical pad never drives both players.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from gamepad_dash.controllers.types import Gamepad, GamepadState, StickPair, StickVector
from gamepad_dash.utils import rescale

UNASSIGNED = -1


def clean_motion_value(value: float, deadzone: float = 0.2, max_range: float = 1.0) -> float:
    """
    Deadzone, trim, then stretch what is left back onto 0..max_range.

    A value just outside the deadzone maps to ~0 rather than jumping to
    `deadzone`, so motion starts smoothly.
    """
    if -deadzone < value < deadzone:
        return 0.0

    if value > max_range:
        return max_range
    if value < -max_range:
        return -max_range

    if value > 0:
        return rescale(value, deadzone, max_range, 0.0, max_range)
    return rescale(value, -deadzone, -max_range, 0.0, -max_range)


def clean_stick(x: float, y: float, deadzone: float) -> StickVector:
    return StickVector(
        stick_x=clean_motion_value(x, deadzone),
        stick_y=clean_motion_value(y, deadzone),
    )


@dataclass
class GamepadAssignments:
    gamepad1: int = UNASSIGNED
    gamepad2: int = UNASSIGNED

    def update(self, index: int, st: GamepadState) -> None:
        if not st.start:
            return

        if st.a:
            self.gamepad1 = index
            if self.gamepad2 == self.gamepad1:
                self.gamepad2 = UNASSIGNED
        elif st.b:
            self.gamepad2 = index
            if self.gamepad1 == self.gamepad2:
                self.gamepad1 = UNASSIGNED

    def release(self, index: int) -> None:
        if self.gamepad1 == index:
            self.gamepad1 = UNASSIGNED
        if self.gamepad2 == index:
            self.gamepad2 = UNASSIGNED


class GamepadPairSource:
    """
    InputSource over a changing set of pads, keyed by `Gamepad.index`.
    Yields the left sticks of the two assigned pads, or None while either
    slot is empty or its pad is gone.
    """
    def __init__(self, pads: Sequence[Gamepad] = (), assignments: Optional[GamepadAssignments] = None) -> None:
        self.pads: Dict[int, Gamepad] = {pad.index: pad for pad in pads}
        self.assignments = assignments or GamepadAssignments()

    def add_pad(self, pad: Gamepad) -> None:
        self.pads[pad.index] = pad

    def remove_pad(self, index: int) -> None:
        self.pads.pop(index, None)
        self.assignments.release(index)

    def read_pair(self) -> Optional[StickPair]:
        states: Dict[int, GamepadState] = {}
        for pad in list(self.pads.values()):
            st = pad.read_state()
            if st is None:
                self.assignments.release(pad.index)
                continue
            states[pad.index] = st
            self.assignments.update(pad.index, st)

        st1 = states.get(self.assignments.gamepad1)
        st2 = states.get(self.assignments.gamepad2)
        if st1 is None or st2 is None:
            return None
        return st1.left_stick, st2.left_stick


@dataclass
class FixedInputSource:
    """
    Constant stick readings. Handy for dry runs without hardware.
    """
    stick1: StickVector = StickVector()
    stick2: StickVector = StickVector()

    def read_pair(self) -> Optional[StickPair]:
        return self.stick1, self.stick2
