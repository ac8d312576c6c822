from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from gamepad_dash.controllers.types import GamepadState
from gamepad_dash.telemetry.packet import TelemetryPacket


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@dataclass
class RecordingPublisher:
    packets: List[TelemetryPacket] = field(default_factory=list)

    def send_telemetry_packet(self, packet: TelemetryPacket) -> int:
        self.packets.append(packet)
        return len(self.packets)


@dataclass
class FakePad:
    index: int
    state: Optional[GamepadState] = None

    def read_state(self) -> Optional[GamepadState]:
        return self.state


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


def claim(button: str) -> GamepadState:
    """Start held together with `button` ("a" or "b")."""
    return GamepadState(start=True, **{button: True})
