"""
gamepad_opmode.py

Two dots on the dashboard field, one per gamepad.

Each tick integrates the left sticks into positions (dead reckoning from a
fixed origin) and publishes a packet with both dots and their coordinates.
Ticks arrive at whatever rate the runner manages, so movement is scaled by
the elapsed time rather than a fixed step:

    x += stick_x * dt_ms / 10
    y += -stick_y * dt_ms / 10      (stick Y is positive-down, field Y is up)

A full stick deflection therefore moves a dot 100 field units per second.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gamepad_dash.controllers.types import StickPair, StickVector
from gamepad_dash.telemetry.packet import TelemetryPacket
from gamepad_dash.telemetry.types import TelemetryPublisher
from gamepad_dash.utils import Clock, monotonic_ms

MS_PER_UNIT = 10.0
DOT_RADIUS = 10.0
PLAYER1_COLOR = "blue"
PLAYER2_COLOR = "red"


@dataclass
class Actor:
    x: float = 0.0
    y: float = 0.0

    def integrate(self, stick: StickVector, dt_ms: float) -> None:
        self.x += stick.stick_x * dt_ms / MS_PER_UNIT
        self.y += -stick.stick_y * dt_ms / MS_PER_UNIT


def build_packet(player1: Actor, player2: Actor) -> TelemetryPacket:
    packet = TelemetryPacket()
    packet.field_overlay() \
        .set_stroke(PLAYER1_COLOR) \
        .fill_circle(player1.x, player1.y, DOT_RADIUS) \
        .set_stroke(PLAYER2_COLOR) \
        .fill_circle(player2.x, player2.y, DOT_RADIUS)
    packet.add_line(str(player1.x))
    packet.add_line(str(player1.y))
    packet.add_line(str(player2.x))
    packet.add_line(str(player2.y))
    return packet


class GamepadOpMode:
    name = "GamepadOpMode"

    def __init__(self, publisher: TelemetryPublisher, clock: Clock = monotonic_ms) -> None:
        self.publisher = publisher
        self.clock = clock

        self.player1 = Actor()
        self.player2 = Actor()
        self.last_time: Optional[float] = None

    def initialize(self) -> None:
        self.last_time = self.clock()

    def tick(self, sticks: Optional[StickPair]) -> None:
        if self.last_time is None:
            raise RuntimeError(f"{self.name} not initialized; call initialize() before tick()")

        now = self.clock()
        # A clock that steps backwards means "no time passed", never negative motion.
        dt = max(0.0, now - self.last_time)

        if sticks is not None and sticks[0] is not None and sticks[1] is not None:
            self.player1.integrate(sticks[0], dt)
            self.player2.integrate(sticks[1], dt)

        self.publisher.send_telemetry_packet(build_packet(self.player1, self.player2))

        self.last_time = now
