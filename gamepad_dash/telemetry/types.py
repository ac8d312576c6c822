from __future__ import annotations
from typing import Protocol

from gamepad_dash.telemetry.packet import TelemetryPacket


class TelemetryPublisher(Protocol):
    def send_telemetry_packet(self, packet: TelemetryPacket) -> int: ...
