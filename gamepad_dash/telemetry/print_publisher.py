from __future__ import annotations
import json
from dataclasses import dataclass

from gamepad_dash.telemetry.packet import TelemetryPacket
from gamepad_dash.utils import now_ms


@dataclass
class PrintOnlyPublisher:
    seq: int = 1

    def _next(self) -> int:
        s = self.seq
        self.seq += 1
        return s

    def send_telemetry_packet(self, packet: TelemetryPacket) -> int:
        obj = {"v": 1, "type": "telemetry", "seq": self._next(), "ts": now_ms(), "packet": packet.to_dict()}
        print(json.dumps(obj))
        return obj["seq"]
