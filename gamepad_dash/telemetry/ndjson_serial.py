import json
from typing import Any, Dict

import serial

from gamepad_dash.telemetry.packet import TelemetryPacket
from gamepad_dash.utils import _escape_bytes, now_ms

# ----------------------------
# Telemetry transport (NDJSON over serial / pyserial URL)
# ----------------------------
class NdjsonSerialPublisher:
    """
    Fire-and-forget: one JSON line per packet, nothing is read back.
    Write errors are left to the caller; there is no retry or buffering.
    """
    def __init__(self, ser: serial.SerialBase, *, log_tx: bool = True):
        self.ser = ser
        self.log_tx = log_tx
        self._seq = 1

    def next_seq(self) -> int:
        s = self._seq
        self._seq += 1
        return s

    def send(self, obj: Dict[str, Any]) -> None:
        line = json.dumps(obj, separators=(",", ":")) + "\n"
        raw = line.encode("utf-8")

        if self.log_tx:
            print("TX_RAW :", _escape_bytes(raw))

        self.ser.write(raw)
        self.ser.flush()

    def send_telemetry_packet(self, packet: TelemetryPacket) -> int:
        seq = self.next_seq()
        self.send({"v": 1, "type": "telemetry", "seq": seq, "ts": now_ms(), "packet": packet.to_dict()})
        return seq


def open_publisher(url: str, baud: int, *, timeout_s: float = 0.05, log_tx: bool = True) -> NdjsonSerialPublisher:
    """
    `url` is a device path or any pyserial URL (socket://host:port, loop://, ...).
    The caller owns the port: close it via `publisher.ser`.
    """
    ser = serial.serial_for_url(url, baudrate=baud, timeout=timeout_s)
    return NdjsonSerialPublisher(ser, log_tx=log_tx)
