import json

import serial

from gamepad_dash.opmode.gamepad_opmode import Actor, build_packet
from gamepad_dash.telemetry.ndjson_serial import NdjsonSerialPublisher, open_publisher
from gamepad_dash.telemetry.print_publisher import PrintOnlyPublisher


def read_lines(ser, n):
    return [json.loads(ser.readline().decode("utf-8")) for _ in range(n)]


def test_ndjson_publisher_writes_one_line_per_packet():
    ser = serial.serial_for_url("loop://", timeout=0.5)
    pub = NdjsonSerialPublisher(ser, log_tx=False)

    assert pub.send_telemetry_packet(build_packet(Actor(1.0, 2.0), Actor(3.0, 4.0))) == 1
    assert pub.send_telemetry_packet(build_packet(Actor(), Actor())) == 2

    first, second = read_lines(ser, 2)
    ser.close()

    assert first["v"] == 1
    assert first["type"] == "telemetry"
    assert (first["seq"], second["seq"]) == (1, 2)
    assert first["packet"]["log"] == ["1.0", "2.0", "3.0", "4.0"]
    assert first["packet"]["fieldOverlay"]["ops"][1] == {
        "type": "circle", "x": 1.0, "y": 2.0, "radius": 10.0, "stroke": False,
    }


def test_ndjson_publisher_logs_escaped_tx(capsys):
    ser = serial.serial_for_url("loop://", timeout=0.5)
    pub = NdjsonSerialPublisher(ser, log_tx=True)
    pub.send_telemetry_packet(build_packet(Actor(), Actor()))
    ser.close()

    out = capsys.readouterr().out
    assert out.startswith("TX_RAW :")
    assert '"type":"telemetry"' in out
    assert out.count("\n") == 1  # the frame's own newline is escaped


def test_open_publisher_accepts_pyserial_urls():
    pub = open_publisher("loop://", 115200, timeout_s=0.5, log_tx=False)
    with pub.ser:
        pub.send_telemetry_packet(build_packet(Actor(), Actor()))
        assert read_lines(pub.ser, 1)[0]["seq"] == 1


def test_print_publisher_prints_envelope(capsys):
    pub = PrintOnlyPublisher()
    assert pub.send_telemetry_packet(build_packet(Actor(), Actor(5.0, 0.0))) == 1

    obj = json.loads(capsys.readouterr().out)
    assert obj["type"] == "telemetry"
    assert obj["packet"]["log"] == ["0.0", "0.0", "5.0", "0.0"]
    assert pub.seq == 2
