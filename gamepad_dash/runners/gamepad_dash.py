from __future__ import annotations

import sys

import serial

from gamepad_dash import config
from gamepad_dash.controllers.pygame_source import PygameInputSource
from gamepad_dash.opmode.gamepad_opmode import GamepadOpMode
from gamepad_dash.opmode.runner import OpModeRunner
from gamepad_dash.telemetry.ndjson_serial import open_publisher


def main() -> int:
    print("Gamepad → dashboard starting")
    print(f"Dashboard: {config.DASH_URL} @ {config.DASH_BAUD}")
    print("Start+A claims gamepad 1, Start+B claims gamepad 2.")
    if config.KEYBOARD_PAD:
        print("Keyboard pad: arrows move, s+a / s+b claim (focus the pygame window).")
    print()

    # 1) Gamepads (pads plugged in later are picked up as they arrive)
    source = PygameInputSource.create(
        deadzone=config.CTRL_DEADZONE,
        layout=config.CTRL_LAYOUT,
        keyboard=config.KEYBOARD_PAD,
    )

    # 2) Transport
    try:
        publisher = open_publisher(
            config.DASH_URL,
            config.DASH_BAUD,
            timeout_s=config.DASH_TIMEOUT_S,
            log_tx=config.LOG_TX,
        )
    except serial.SerialException as e:
        print(f"[error] cannot open {config.DASH_URL}: {e}")
        return 1

    # 3) OpMode loop
    runner = OpModeRunner(GamepadOpMode(publisher), source, hz=config.OPMODE_HZ)
    with publisher.ser:
        try:
            runner.run_forever()
        except OSError as e:  # serial.SerialException included
            print(f"[error] dashboard link lost: {e}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
