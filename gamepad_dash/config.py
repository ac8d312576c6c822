from __future__ import annotations

import os


def env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    return default if v is None else int(v)


def env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    return default if v is None else float(v)


def env_str(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None else v


# ============================
# Dashboard transport
# ============================
# Anything pyserial's serial_for_url accepts: /dev/ttyUSB0, socket://host:port, loop://
DASH_URL = env_str("DASH_URL", "/dev/ttyUSB0")
DASH_BAUD = env_int("DASH_BAUD", 115200)
DASH_TIMEOUT_S = env_float("DASH_TIMEOUT_S", 0.05)

LOG_TX = env_bool("LOG_TX", True)

# ============================
# Gamepads
# ============================
CTRL_DEADZONE = env_float("CTRL_DEADZONE", 0.2)
CTRL_LAYOUT = env_str("CTRL_LAYOUT", "auto")  # auto, xbox, dualshock4, logitech_dual_action

# Arrow keys + a/b/s in a small window act as one more pad
KEYBOARD_PAD = env_bool("KEYBOARD_PAD", True)

# ============================
# OpMode loop
# ============================
OPMODE_HZ = env_float("OPMODE_HZ", 50.0)
