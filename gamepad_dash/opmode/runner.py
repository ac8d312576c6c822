from __future__ import annotations
import time
from dataclasses import dataclass, field
from typing import Callable

from gamepad_dash.controllers.types import InputSource
from gamepad_dash.opmode.types import OpMode


@dataclass
class OpModeRunner:
    """
    Owns the loop and its cadence. The opmode only sees initialize()/tick();
    it measures its own elapsed time, so an uneven rate here is fine.
    """
    opmode: OpMode
    source: InputSource
    hz: float = 50.0
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False)
    started: bool = False

    def start(self) -> None:
        if self.started:
            return
        self.opmode.initialize()
        self.started = True

    def step(self) -> None:
        if not self.started:
            self.start()
        sticks = self.source.read_pair()
        self.opmode.tick(sticks)

    def run_for(self, ticks: int) -> None:
        period = 1.0 / max(1.0, self.hz)
        for _ in range(ticks):
            self._timed_step(period)

    def run_forever(self) -> None:
        period = 1.0 / max(1.0, self.hz)
        print(f"Running {self.opmode.name} at {self.hz:g} Hz. Ctrl+C to quit.")
        try:
            while True:
                self._timed_step(period)
        except KeyboardInterrupt:
            print("\nStopped.")

    def _timed_step(self, period: float) -> None:
        loop_start = time.monotonic()
        self.step()

        # Maintain rate
        elapsed = time.monotonic() - loop_start
        sleep_s = period - elapsed
        if sleep_s > 0:
            self.sleep(sleep_s)
