from __future__ import annotations
from typing import Optional, Protocol

from gamepad_dash.controllers.types import StickPair


class OpMode(Protocol):
    """
    What the runner drives: initialize() once, then tick() until stopped.
    """
    name: str

    def initialize(self) -> None: ...
    def tick(self, sticks: Optional[StickPair]) -> None: ...
