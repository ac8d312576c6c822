from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from gamepad_dash.utils import now_ms


@dataclass(frozen=True)
class StrokeOp:
    """Sets the stroke color for every shape drawn after it."""
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "stroke", "color": self.color}


@dataclass(frozen=True)
class CircleOp:
    x: float
    y: float
    radius: float
    stroke: bool = False  # False = filled

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "circle", "x": self.x, "y": self.y, "radius": self.radius, "stroke": self.stroke}


DrawOp = Union[StrokeOp, CircleOp]


@dataclass
class Canvas:
    """
    Field overlay. Style ops are standing state: they apply to later shapes
    until overridden, so the op order is the drawing order.
    """
    ops: List[DrawOp] = field(default_factory=list)

    def set_stroke(self, color: str) -> "Canvas":
        self.ops.append(StrokeOp(color))
        return self

    def fill_circle(self, x: float, y: float, radius: float) -> "Canvas":
        self.ops.append(CircleOp(x, y, radius, stroke=False))
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {"ops": [op.to_dict() for op in self.ops]}


@dataclass
class TelemetryPacket:
    """
    One dashboard update: key/value data, free text lines and a field overlay.
    """
    timestamp: int = field(default_factory=now_ms)
    data: Dict[str, Any] = field(default_factory=dict)
    lines: List[str] = field(default_factory=list)
    overlay: Canvas = field(default_factory=Canvas)

    def field_overlay(self) -> Canvas:
        return self.overlay

    def add_line(self, line: str) -> None:
        self.lines.append(line)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "data": dict(self.data),
            "log": list(self.lines),
            "fieldOverlay": self.overlay.to_dict(),
        }
