"""termclock data models — all Pydantic v2, all frozen (immutable)."""

from termclock.models.clock import (
    DEFAULT_HANDS,
    TICK_MARK,
    VALID_TRANSITIONS,
    ClockState,
    FaceGeometry,
    HandAngles,
    HandSpec,
)
from termclock.models.color import Color
from termclock.models.geometry import Circle, LineSegment, Point, PolarSpec

__all__ = [
    # geometry
    "Point",
    "LineSegment",
    "Circle",
    "PolarSpec",
    # color
    "Color",
    # clock
    "ClockState",
    "VALID_TRANSITIONS",
    "HandSpec",
    "HandAngles",
    "FaceGeometry",
    "DEFAULT_HANDS",
    "TICK_MARK",
]
