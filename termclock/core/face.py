"""Clock face layout — geometry, hand angles, and the static dial.

The face is computed in logical cells: one logical x spans
``cell_pitch`` terminal columns, so the logical grid is roughly square.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from datetime import datetime
from typing import TYPE_CHECKING

from termclock.core.projector import polar_segment
from termclock.core.rasterizer import draw_circle, draw_segment
from termclock.models.clock import DEFAULT_HANDS, TICK_MARK, FaceGeometry, HandAngles, HandSpec
from termclock.models.color import Color
from termclock.models.geometry import LineSegment, Point

if TYPE_CHECKING:
    from termclock.sinks import PixelSink

logger = logging.getLogger(__name__)

TAU = 2.0 * math.pi
TICK_COUNT = 12
HAND_NAMES = ("hour", "minute", "second")


class FaceGeometryError(ValueError):
    """Raised when the output surface is too small to hold a clock face."""


def face_geometry(
    columns: int,
    rows: int,
    *,
    radius_percent: int = 90,
    cell_pitch: int = 2,
) -> FaceGeometry:
    """Compute the face center and radius for a ``columns x rows`` surface.

    Raises
    ------
    FaceGeometryError
        If the resulting radius is smaller than one cell.
    """
    cx = (columns // cell_pitch) // 2
    cy = rows // 2
    radius = radius_percent * min(cx, cy) // 100
    if radius < 1:
        raise FaceGeometryError(
            f"Surface of {columns}x{rows} cells is too small for a clock face "
            f"(radius would be {radius})."
        )
    geometry = FaceGeometry(center=Point(x=cx, y=cy), radius=radius)
    logger.info(
        "Face geometry for %dx%d: center=(%d, %d) radius=%d",
        columns, rows, cx, cy, radius,
    )
    return geometry


def hand_angles(now: datetime, *, smooth_hour: bool = False) -> HandAngles:
    """Return the hour, minute and second hand angles for *now*.

    By default the hour hand moves in whole-hour steps.  With
    ``smooth_hour`` it also advances with the minutes.
    """
    hour = now.hour % 12
    if smooth_hour:
        hour_fraction = (hour + now.minute / 60.0) / 12.0
    else:
        hour_fraction = hour / 12.0
    return HandAngles(
        hour=TAU * hour_fraction,
        minute=TAU * now.minute / 60.0,
        second=TAU * now.second / 60.0,
    )


def hand_length(fraction: float, radius: int) -> int:
    """Scale *fraction* of *radius* to whole cells, truncating toward zero."""
    return int(fraction * radius)


def radial_segment(geometry: FaceGeometry, spec: HandSpec, angle: float) -> LineSegment:
    return polar_segment(
        geometry.center,
        hand_length(spec.inner, geometry.radius),
        hand_length(spec.outer, geometry.radius),
        angle,
    )


def tick_segments(geometry: FaceGeometry) -> list[LineSegment]:
    """Return the twelve hour tick marks."""
    return [
        radial_segment(geometry, TICK_MARK, TAU * i / TICK_COUNT)
        for i in range(TICK_COUNT)
    ]


def hand_segments(
    geometry: FaceGeometry,
    angles: HandAngles,
    hands: Iterable[HandSpec] = DEFAULT_HANDS,
) -> list[LineSegment]:
    """Return one segment per hand, in *hands* order.

    Hands are matched to angles by name (``second``, ``minute``, ``hour``).

    Raises
    ------
    ValueError
        If a hand name is not one of ``HAND_NAMES``.
    """
    by_name = {"hour": angles.hour, "minute": angles.minute, "second": angles.second}
    segments = []
    for spec in hands:
        if spec.name not in by_name:
            raise ValueError(f"Unknown hand {spec.name!r}; expected one of {HAND_NAMES}")
        segments.append(radial_segment(geometry, spec, by_name[spec.name]))
    return segments


def draw_dial(sink: PixelSink, geometry: FaceGeometry) -> None:
    """Paint the face outline and the tick marks."""
    draw_circle(sink, Color.ON, geometry.center, geometry.radius)
    for segment in tick_segments(geometry):
        draw_segment(sink, Color.ON, segment)
