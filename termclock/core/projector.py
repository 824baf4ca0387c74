"""Polar projection of clock hands onto the cell grid.

Angles are measured clockwise from 12 o'clock, so angle 0 points up
(towards smaller y).  Projected offsets are rounded to the nearest cell,
halves away from zero, which keeps a segment symmetric about the center.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from termclock.core.rasterizer import draw_segment
from termclock.models.color import Color
from termclock.models.geometry import LineSegment, Point, PolarSpec

if TYPE_CHECKING:
    from termclock.sinks import PixelSink


def _to_cell(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def polar_segment(
    center: Point, inner_radius: float, outer_radius: float, angle: float
) -> LineSegment:
    """Return the segment from *inner_radius* to *outer_radius* along *angle*."""
    ex = math.sin(angle)
    ey = math.cos(angle)
    start = Point(
        x=center.x + _to_cell(inner_radius * ex),
        y=center.y - _to_cell(inner_radius * ey),
    )
    end = Point(
        x=center.x + _to_cell(outer_radius * ex),
        y=center.y - _to_cell(outer_radius * ey),
    )
    return LineSegment(start=start, end=end)


def project(spec: PolarSpec) -> LineSegment:
    """Project a ``PolarSpec`` into a ``LineSegment``."""
    return polar_segment(spec.center, spec.inner_radius, spec.outer_radius, spec.angle)


def draw_polar_segment(sink: PixelSink, color: Color, spec: PolarSpec) -> LineSegment:
    """Draw the projection of *spec* and return the segment that was drawn.

    Erasing must repaint this exact segment with ``Color.OFF``.
    """
    segment = project(spec)
    draw_segment(sink, color, segment)
    return segment
