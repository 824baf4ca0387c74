"""Geometric value types used by the rasterizer and the polar projector.

Every model is frozen: a segment computed for painting is the exact value
used later for erasing.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Point(BaseModel):
    """Integer cell coordinate in sink space."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int


class LineSegment(BaseModel):
    """Ordered pair of points, drawn inclusive of both endpoints."""

    model_config = ConfigDict(frozen=True)

    start: Point
    end: Point

    @property
    def is_vertical(self) -> bool:
        return self.start.x == self.end.x

    @property
    def is_horizontal(self) -> bool:
        return self.start.y == self.end.y


class Circle(BaseModel):
    """Circle outline around a center cell."""

    model_config = ConfigDict(frozen=True)

    center: Point
    radius: int = Field(ge=0)


class PolarSpec(BaseModel):
    """A radial segment described from a center point.

    ``inner_radius`` and ``outer_radius`` are signed distances from the
    center; a negative value extends past the center in the opposite
    direction.  ``angle`` is in radians, clockwise from 12 o'clock.
    """

    model_config = ConfigDict(frozen=True)

    center: Point
    inner_radius: float
    outer_radius: float
    angle: float
