"""Integer line and circle rasterization over a ``PixelSink``.

Both algorithms are stateless and use integer arithmetic only.  They
never clip: out-of-range cells are passed to the sink, which decides.

Line endpoints are inclusive.  A line between two cells paints exactly
``max(|dx|, |dy|) + 1`` cells, each once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from termclock.models.color import Color
from termclock.models.geometry import Circle, LineSegment, Point

if TYPE_CHECKING:
    from termclock.sinks import PixelSink


def draw_line(sink: PixelSink, color: Color, start: Point, end: Point) -> None:
    """Draw a line from *start* to *end*, both endpoints included.

    Axis-aligned lines take a direct loop; everything else goes through
    Bresenham.  Zero-length lines are handled by the vertical branch.
    """
    sx, sy, ex, ey = start.x, start.y, end.x, end.y
    if sx == ex:
        for y in range(min(sy, ey), max(sy, ey) + 1):
            sink.set_pixel(color, sx, y)
    elif sy == ey:
        for x in range(min(sx, ex), max(sx, ex) + 1):
            sink.set_pixel(color, x, sy)
    else:
        _draw_line_bresenham(sink, color, sx, sy, ex, ey)


def _draw_line_bresenham(
    sink: PixelSink, color: Color, sx: int, sy: int, ex: int, ey: int
) -> None:
    dx = ex - sx
    dy = ey - sy
    steep = abs(dy) >= abs(dx)

    # Walk along the major axis; steep lines are walked transposed.
    if steep:
        sx, sy = sy, sx
        ex, ey = ey, ex
        dx, dy = dy, dx
    xs = 1 if dx >= 0 else -1
    ys = 1 if dy >= 0 else -1
    dx = abs(dx)
    dy = abs(dy)

    e = 2 * dy - dx
    y = sy
    for x in range(sx, ex + xs, xs):
        if steep:
            sink.set_pixel(color, y, x)
        else:
            sink.set_pixel(color, x, y)
        if e > 0:
            e += 2 * (dy - dx)
            y += ys
        else:
            e += 2 * dy


def draw_segment(sink: PixelSink, color: Color, segment: LineSegment) -> None:
    """Draw a ``LineSegment``."""
    draw_line(sink, color, segment.start, segment.end)


def draw_circle(sink: PixelSink, color: Color, center: Point, radius: int) -> None:
    """Draw a circle outline with the midpoint algorithm.

    The four axis-aligned extremes are painted first; the loop then walks
    one octant and mirrors each cell into the other seven.  Cells on the
    octant boundaries may be painted twice.
    """
    cx, cy = center.x, center.y
    f = 1 - radius
    x, y = 0, radius
    ddx, ddy = 1, -2 * radius

    sink.set_pixel(color, cx + radius, cy)
    sink.set_pixel(color, cx - radius, cy)
    sink.set_pixel(color, cx, cy + radius)
    sink.set_pixel(color, cx, cy - radius)

    while x < y:
        if f >= 0:
            y -= 1
            ddy += 2
            f += ddy
        x += 1
        ddx += 2
        f += ddx
        sink.set_pixel(color, cx + x, cy + y)
        sink.set_pixel(color, cx - x, cy + y)
        sink.set_pixel(color, cx + x, cy - y)
        sink.set_pixel(color, cx - x, cy - y)
        sink.set_pixel(color, cx + y, cy + x)
        sink.set_pixel(color, cx - y, cy + x)
        sink.set_pixel(color, cx + y, cy - x)
        sink.set_pixel(color, cx - y, cy - x)


def draw_circle_model(sink: PixelSink, color: Color, circle: Circle) -> None:
    """Draw a ``Circle``."""
    draw_circle(sink, color, circle.center, circle.radius)
