"""termclock: an analog clock face drawn in terminal character cells.

Integer line (Bresenham) and circle (midpoint) rasterization over an
injected pixel sink, a clockwise-from-12 polar projector for the hands,
and a paint → wait → erase state machine driven once per second.
"""

__version__ = "0.1.0"
__description__ = "Analog terminal clock with integer line and circle rasterization"

from termclock.core.clock_machine import ClockMachine
from termclock.core.loop import ClockLoop
from termclock.core.projector import polar_segment
from termclock.core.rasterizer import draw_circle, draw_line
from termclock.cli.app import app as cli

__all__ = [
    "ClockMachine",
    "ClockLoop",
    "draw_line",
    "draw_circle",
    "polar_segment",
    "cli",
    "__version__",
]
