"""Pixel sink protocols for termclock drawing.

All drawing code talks to a ``PixelSink``: any object with a
``set_pixel(color, x, y)`` method.  Surfaces that are shown to a user
additionally implement ``FrameSurface`` — a ``flush()`` that commits
queued draws and a ``size`` reporting ``(columns, rows)``.

Implementations
---------------
memory
    ``MemorySink`` records cells in memory (tests, one-shot snapshots).
terminal
    ``TerminalSink`` writes glyphs to a Rich console at 2:1 pitch.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from termclock.models.color import Color


class SinkUnavailableError(RuntimeError):
    """Raised when drawing is attempted without a usable pixel sink.

    The program cannot proceed without one; callers should exit.
    """


@runtime_checkable
class PixelSink(Protocol):
    """Protocol for the paint/clear capability of a single cell.

    Sinks must tolerate coordinates at or beyond the edges of their
    visible area and clip them silently.
    """

    def set_pixel(self, color: Color, x: int, y: int) -> None:
        """Paint (or clear) the cell at ``(x, y)`` with *color*."""
        ...


@runtime_checkable
class FrameSurface(PixelSink, Protocol):
    """A pixel sink whose draws become visible on ``flush()``."""

    @property
    def size(self) -> tuple[int, int]:
        """Return ``(columns, rows)`` of the output surface."""
        ...

    def flush(self) -> None:
        """Commit queued draws to the visible surface."""
        ...


def require_sink(sink: object) -> PixelSink:
    """Return *sink* if it satisfies ``PixelSink``, else raise.

    Raises
    ------
    SinkUnavailableError
        If *sink* is ``None`` or has no callable ``set_pixel``.
    """
    if sink is None:
        raise SinkUnavailableError("No pixel sink was provided.")
    if not isinstance(sink, PixelSink) or not callable(getattr(sink, "set_pixel", None)):
        raise SinkUnavailableError(
            f"{type(sink).__name__} does not implement set_pixel(color, x, y)."
        )
    return sink


def require_surface(surface: object) -> FrameSurface:
    """Return *surface* if it satisfies ``FrameSurface``, else raise.

    Raises
    ------
    SinkUnavailableError
        If *surface* is not a usable pixel sink, or lacks ``flush``/``size``.
    """
    require_sink(surface)
    if not isinstance(surface, FrameSurface) or not callable(getattr(surface, "flush", None)):
        raise SinkUnavailableError(
            f"{type(surface).__name__} does not implement flush() and size."
        )
    return surface


__all__ = [
    "PixelSink",
    "FrameSurface",
    "SinkUnavailableError",
    "require_sink",
    "require_surface",
]
