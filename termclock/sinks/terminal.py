"""Rich terminal sink — paints glyphs at cursor-addressed cells.

Logical ``x`` maps to terminal column ``x * cell_pitch``; character cells
are roughly twice as tall as they are wide, so the default pitch of 2
keeps circles round.  Writes are queued by ``set_pixel`` and emitted
together by ``flush()`` inside a single Rich console buffer.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.control import Control

from termclock.models.color import Color

logger = logging.getLogger(__name__)


class TerminalSink:
    """Writes clock cells to a Rich ``Console``.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    cell_pitch:
        Terminal columns per logical x.
    on_glyph, off_glyph:
        Glyphs written for ``Color.ON`` and ``Color.OFF``.
    style:
        Rich style applied to painted glyphs.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        cell_pitch: int = 2,
        on_glyph: str = "●",
        off_glyph: str = " ",
        style: str | None = "bold",
    ) -> None:
        self.console = console or Console()
        self._pitch = cell_pitch
        self._glyphs = {Color.OFF: off_glyph, Color.ON: on_glyph}
        self._style = style
        self._pending: list[tuple[int, int, Color]] = []

    @property
    def size(self) -> tuple[int, int]:
        width, height = self.console.size
        return width, height

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def set_pixel(self, color: Color, x: int, y: int) -> None:
        column = x * self._pitch
        columns, rows = self.size
        if not (0 <= column < columns and 0 <= y < rows):
            return
        self._pending.append((column, y, color))

    def flush(self) -> None:
        """Emit every queued write, then clear the queue."""
        if not self._pending:
            return
        with self.console:
            for column, row, color in self._pending:
                self.console.control(Control.move_to(column, row))
                self.console.out(
                    self._glyphs.get(color, self._glyphs[Color.ON]),
                    style=self._style if color != Color.OFF else None,
                    highlight=False,
                    end="",
                )
        logger.debug("TerminalSink: flushed %d cells", len(self._pending))
        self._pending.clear()

    @contextmanager
    def session(self) -> Iterator[TerminalSink]:
        """Own the terminal for the duration of a drawing session.

        Switches to the alternate screen with the cursor hidden and clears
        it; the previous screen is restored on exit.
        """
        with self.console.screen(hide_cursor=True):
            self.console.clear()
            yield self
