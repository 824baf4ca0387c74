"""In-memory pixel sink.

Records the current color of every touched cell plus the full call
history.  Used by the test-suite and by ``termclock snapshot`` to render
a single frame without a terminal.
"""

from __future__ import annotations

from termclock.models.color import Color


class MemorySink:
    """Records ``set_pixel`` calls against a fixed-size cell area.

    Parameters
    ----------
    columns, rows:
        Size reported through ``size``.  ``columns`` counts terminal
        columns, so the logical width is ``columns // cell_pitch``.
    cell_pitch:
        Terminal columns per logical x, used by ``render_text``.
    on_glyph, off_glyph:
        Glyphs used by ``render_text``.
    """

    def __init__(
        self,
        columns: int = 80,
        rows: int = 24,
        *,
        cell_pitch: int = 2,
        on_glyph: str = "●",
        off_glyph: str = " ",
    ) -> None:
        self._columns = columns
        self._rows = rows
        self._pitch = cell_pitch
        self._glyphs = {Color.OFF: off_glyph, Color.ON: on_glyph}
        self.cells: dict[tuple[int, int], Color] = {}
        self.calls: list[tuple[Color, int, int]] = []
        self.flush_count = 0

    @property
    def size(self) -> tuple[int, int]:
        return self._columns, self._rows

    def set_pixel(self, color: Color, x: int, y: int) -> None:
        self.calls.append((color, x, y))
        self.cells[(x, y)] = color

    def flush(self) -> None:
        self.flush_count += 1

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def lit_cells(self) -> set[tuple[int, int]]:
        """Return the cells whose current color is not ``OFF``."""
        return {cell for cell, color in self.cells.items() if color != Color.OFF}

    def reset_calls(self) -> None:
        """Forget the call history, keeping cell state."""
        self.calls.clear()

    def render_text(self) -> str:
        """Render the visible area as text, one line per row.

        Cells outside ``size`` are clipped, as a terminal would.
        """
        width = self._columns // self._pitch
        off = self._glyphs[Color.OFF]
        pad = " " * (self._pitch - 1)
        lines: list[str] = []
        for y in range(self._rows):
            row = [
                self._glyphs.get(self.cells.get((x, y), Color.OFF), off) + pad
                for x in range(width)
            ]
            lines.append("".join(row).rstrip())
        return "\n".join(lines)
