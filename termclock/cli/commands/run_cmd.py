"""``termclock run`` — the live clock.

Owns the terminal (alternate screen, hidden cursor) and drives the
clock loop until Ctrl+C, or for a fixed number of frames.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console

from termclock.config import ClockSettings
from termclock.core.clock_machine import ClockMachine
from termclock.core.face import FaceGeometryError, face_geometry
from termclock.core.loop import ClockLoop
from termclock.sinks.terminal import TerminalSink

console = Console()
logger = logging.getLogger(__name__)


def run_cmd(
    interval: float = typer.Option(
        None,
        "--interval",
        "-i",
        min=0.01,
        help="Seconds between redraws (default: TERMCLOCK_TICK_SECONDS).",
    ),
    smooth_hour: Optional[bool] = typer.Option(
        None,
        "--smooth-hour/--no-smooth-hour",
        help="Advance the hour hand with the minutes (default: TERMCLOCK_SMOOTH_HOUR_HAND).",
        show_default=False,
    ),
    frames: int = typer.Option(
        None,
        "--frames",
        "-n",
        min=1,
        help="Stop after this many frames instead of running until Ctrl+C.",
    ),
) -> None:
    """Run the live clock until interrupted."""
    current = ClockSettings()

    if not console.is_terminal and frames is None:
        console.print("[bold red]Not a terminal:[/bold red] the live clock needs a TTY.")
        console.print("[dim]Use --frames N to run a bounded number of frames.[/dim]")
        raise typer.Exit(code=1)

    sink = TerminalSink(
        console=console,
        cell_pitch=current.cell_pitch,
        on_glyph=current.on_glyph,
        off_glyph=current.off_glyph,
        style=current.glyph_style,
    )
    columns, rows = sink.size
    try:
        geometry = face_geometry(
            columns,
            rows,
            radius_percent=current.radius_percent,
            cell_pitch=current.cell_pitch,
        )
    except FaceGeometryError as exc:
        console.print(f"[bold red]Cannot draw clock:[/bold red] {exc}")
        raise typer.Exit(code=1)

    machine = ClockMachine(
        sink,
        geometry,
        smooth_hour_hand=current.smooth_hour_hand if smooth_hour is None else smooth_hour,
    )
    loop = ClockLoop(machine, interval=interval or current.tick_seconds)

    with sink.session():
        try:
            loop.run(max_frames=frames)
        except KeyboardInterrupt:
            logger.info("Interrupted after %d frames", loop.frames)
