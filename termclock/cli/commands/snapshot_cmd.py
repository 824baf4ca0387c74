"""``termclock snapshot`` — print one clock frame without taking over the terminal."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from termclock.config import ClockSettings
from termclock.core.clock_machine import ClockMachine
from termclock.core.face import FaceGeometryError, face_geometry
from termclock.sinks.memory import MemorySink

console = Console()


def snapshot_cmd(
    at: str = typer.Option(
        None,
        "--at",
        "-t",
        help="Time to show as HH:MM:SS (default: now).",
    ),
    columns: int = typer.Option(
        60,
        "--columns",
        "-c",
        min=1,
        help="Width of the frame in terminal columns.",
    ),
    rows: int = typer.Option(
        24,
        "--rows",
        "-r",
        min=1,
        help="Height of the frame in rows.",
    ),
    smooth_hour: Optional[bool] = typer.Option(
        None,
        "--smooth-hour/--no-smooth-hour",
        help="Advance the hour hand with the minutes (default: TERMCLOCK_SMOOTH_HOUR_HAND).",
        show_default=False,
    ),
) -> None:
    """Print a single rendered clock frame."""
    current = ClockSettings()

    if at:
        try:
            moment = datetime.strptime(at, "%H:%M:%S")
        except ValueError:
            console.print(f"[bold red]Invalid time:[/bold red] {at!r} (expected HH:MM:SS)")
            raise typer.Exit(code=1)
    else:
        moment = datetime.now()

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

    sink = MemorySink(
        columns,
        rows,
        cell_pitch=current.cell_pitch,
        on_glyph=current.on_glyph,
        off_glyph=current.off_glyph,
    )
    machine = ClockMachine(
        sink,
        geometry,
        smooth_hour_hand=current.smooth_hour_hand if smooth_hour is None else smooth_hour,
    )
    machine.draw_face()
    machine.paint(moment)

    console.print(
        Panel(
            Text(sink.render_text(), no_wrap=True, overflow="crop"),
            title=f"[bold]termclock[/bold] {moment.strftime('%H:%M:%S')}",
            border_style="blue",
            expand=False,
        )
    )
