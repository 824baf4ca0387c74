"""termclock CLI — Typer application and commands."""
