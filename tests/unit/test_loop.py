"""Tests for the ClockLoop tick driver — ordering, bounds, and stop requests."""

from __future__ import annotations

from datetime import datetime, timedelta

from termclock.core.clock_machine import ClockMachine
from termclock.core.loop import ClockLoop
from termclock.models.clock import ClockState
from termclock.models.color import Color
from termclock.sinks.memory import MemorySink


class EventSink(MemorySink):
    """MemorySink that logs paints, erases and flushes into a shared list."""

    def __init__(self, events: list[str]) -> None:
        super().__init__(80, 24)
        self.events = events

    def set_pixel(self, color: Color, x: int, y: int) -> None:
        super().set_pixel(color, x, y)
        self.events.append("on" if color == Color.ON else "off")

    def flush(self) -> None:
        super().flush()
        self.events.append("flush")


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.current = start
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        self.calls += 1
        return value


def _compress(events: list[str]) -> list[str]:
    out: list[str] = []
    for event in events:
        if not out or out[-1] != event:
            out.append(event)
    return out


class TestClockLoop:
    def test_run_bounded_frames(self, geometry, fixed_now: datetime):
        sink = MemorySink()
        sleeps: list[float] = []
        clock = FakeClock(fixed_now)
        loop = ClockLoop(
            ClockMachine(sink, geometry), interval=0.25, sleep=sleeps.append, now=clock
        )

        assert loop.run(max_frames=3) == 3
        assert sleeps == [0.25, 0.25, 0.25]
        assert clock.calls == 3
        assert loop.frames == 3
        # One flush for the face plus one per frame.
        assert sink.flush_count == 4
        assert loop.machine.state == ClockState.IDLE

    def test_paint_flush_wait_erase_order(self, geometry, fixed_now: datetime):
        events: list[str] = []
        loop = ClockLoop(
            ClockMachine(EventSink(events), geometry),
            sleep=lambda _: events.append("sleep"),
            now=FakeClock(fixed_now),
        )
        loop.run(max_frames=2)
        assert _compress(events) == [
            "on", "flush",                          # dial
            "on", "flush", "sleep", "off",          # frame 1
            "on", "flush", "sleep", "off",          # frame 2
        ]

    def test_hands_visible_during_wait(self, geometry, fixed_now: datetime):
        sink = MemorySink()
        machine = ClockMachine(sink, geometry)
        seen: list[bool] = []

        def sleep(_: float) -> None:
            assert machine.state == ClockState.WAITING
            seen.append((20, 12) in sink.lit_cells())

        ClockLoop(machine, sleep=sleep, now=FakeClock(fixed_now)).run(max_frames=1)
        assert seen == [True]

    def test_stop_ends_after_current_frame(self, geometry, fixed_now: datetime):
        machine = ClockMachine(MemorySink(), geometry)
        loop: ClockLoop

        def sleep(_: float) -> None:
            loop.stop()

        loop = ClockLoop(machine, sleep=sleep, now=FakeClock(fixed_now))
        assert loop.run() == 1
        assert machine.state == ClockState.IDLE

    def test_stop_before_run_is_honoured(self, geometry, fixed_now: datetime):
        sink = MemorySink()
        clock = FakeClock(fixed_now)
        loop = ClockLoop(ClockMachine(sink, geometry), sleep=lambda _: None, now=clock)
        loop.stop()
        assert loop.run() == 0
        assert clock.calls == 0
        assert sink.flush_count == 1

        # The request is consumed; a later run proceeds normally.
        assert loop.run(max_frames=2) == 2
        assert loop.frames == 2

    def test_zero_frames_only_draws_face(self, geometry):
        sink = MemorySink()
        loop = ClockLoop(ClockMachine(sink, geometry), sleep=lambda _: None)
        assert loop.run(max_frames=0) == 0
        assert sink.flush_count == 1

    def test_run_frame_advances_time(self, geometry, fixed_now: datetime):
        clock = FakeClock(fixed_now)
        machine = ClockMachine(MemorySink(), geometry)
        loop = ClockLoop(machine, sleep=lambda _: None, now=clock)
        loop.run_frame()
        loop.run_frame()
        assert clock.current == fixed_now + timedelta(seconds=2)
        assert loop.frames == 2
