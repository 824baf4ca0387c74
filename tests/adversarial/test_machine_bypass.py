"""Adversarial tests — out-of-order ClockMachine calls must not corrupt state."""

from __future__ import annotations

from datetime import datetime

import pytest

from termclock.core import clock_machine as machine_module
from termclock.core.clock_machine import ClockMachine, InvalidTransitionError
from termclock.core.face import face_geometry, hand_angles, hand_segments
from termclock.models.clock import ClockState, HandSpec
from termclock.models.color import Color
from termclock.sinks import SinkUnavailableError
from termclock.sinks.memory import MemorySink


class TestMachineBypass:
    def test_double_erase_rejected(self, machine: ClockMachine, fixed_now: datetime):
        machine.paint(fixed_now)
        machine.begin_wait()
        machine.erase()
        with pytest.raises(InvalidTransitionError):
            machine.erase()
        assert machine.state == ClockState.IDLE

    def test_rejected_paint_draws_nothing(
        self, machine: ClockMachine, sink: MemorySink, fixed_now: datetime
    ):
        machine.paint(fixed_now)
        sink.reset_calls()
        with pytest.raises(InvalidTransitionError):
            machine.paint(fixed_now)
        assert sink.calls == []
        assert sink.flush_count == 1

    def test_rejected_erase_keeps_cached_segments(
        self, machine: ClockMachine, fixed_now: datetime
    ):
        painted = machine.paint(fixed_now)
        with pytest.raises(InvalidTransitionError):
            machine.erase()
        assert machine.painted_segments == painted

    def test_painted_segments_is_a_copy(self, machine: ClockMachine, fixed_now: datetime):
        machine.paint(fixed_now)
        machine.painted_segments.clear()
        assert len(machine.painted_segments) == 3

    def test_recovers_after_many_cycles(self, machine: ClockMachine, sink: MemorySink):
        for second in range(0, 60, 5):
            machine.paint(datetime(2026, 1, 1, 6, 15, second))
            machine.begin_wait()
            machine.erase()
        assert machine.state == ClockState.IDLE
        assert sink.flush_count == 12


class OnlySetPixel:
    """Paints cells but cannot flush them."""

    def set_pixel(self, color: Color, x: int, y: int) -> None:
        pass


class TestConstructionGuards:
    def test_sink_without_flush_rejected_up_front(self):
        with pytest.raises(SinkUnavailableError, match="flush"):
            ClockMachine(OnlySetPixel(), face_geometry(80, 24))  # type: ignore[arg-type]

    def test_unknown_hand_name_rejected(self, sink: MemorySink, geometry):
        with pytest.raises(ValueError, match="tick"):
            ClockMachine(sink, geometry, hands=[HandSpec(name="tick", inner=0.8, outer=0.95)])
        assert sink.calls == []

    def test_hand_segments_rejects_unknown_name(self, geometry, fixed_now: datetime):
        with pytest.raises(ValueError, match="pendulum"):
            hand_segments(
                geometry,
                hand_angles(fixed_now),
                [HandSpec(name="pendulum", inner=0.0, outer=0.5)],
            )


class TestFailedPaint:
    def test_projection_error_leaves_machine_idle(
        self,
        machine: ClockMachine,
        sink: MemorySink,
        fixed_now: datetime,
        monkeypatch: pytest.MonkeyPatch,
    ):
        def broken(*args, **kwargs):
            raise ValueError("boom")

        monkeypatch.setattr(machine_module, "hand_segments", broken)
        with pytest.raises(ValueError, match="boom"):
            machine.paint(fixed_now)
        assert machine.state == ClockState.IDLE
        assert machine.painted_segments == []
        assert sink.calls == []

        monkeypatch.undo()
        assert len(machine.paint(fixed_now)) == 3
        assert machine.state == ClockState.PAINTED
