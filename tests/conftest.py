"""Shared test fixtures for termclock."""

from __future__ import annotations

from datetime import datetime

import pytest

from termclock.core.clock_machine import ClockMachine
from termclock.core.face import face_geometry
from termclock.models.geometry import Point
from termclock.sinks.memory import MemorySink


@pytest.fixture
def sink() -> MemorySink:
    """Provide a fresh 80x24 MemorySink."""
    return MemorySink(80, 24)


@pytest.fixture
def center() -> Point:
    """Provide the center used by the end-to-end examples."""
    return Point(x=40, y=12)


@pytest.fixture
def geometry():
    """Provide the face geometry for an 80x24 terminal (center (20, 12), radius 10)."""
    return face_geometry(80, 24)


@pytest.fixture
def machine(sink: MemorySink, geometry) -> ClockMachine:
    """Provide a ClockMachine wired to the test sink."""
    return ClockMachine(sink, geometry)


@pytest.fixture
def fixed_now() -> datetime:
    """Provide a deterministic wall-clock time: 10:08:30."""
    return datetime(2026, 10, 19, 10, 8, 30)
