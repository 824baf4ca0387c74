"""Clock face models — hand layout, per-frame angles, and machine states."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from termclock.models.geometry import Point


class ClockState(str, Enum):
    """States of the paint/wait/erase cycle."""

    IDLE = "idle"
    PAINTED = "painted"
    WAITING = "waiting"


# Valid state transitions, enforced by ClockMachine.
VALID_TRANSITIONS: dict[ClockState, set[ClockState]] = {
    ClockState.IDLE: {ClockState.PAINTED},
    ClockState.PAINTED: {ClockState.WAITING},
    ClockState.WAITING: {ClockState.IDLE},
}


class HandSpec(BaseModel):
    """A radial element of the face, sized as fractions of the face radius.

    A negative ``inner`` makes the element start behind the center, like
    the tail of a real clock hand.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    inner: float
    outer: float


class HandAngles(BaseModel):
    """Hand angles for one frame, in radians clockwise from 12 o'clock."""

    model_config = ConfigDict(frozen=True)

    hour: float
    minute: float
    second: float


class FaceGeometry(BaseModel):
    """Center and radius of the face in logical (pitch-adjusted) cells."""

    model_config = ConfigDict(frozen=True)

    center: Point
    radius: int = Field(ge=1)


TICK_MARK = HandSpec(name="tick", inner=0.80, outer=0.95)

# Drawing order is second, minute, hour.
DEFAULT_HANDS: tuple[HandSpec, ...] = (
    HandSpec(name="second", inner=-0.10, outer=0.95),
    HandSpec(name="minute", inner=-0.05, outer=0.80),
    HandSpec(name="hour", inner=-0.05, outer=0.70),
)
