"""Paint/wait/erase state machine for the clock hands.

Enforces:
- Valid state transitions only (VALID_TRANSITIONS table)
- One flush per frame, after all hands are painted
- Erase repaints exactly the segments that were painted
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import TYPE_CHECKING

from termclock.core.face import HAND_NAMES, draw_dial, hand_angles, hand_segments
from termclock.core.rasterizer import draw_segment
from termclock.models.clock import DEFAULT_HANDS, VALID_TRANSITIONS, ClockState, FaceGeometry, HandSpec
from termclock.models.color import Color
from termclock.models.geometry import LineSegment
from termclock.sinks import require_surface

if TYPE_CHECKING:
    from termclock.sinks import FrameSurface

logger = logging.getLogger(__name__)


class InvalidTransitionError(RuntimeError):
    """Raised when a machine step is requested out of order."""


class ClockMachine:
    """Drives one clock face through ``idle → painted → waiting → idle``.

    Parameters
    ----------
    surface:
        The pixel sink to draw on.  Must also provide ``flush()``.
    geometry:
        Face center and radius.
    hands:
        Hand layout, drawn in order.
    smooth_hour_hand:
        Advance the hour hand with the minutes.

    Raises
    ------
    SinkUnavailableError
        If *surface* is not a usable pixel sink with ``flush()``.
    ValueError
        If a hand is not named ``hour``, ``minute`` or ``second``.
    """

    def __init__(
        self,
        surface: FrameSurface,
        geometry: FaceGeometry,
        *,
        hands: Iterable[HandSpec] = DEFAULT_HANDS,
        smooth_hour_hand: bool = False,
    ) -> None:
        self._surface = require_surface(surface)
        self._geometry = geometry
        self._hands = tuple(hands)
        unknown = [spec.name for spec in self._hands if spec.name not in HAND_NAMES]
        if unknown:
            raise ValueError(f"Unknown hands {unknown}; expected names from {HAND_NAMES}")
        self._smooth_hour = smooth_hour_hand
        self._state = ClockState.IDLE
        self._painted: list[LineSegment] = []

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def geometry(self) -> FaceGeometry:
        return self._geometry

    @property
    def painted_segments(self) -> list[LineSegment]:
        """Return a copy of the segments currently painted for the hands."""
        return list(self._painted)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _transition(self, target: ClockState) -> None:
        allowed = VALID_TRANSITIONS.get(self._state, set())
        if target not in allowed:
            raise InvalidTransitionError(
                f"Cannot transition clock from {self._state.value} to {target.value}. "
                f"Allowed: {[s.value for s in allowed]}"
            )
        self._state = target

    def draw_face(self) -> None:
        """Paint the static dial once and make it visible."""
        draw_dial(self._surface, self._geometry)
        self._surface.flush()
        logger.info(
            "Dial drawn: center=(%d, %d) radius=%d",
            self._geometry.center.x,
            self._geometry.center.y,
            self._geometry.radius,
        )

    def paint(self, now: datetime) -> list[LineSegment]:
        """Paint the hands for *now* and flush (``idle → painted``)."""
        angles = hand_angles(now, smooth_hour=self._smooth_hour)
        segments = hand_segments(self._geometry, angles, self._hands)
        self._transition(ClockState.PAINTED)

        # Erased hands may have cleared dial cells they crossed.
        draw_dial(self._surface, self._geometry)

        self._painted = segments
        for segment in self._painted:
            draw_segment(self._surface, Color.ON, segment)
        self._surface.flush()

        logger.debug("Painted hands for %s", now.strftime("%H:%M:%S"))
        return list(self._painted)

    def begin_wait(self) -> None:
        """Mark the painted frame as on display (``painted → waiting``)."""
        self._transition(ClockState.WAITING)

    def erase(self) -> list[LineSegment]:
        """Clear the hands painted by the last ``paint`` (``waiting → idle``).

        Not flushed: the next ``paint`` commits the erase together with
        the new hands.
        """
        self._transition(ClockState.IDLE)
        erased = self._painted
        for segment in erased:
            draw_segment(self._surface, Color.OFF, segment)
        self._painted = []
        logger.debug("Erased %d hand segments", len(erased))
        return list(erased)
