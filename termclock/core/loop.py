"""Tick driver for ``ClockMachine``.

Each frame runs paint → flush → wait → erase, in that order.  ``sleep``
and ``now`` are injectable so the loop can be driven without real
delays.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import datetime

from termclock.core.clock_machine import ClockMachine

logger = logging.getLogger(__name__)


class ClockLoop:
    """Runs frames on a ``ClockMachine`` until stopped.

    Parameters
    ----------
    machine:
        The machine to drive.
    interval:
        Seconds the painted hands stay on display.
    sleep:
        Blocking wait, ``time.sleep`` by default.
    now:
        Wall-clock source, ``datetime.now`` by default.
    """

    def __init__(
        self,
        machine: ClockMachine,
        *,
        interval: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._machine = machine
        self._interval = interval
        self._sleep = sleep
        self._now = now
        self._stop_requested = False
        self.frames = 0

    @property
    def machine(self) -> ClockMachine:
        return self._machine

    def stop(self) -> None:
        """Request a stop once the current frame has been erased."""
        self._stop_requested = True

    def run_frame(self) -> None:
        """Run one paint → wait → erase cycle."""
        self._machine.paint(self._now())
        self._machine.begin_wait()
        self._sleep(self._interval)
        self._machine.erase()
        self.frames += 1

    def run(self, max_frames: int | None = None) -> int:
        """Draw the face, then run frames until stopped.

        Returns the number of frames run by this call.  A ``stop()``
        requested before ``run()`` is honoured: the face is drawn and no
        frames run.  The request is cleared when ``run()`` returns.
        """
        self._machine.draw_face()
        logger.info("Clock loop started (interval=%.2fs)", self._interval)

        ran = 0
        while not self._stop_requested:
            if max_frames is not None and ran >= max_frames:
                break
            self.run_frame()
            ran += 1

        self._stop_requested = False
        logger.info("Clock loop stopped after %d frames", ran)
        return ran
