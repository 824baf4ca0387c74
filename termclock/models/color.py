"""Cell colors understood by every pixel sink."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Paint state of a single cell.

    Integer-valued so additional tones can be appended without changing
    the meaning of the existing members.
    """

    OFF = 0
    ON = 1
