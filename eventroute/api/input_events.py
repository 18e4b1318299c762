"""Public input sample types consumed by the dispatch tables."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True, slots=True)
class Point:
    """Integer point in pixel coordinates."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class PointF:
    """Float point in canvas coordinates."""

    x: float
    y: float

    def rounded(self) -> Point:
        return Point(round_half_up(self.x), round_half_up(self.y))


class TouchAction(IntEnum):
    """Hardware touch action codes (low byte of the action field)."""

    DOWN = 0
    UP = 1
    MOVE = 2
    DOUBLE_TAP = 0x40


ACTION_MASK = 0xFF


@dataclass(frozen=True, slots=True)
class TouchSample:
    """Raw touch sample: local (view) and raw (screen) coordinates."""

    action: int
    x: float
    y: float
    raw_x: float
    raw_y: float

    @property
    def masked_action(self) -> int:
        return self.action & ACTION_MASK

    def local_point(self) -> PointF:
        return PointF(float(self.x), float(self.y))

    def screen_point(self) -> PointF:
        return PointF(float(self.raw_x), float(self.raw_y))


class KeyCode(IntEnum):
    """Key codes understood by the directional-pad table."""

    DPAD_UP = 19
    DPAD_DOWN = 20
    DPAD_LEFT = 21
    DPAD_RIGHT = 22
    DPAD_CENTER = 23
    A = 29
    D = 32
    S = 47
    W = 51
    SPACE = 62


def combine_key_codes(*codes: int) -> int:
    """Pack simultaneously held key codes into one mask, one byte per key."""
    mask = 0
    for index, code in enumerate(codes):
        if not 0 < int(code) <= 0xFF:
            raise ValueError("key codes must fit in one byte")
        mask |= int(code) << (8 * index)
    return mask


__all__ = [
    "ACTION_MASK",
    "KeyCode",
    "Point",
    "PointF",
    "TouchAction",
    "TouchSample",
    "combine_key_codes",
    "round_half_up",
]
