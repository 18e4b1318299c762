"""Directional-pad key mask routing with compound-direction fallback."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from eventroute.api.input_events import KeyCode
from eventroute.runtime.event_dispatch import EventDispatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Directions:
    """Cardinal directions held in one key mask."""

    north: bool = False
    east: bool = False
    south: bool = False
    west: bool = False
    center: bool = False


def _key_bytes(key_mask: int) -> list[int]:
    if key_mask < 0:
        raise ValueError("key_mask must be >= 0")
    fields: list[int] = []
    while key_mask:
        fields.append(key_mask & 0xFF)
        key_mask >>= 8
    return fields


def decode_directions(key_mask: int) -> Directions:
    """Decode a mask of one-byte key codes into cardinal flags.

    Each byte must equal an arrow or WASD key code; bytes are not bit-tested
    against the low byte of the mask, so unrelated codes sharing bits with a
    direction key do not count as that direction. Space or dpad-center marks
    the center press.
    """
    fields = _key_bytes(key_mask)

    def held(arrow: int, letter: int) -> bool:
        return any(field in (arrow, letter) for field in fields)

    return Directions(
        north=held(KeyCode.DPAD_UP, KeyCode.W),
        east=held(KeyCode.DPAD_RIGHT, KeyCode.D),
        south=held(KeyCode.DPAD_DOWN, KeyCode.S),
        west=held(KeyCode.DPAD_LEFT, KeyCode.A),
        center=held(KeyCode.SPACE, KeyCode.DPAD_CENTER),
    )


class DirectionalPadDispatchTable:
    """Route key masks to ``dpad_<direction>_is_down`` handlers."""

    def __init__(self) -> None:
        self._north = EventDispatcher("dpad_north_is_down")
        self._northeast = EventDispatcher("dpad_northeast_is_down")
        self._east = EventDispatcher("dpad_east_is_down")
        self._southeast = EventDispatcher("dpad_southeast_is_down")
        self._south = EventDispatcher("dpad_south_is_down")
        self._southwest = EventDispatcher("dpad_southwest_is_down")
        self._west = EventDispatcher("dpad_west_is_down")
        self._northwest = EventDispatcher("dpad_northwest_is_down")
        self._center = EventDispatcher("dpad_center_is_down")
        self._listener_types: dict[type, bool] = {}

    @property
    def event_names(self) -> tuple[str, ...]:
        return tuple(dispatcher.method_name for dispatcher in self._directional())

    def has_dpad_listeners(self, receiver: object) -> bool:
        """Return whether receiver's type declares any directional handler; cached per type."""
        receiver_type = type(receiver)
        cached = self._listener_types.get(receiver_type)
        if cached is not None:
            return cached
        found = any(dispatcher.is_supported_by(receiver) for dispatcher in self._directional())
        self._listener_types[receiver_type] = found
        logger.debug("dpad_listeners receiver=%s found=%s", receiver_type.__qualname__, found)
        return found

    def dispatch_to(self, receiver: object, key_mask: int) -> bool:
        """Fire direction events for every direction held in `key_mask`."""
        directions = decode_directions(key_mask)
        handled = False
        if self.has_dpad_listeners(receiver):
            handled = self._dispatch_directions(receiver, directions)
        if directions.center:
            handled = self._center.dispatch(receiver) or handled
        return handled

    def _dispatch_directions(self, receiver: object, d: Directions) -> bool:
        handled = False
        if d.north and not (d.east or d.west):
            handled = self._north.dispatch(receiver) or handled
        if d.north and d.east:
            handled = self._compound(receiver, self._northeast, self._north, self._east) or handled
        if d.east and not (d.north or d.south):
            handled = self._east.dispatch(receiver) or handled
        if d.south and d.east:
            handled = self._compound(receiver, self._southeast, self._south, self._east) or handled
        if d.south and not (d.east or d.west):
            handled = self._south.dispatch(receiver) or handled
        if d.south and d.west:
            handled = self._compound(receiver, self._southwest, self._south, self._west) or handled
        if d.west and not (d.north or d.south):
            handled = self._west.dispatch(receiver) or handled
        if d.north and d.west:
            handled = self._compound(receiver, self._northwest, self._north, self._west) or handled
        return handled

    @staticmethod
    def _compound(
        receiver: object,
        compound: EventDispatcher,
        first: EventDispatcher,
        second: EventDispatcher,
    ) -> bool:
        if compound.is_supported_by(receiver):
            return compound.dispatch(receiver)
        handled = first.dispatch(receiver)
        return second.dispatch(receiver) or handled

    def _directional(self) -> tuple[EventDispatcher, ...]:
        return (
            self._north,
            self._northeast,
            self._east,
            self._southeast,
            self._south,
            self._southwest,
            self._west,
            self._northwest,
        )


__all__ = ["DirectionalPadDispatchTable", "Directions", "decode_directions"]
