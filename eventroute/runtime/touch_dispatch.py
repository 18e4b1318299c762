"""Touch sample routing to local and screen coordinate handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from eventroute.api.input_events import PointF, TouchAction, TouchSample
from eventroute.runtime.transformers import PointEventDispatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TouchEventPair:
    """Handlers fired for one action: local coordinates first, then screen."""

    local: PointEventDispatcher
    screen: PointEventDispatcher


def _pair(local_name: str, screen_name: str) -> TouchEventPair:
    return TouchEventPair(local=PointEventDispatcher(local_name), screen=PointEventDispatcher(screen_name))


class TouchDispatchTable:
    """Route touch samples to ``on_touch_*`` / ``on_screen_touch_*`` handlers.

    Releasing a touch fires the tap pair before the touch-up pair.
    """

    def __init__(self) -> None:
        self._actions: dict[int, tuple[TouchEventPair, ...]] = {
            TouchAction.DOWN: (_pair("on_touch_down", "on_screen_touch_down"),),
            TouchAction.MOVE: (_pair("on_touch_move", "on_screen_touch_move"),),
            TouchAction.UP: (
                _pair("on_tap", "on_screen_tap"),
                _pair("on_touch_up", "on_screen_touch_up"),
            ),
            TouchAction.DOUBLE_TAP: (_pair("on_double_tap", "on_screen_double_tap"),),
        }
        self._listener_types: dict[type, bool] = {}

    @property
    def event_names(self) -> tuple[str, ...]:
        names: list[str] = []
        for pair in self._all_pairs():
            names.extend((pair.local.method_name, pair.screen.method_name))
        return tuple(names)

    def has_touch_listeners(self, receiver: object) -> bool:
        """Return whether receiver's type declares any touch handler; cached per type."""
        receiver_type = type(receiver)
        cached = self._listener_types.get(receiver_type)
        if cached is not None:
            return cached
        probe = PointF(0.0, 0.0)
        found = any(
            pair.local.is_supported_by(receiver, probe) or pair.screen.is_supported_by(receiver, probe)
            for pair in self._all_pairs()
        )
        self._listener_types[receiver_type] = found
        logger.debug("touch_listeners receiver=%s found=%s", receiver_type.__qualname__, found)
        return found

    def dispatch_to(self, receiver: object, sample: TouchSample) -> bool:
        """Fire the local and screen events for the sample's action.

        Every event of the action fires; the result is True if any was consumed.
        """
        pairs = self._actions.get(sample.masked_action)
        if pairs is None:
            return False
        if not self.has_touch_listeners(receiver):
            return False
        handled = False
        for pair in pairs:
            handled = pair.local.dispatch(receiver, sample.local_point()) or handled
            handled = pair.screen.dispatch(receiver, sample.screen_point()) or handled
        return handled

    def _all_pairs(self) -> tuple[TouchEventPair, ...]:
        return tuple(pair for pairs in self._actions.values() for pair in pairs)


__all__ = ["TouchDispatchTable", "TouchEventPair"]
