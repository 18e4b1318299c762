"""Public input dispatch table contracts."""

from __future__ import annotations

from typing import Protocol

from eventroute.api.input_events import TouchSample


class TouchDispatch(Protocol):
    """Route touch samples to local/screen coordinate handlers."""

    def has_touch_listeners(self, receiver: object) -> bool:
        """Return whether receiver's type declares any touch handler."""

    def dispatch_to(self, receiver: object, sample: TouchSample) -> bool:
        """Dispatch sample. Return True when any handler consumed it."""


class DpadDispatch(Protocol):
    """Route directional key masks to direction handlers."""

    def has_dpad_listeners(self, receiver: object) -> bool:
        """Return whether receiver's type declares any direction handler."""

    def dispatch_to(self, receiver: object, key_mask: int) -> bool:
        """Dispatch key mask. Return True when any handler consumed it."""


def create_touch_dispatch_table() -> TouchDispatch:
    """Create default touch dispatch table."""
    from eventroute.runtime.touch_dispatch import TouchDispatchTable

    return TouchDispatchTable()


def create_dpad_dispatch_table() -> DpadDispatch:
    """Create default directional-pad dispatch table."""
    from eventroute.runtime.dpad_dispatch import DirectionalPadDispatchTable

    return DirectionalPadDispatchTable()


__all__ = ["DpadDispatch", "TouchDispatch", "create_dpad_dispatch_table", "create_touch_dispatch_table"]
