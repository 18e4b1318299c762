"""Public observer and timer contracts built on named dispatch."""

from __future__ import annotations

from typing import Protocol


class ObserverSet(Protocol):
    """Ordered observer registrations notified through a one-argument handler."""

    def __len__(self) -> int: ...

    def add(self, receiver: object, method_name: str = "change_was_observed") -> None:
        """Register receiver handler."""

    def remove(self, receiver: object, method_name: str = "change_was_observed") -> None:
        """Remove registration if present."""

    def clear(self) -> None:
        """Remove all registrations."""

    def notify(self, source: object) -> int:
        """Notify observers with source; return count of consuming handlers."""


class TimerHandle(Protocol):
    """Handle for one scheduled named event."""

    @property
    def is_running(self) -> bool: ...

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def pause(self) -> None: ...

    def resume(self) -> None: ...


class TimerScheduler(Protocol):
    """Manually advanced clock firing named events on receivers."""

    @property
    def now_seconds(self) -> float: ...

    def call_once(self, receiver: object, method_name: str, delay: float) -> TimerHandle:
        """Fire once after delay."""

    def call_repeatedly(
        self,
        receiver: object,
        method_name: str,
        delay: float,
        repeat_delay: float | None = None,
    ) -> TimerHandle:
        """Fire after delay, then every repeat delay until a handler returns True."""

    def advance(self, delta_seconds: float) -> int:
        """Advance clock; return number of timers fired."""


def create_observer_set() -> ObserverSet:
    """Create default observer set implementation."""
    from eventroute.runtime.observable import ObserverSet as RuntimeObserverSet

    return RuntimeObserverSet()


def create_timer_scheduler() -> TimerScheduler:
    """Create default timer scheduler implementation."""
    from eventroute.runtime.timers import TimerScheduler as RuntimeTimerScheduler

    return RuntimeTimerScheduler()


__all__ = ["ObserverSet", "TimerHandle", "TimerScheduler", "create_observer_set", "create_timer_scheduler"]
