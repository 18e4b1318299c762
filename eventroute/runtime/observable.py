"""Observer registrations notified through named handler methods."""

from __future__ import annotations

from eventroute.runtime.method_dispatch import MethodDispatcher

DEFAULT_OBSERVER_METHOD = "change_was_observed"


class Observer:
    """One registration: a receiver and the handler name to call on it."""

    __slots__ = ("receiver", "method_name", "_dispatcher")

    def __init__(self, receiver: object, method_name: str) -> None:
        self.receiver = receiver
        self.method_name = method_name
        self._dispatcher = MethodDispatcher(method_name, 1)

    def observe(self, source: object) -> bool:
        return self._dispatcher.invoke(self.receiver, source)

    def __hash__(self) -> int:
        return hash(type(self.receiver)) ^ hash(self.method_name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Observer):
            return NotImplemented
        return self.receiver is other.receiver and self.method_name == other.method_name

    def __repr__(self) -> str:
        return f"Observer({type(self.receiver).__qualname__}.{self.method_name})"


class ObserverSet:
    """Insertion-ordered observer registrations.

    Each observer's handler receives the notifying source as its single
    argument, e.g. ``def change_was_observed(self, model: Model)``; a receiver
    without a compatible handler is skipped.
    """

    def __init__(self) -> None:
        self._observers: dict[Observer, None] = {}

    def __len__(self) -> int:
        return len(self._observers)

    def add(self, receiver: object, method_name: str = DEFAULT_OBSERVER_METHOD) -> None:
        """Register receiver; re-adding the same pair keeps its original position."""
        self._observers.setdefault(Observer(receiver, method_name), None)

    def remove(self, receiver: object, method_name: str = DEFAULT_OBSERVER_METHOD) -> None:
        self._observers.pop(Observer(receiver, method_name), None)

    def clear(self) -> None:
        self._observers.clear()

    def notify(self, source: object) -> int:
        """Notify a snapshot of current observers; return count of consuming handlers."""
        consumed = 0
        for observer in tuple(self._observers):
            if observer.observe(source):
                consumed += 1
        return consumed


class Observable:
    """Mixin that notifies registered observers with itself as the argument.

    Subclasses defining ``__init__`` must call ``super().__init__()``.
    """

    def __init__(self) -> None:
        self._observer_set = ObserverSet()

    @property
    def observer_count(self) -> int:
        return len(self._observer_set)

    def add_observer(self, receiver: object, method_name: str = DEFAULT_OBSERVER_METHOD) -> None:
        self._observer_set.add(receiver, method_name)

    def remove_observer(self, receiver: object, method_name: str = DEFAULT_OBSERVER_METHOD) -> None:
        self._observer_set.remove(receiver, method_name)

    def clear_observers(self) -> None:
        self._observer_set.clear()

    def notify_observers(self) -> int:
        return self._observer_set.notify(self)


__all__ = ["DEFAULT_OBSERVER_METHOD", "Observable", "Observer", "ObserverSet"]
