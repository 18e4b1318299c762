"""Public named-event dispatch API contracts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeVar

HANDLER_NAMES_ATTR = "__dispatch_names__"

TFunc = TypeVar("TFunc", bound=Callable[..., object])


class EventDispatcher(Protocol):
    """Resolve and invoke one named event against arbitrary receivers."""

    @property
    def method_name(self) -> str: ...

    def is_supported_by(self, receiver: object, *args: object) -> bool:
        """Return whether receiver has any handler accepting these arguments."""

    def dispatch(self, receiver: object, *args: object) -> bool:
        """Invoke matching handlers in order. Return True once one consumes the event."""


class MethodInvoker(Protocol):
    """Resolve and invoke a fixed-arity method, accepting reversed argument order."""

    @property
    def method_name(self) -> str: ...

    @property
    def arity(self) -> int: ...

    def invoke(self, receiver: object, *args: object) -> bool:
        """Invoke best handler. Return True only when it returns True."""

    def supports(self, receiver: object, *args: object) -> bool:
        """Return whether a handler resolves for these arguments."""


def handles(*names: str) -> Callable[[TFunc], TFunc]:
    """Register a method as a handler for additional event names.

    Several differently named methods may handle the same event, which is how
    a class declares overloads::

        class Kennel:
            @handles("adopt")
            def adopt_dog(self, dog: Dog) -> bool: ...

            @handles("adopt")
            def adopt_any(self, animal: Animal) -> bool: ...
    """
    if not names:
        raise ValueError("handles() requires at least one event name")
    for name in names:
        if not name:
            raise ValueError("event names must not be empty")

    def decorate(func: TFunc) -> TFunc:
        existing: tuple[str, ...] = getattr(func, HANDLER_NAMES_ATTR, ())
        setattr(func, HANDLER_NAMES_ATTR, existing + tuple(n for n in names if n not in existing))
        return func

    return decorate


def create_method_dispatcher(method_name: str, arity: int) -> MethodInvoker:
    """Create default fixed-arity dispatcher implementation."""
    from eventroute.runtime.method_dispatch import MethodDispatcher

    return MethodDispatcher(method_name, arity)


def create_event_dispatcher(method_name: str) -> EventDispatcher:
    """Create default exact-shape event dispatcher."""
    from eventroute.runtime.event_dispatch import EventDispatcher as RuntimeEventDispatcher

    return RuntimeEventDispatcher(method_name)


def create_optional_event_dispatcher(method_name: str, minimum_arity: int = 0) -> EventDispatcher:
    """Create dispatcher whose trailing arguments past `minimum_arity` are optional."""
    from eventroute.runtime.transformers import OptionalEventDispatcher

    return OptionalEventDispatcher(method_name, minimum_arity)


def create_reversible_event_dispatcher(method_name: str) -> EventDispatcher:
    """Create dispatcher that also accepts handlers declaring arguments in reverse."""
    from eventroute.runtime.transformers import ReversibleEventDispatcher

    return ReversibleEventDispatcher(method_name)


def create_point_event_dispatcher(method_name: str) -> EventDispatcher:
    """Create dispatcher projecting a PointF payload into coordinate shapes."""
    from eventroute.runtime.transformers import PointEventDispatcher

    return PointEventDispatcher(method_name)


__all__ = [
    "EventDispatcher",
    "HANDLER_NAMES_ATTR",
    "MethodInvoker",
    "create_event_dispatcher",
    "create_method_dispatcher",
    "create_optional_event_dispatcher",
    "create_point_event_dispatcher",
    "create_reversible_event_dispatcher",
    "handles",
]
