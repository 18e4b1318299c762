"""Named-event dispatcher resolving a family of acceptable call shapes."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from eventroute.runtime.debug_config import enabled_dispatch_trace
from eventroute.runtime.handler_index import (
    HandlerCandidate,
    ResolutionKey,
    call_handler,
    find_best_handler,
    is_consumed,
)

logger = logging.getLogger(__name__)

ArgumentRewrite = Callable[[tuple[object, ...]], tuple[object, ...]]


def _identity(args: tuple[object, ...]) -> tuple[object, ...]:
    return args


@dataclass(frozen=True, slots=True)
class CallShape:
    """Parameter types a handler may declare, plus the matching argument rewrite."""

    parameter_types: tuple[type, ...]
    rewrite: ArgumentRewrite = _identity
    label: str = "exact"

    @property
    def arity(self) -> int:
        return len(self.parameter_types)


@dataclass(frozen=True, slots=True)
class ResolvedCall:
    """Call shape bound to the handler it resolved to on one receiver type."""

    shape: CallShape
    candidate: HandlerCandidate

    def invoke(self, method_name: str, receiver: object, args: tuple[object, ...]) -> object:
        return call_handler(method_name, self.candidate, receiver, self.shape.rewrite(args))


class EventDispatcher:
    """Dispatch an event by name to receivers that declare a matching handler.

    Resolution results are cached per (receiver type, argument types) for the
    dispatcher's lifetime. Subclasses widen the accepted signatures by
    overriding `lookup_call_shapes`, calling the base implementation first and
    then appending their own shapes through `resolve_shape`.
    """

    def __init__(self, method_name: str) -> None:
        if not method_name:
            raise ValueError("method_name must not be empty")
        self._method_name = method_name
        self._calls: dict[ResolutionKey, tuple[ResolvedCall, ...]] = {}
        self._scan_count = 0
        self._trace = enabled_dispatch_trace()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._method_name!r})"

    @property
    def method_name(self) -> str:
        return self._method_name

    @property
    def scan_count(self) -> int:
        """Number of call-shape lookups performed (cache misses)."""
        return self._scan_count

    def is_supported_by(self, receiver: object, *args: object) -> bool:
        """Return whether receiver has any handler accepting these arguments."""
        return bool(self._calls_for(receiver, args))

    def dispatch(self, receiver: object, *args: object) -> bool:
        """Invoke resolved handlers in order until one returns True."""
        for call in self._calls_for(receiver, args):
            if self._trace:
                logger.debug(
                    "event_dispatch method=%s receiver=%s handler=%s shape=%s",
                    self._method_name,
                    type(receiver).__qualname__,
                    call.candidate.name,
                    call.shape.label,
                )
            if is_consumed(self.invoke_call(call, receiver, args)):
                return True
        return False

    def invoke_call(self, call: ResolvedCall, receiver: object, args: tuple[object, ...]) -> object:
        """Rewrite arguments for `call` and invoke its handler."""
        return call.invoke(self._method_name, receiver, args)

    def lookup_call_shapes(self, receiver_type: type, arg_types: tuple[type, ...]) -> list[ResolvedCall]:
        """Resolve the exact argument shape; subclasses append alternate shapes."""
        calls: list[ResolvedCall] = []
        self.resolve_shape(receiver_type, CallShape(arg_types), calls)
        return calls

    def resolve_shape(self, receiver_type: type, shape: CallShape, calls: list[ResolvedCall]) -> bool:
        """Append `shape` bound to its best handler; return False if none exists."""
        match = find_best_handler(receiver_type, self._method_name, (shape.parameter_types,))
        if match is None:
            return False
        calls.append(ResolvedCall(shape=shape, candidate=match.candidate))
        return True

    def _calls_for(self, receiver: object, args: Sequence[object]) -> tuple[ResolvedCall, ...]:
        key = ResolutionKey.of(receiver, args)
        calls = self._calls.get(key)
        if calls is None:
            self._scan_count += 1
            calls = tuple(self.lookup_call_shapes(key.receiver_type, key.arg_types))
            self._calls[key] = calls
            logger.debug(
                "event_resolved method=%s receiver=%s args=%s shapes=%s",
                self._method_name,
                key.receiver_type.__qualname__,
                [t.__qualname__ for t in key.arg_types],
                [f"{call.shape.label}->{call.candidate.name}" for call in calls],
            )
        return calls


__all__ = ["ArgumentRewrite", "CallShape", "EventDispatcher", "ResolvedCall"]
