"""Fixed-arity reflective dispatcher with a per-type resolution cache."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from eventroute.runtime.debug_config import enabled_dispatch_trace
from eventroute.runtime.errors import ArityMismatchError
from eventroute.runtime.handler_index import (
    HandlerCandidate,
    ResolutionKey,
    call_handler,
    find_best_handler,
    is_consumed,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MethodPlan:
    """Resolved handler and whether arguments are passed in reverse."""

    candidate: HandlerCandidate
    args_reversed: bool


class MethodDispatcher:
    """Invoke `method_name` with exactly `arity` arguments on any receiver.

    Handlers declared with the arguments in the opposite order are accepted;
    the best (handler, ordering) pair over the whole hierarchy wins.
    """

    def __init__(self, method_name: str, arity: int) -> None:
        if not method_name:
            raise ValueError("method_name must not be empty")
        if arity < 0:
            raise ValueError("arity must be >= 0")
        self._method_name = method_name
        self._arity = arity
        # None marks a cached miss.
        self._plans: dict[ResolutionKey, MethodPlan | None] = {}
        self._scan_count = 0
        self._trace = enabled_dispatch_trace()

    @property
    def method_name(self) -> str:
        return self._method_name

    @property
    def arity(self) -> int:
        return self._arity

    @property
    def scan_count(self) -> int:
        """Number of hierarchy scans performed (cache misses)."""
        return self._scan_count

    def invoke(self, receiver: object, *args: object) -> bool:
        """Invoke best handler. Return True only when it returns True."""
        plan = self._plan_for(receiver, args)
        if plan is None:
            return False
        call_args = args[::-1] if plan.args_reversed else args
        if self._trace:
            logger.debug(
                "method_invoke method=%s receiver=%s handler=%s reversed=%s",
                self._method_name,
                type(receiver).__qualname__,
                plan.candidate.name,
                plan.args_reversed,
            )
        return is_consumed(call_handler(self._method_name, plan.candidate, receiver, call_args))

    def supports(self, receiver: object, *args: object) -> bool:
        """Return whether a handler resolves for these arguments."""
        return self._plan_for(receiver, args) is not None

    def _plan_for(self, receiver: object, args: tuple[object, ...]) -> MethodPlan | None:
        if len(args) != self._arity:
            raise ArityMismatchError(self._method_name, self._arity, args)
        key = ResolutionKey.of(receiver, args)
        if key in self._plans:
            return self._plans[key]
        plan = self._resolve(key)
        self._plans[key] = plan
        return plan

    def _resolve(self, key: ResolutionKey) -> MethodPlan | None:
        self._scan_count += 1
        forward = key.arg_types
        match = find_best_handler(key.receiver_type, self._method_name, (forward, forward[::-1]))
        if match is None:
            logger.debug(
                "method_unresolved method=%s receiver=%s args=%s",
                self._method_name,
                key.receiver_type.__qualname__,
                [t.__qualname__ for t in forward],
            )
            return None
        logger.debug(
            "method_resolved method=%s receiver=%s handler=%s.%s reversed=%s",
            self._method_name,
            key.receiver_type.__qualname__,
            match.candidate.owner.__qualname__,
            match.candidate.name,
            match.ordering == 1,
        )
        return MethodPlan(candidate=match.candidate, args_reversed=match.ordering == 1)


__all__ = ["MethodDispatcher", "MethodPlan"]
