"""Handler discovery and best-match selection over a receiver type's hierarchy."""

from __future__ import annotations

import inspect
import logging
import typing
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from eventroute.api.dispatch import HANDLER_NAMES_ATTR
from eventroute.runtime.errors import RECOVERABLE_SCAN_ERRORS, HandlerInvocationError, log_recoverable
from eventroute.runtime.type_scoring import FormalType, ScoreVector, is_better, normalize_formal, score_parameters

logger = logging.getLogger(__name__)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True, slots=True)
class ResolutionKey:
    """Cache key: receiver's concrete type plus the runtime types of the arguments."""

    receiver_type: type
    arg_types: tuple[type, ...]

    @classmethod
    def of(cls, receiver: object, args: Sequence[object]) -> ResolutionKey:
        return cls(receiver_type=type(receiver), arg_types=tuple(type(arg) for arg in args))


@dataclass(frozen=True, slots=True)
class HandlerCandidate:
    """One function declared on one class of a receiver's hierarchy."""

    owner: type
    function: typing.Callable[..., object]
    parameter_types: tuple[FormalType, ...]

    @property
    def name(self) -> str:
        return self.function.__name__

    def call(self, receiver: object, args: Sequence[object]) -> object:
        return self.function(receiver, *args)


@dataclass(frozen=True, slots=True)
class HandlerMatch:
    """Winning candidate and the index of the argument ordering it matched."""

    candidate: HandlerCandidate
    ordering: int
    scores: ScoreVector


def _event_names(receiver_type: type, name: str) -> set[str]:
    # An override keeps the event names its overridden definitions were tagged with.
    names: set[str] = set()
    for owner in receiver_type.__mro__:
        names.update(getattr(vars(owner).get(name), HANDLER_NAMES_ATTR, ()))
    return names


def _handles_event(receiver_type: type, name: str, value: object, method_name: str) -> bool:
    if not inspect.isfunction(value):
        return False
    if name == method_name:
        return True
    return method_name in _event_names(receiver_type, name)


def _declared_parameter_types(owner: type, function: typing.Callable[..., object]) -> tuple[FormalType, ...] | None:
    try:
        signature = inspect.signature(function)
        hints = typing.get_type_hints(function)
    except RECOVERABLE_SCAN_ERRORS:
        log_recoverable(
            logger,
            f"handler_skipped owner={owner.__qualname__} name={function.__name__} reason=unresolved_annotations",
        )
        return None

    positional = [p for p in signature.parameters.values() if p.kind in _POSITIONAL_KINDS]
    if not positional:
        # No slot for the receiver itself; cannot be called as a method.
        return None
    formals: list[FormalType] = []
    for parameter in positional[1:]:
        annotation = hints.get(parameter.name, object)
        formal = normalize_formal(annotation)
        if formal is None:
            logger.debug(
                "handler_skipped owner=%s name=%s param=%s reason=unsupported_annotation",
                owner.__qualname__,
                function.__name__,
                parameter.name,
            )
            return None
        formals.append(formal)
    return tuple(formals)


def collect_handlers(receiver_type: type, method_name: str) -> tuple[HandlerCandidate, ...]:
    """Enumerate handlers for `method_name` in MRO order, then definition order.

    Only the definition attribute lookup would find is a candidate, so a base
    class function that a subclass overrides is never called.
    """
    candidates: list[HandlerCandidate] = []
    shadowed: set[str] = set()
    for owner in receiver_type.__mro__:
        for name, value in vars(owner).items():
            if name in shadowed:
                continue
            shadowed.add(name)
            if not _handles_event(receiver_type, name, value, method_name):
                continue
            parameter_types = _declared_parameter_types(owner, value)
            if parameter_types is None:
                continue
            candidates.append(HandlerCandidate(owner=owner, function=value, parameter_types=parameter_types))
    return tuple(candidates)


def find_best_handler(
    receiver_type: type,
    method_name: str,
    orderings: Sequence[Sequence[type]],
) -> HandlerMatch | None:
    """Pick the single best (candidate, ordering) pair across all candidates.

    Every candidate is scored against each ordering in turn; a later pair only
    replaces the current best when it is strictly better.
    """
    best: HandlerMatch | None = None
    for candidate in collect_handlers(receiver_type, method_name):
        for index, arg_types in enumerate(orderings):
            scores = score_parameters(arg_types, candidate.parameter_types)
            if scores is None:
                continue
            if best is None or is_better(best.scores, scores):
                best = HandlerMatch(candidate=candidate, ordering=index, scores=scores)
    return best


def is_consumed(result: object) -> bool:
    """Return whether a handler's return value marks the event as consumed."""
    return result is True or result is np.True_


def call_handler(
    method_name: str,
    candidate: HandlerCandidate,
    receiver: object,
    args: Sequence[object],
) -> object:
    """Invoke candidate, chaining any failure under HandlerInvocationError."""
    try:
        return candidate.call(receiver, args)
    except Exception as exc:
        raise HandlerInvocationError(method_name, type(receiver), candidate.name) from exc


__all__ = [
    "HandlerCandidate",
    "HandlerMatch",
    "ResolutionKey",
    "call_handler",
    "collect_handlers",
    "find_best_handler",
    "is_consumed",
]
