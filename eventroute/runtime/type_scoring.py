"""Argument-to-parameter conversion costs used to rank handler candidates.

A cost is the number of inheritance steps between the runtime type of an
argument and the declared type of a parameter. Identity and boxed pairs cost
nothing; an unrelated pair is incompatible and reported as ``None``.

NumPy scalar types stand in for boxed primitives: ``numpy.int64`` and ``int``
(and the other builtin/scalar pairs below) convert for free in both
directions, so a handler annotated ``int`` ranks the same against either.
"""

from __future__ import annotations

import types
import typing
from collections.abc import Sequence
from typing import Any, TypeAlias, Union

import numpy as np

FormalType: TypeAlias = "type | tuple[type, ...]"
ScoreVector: TypeAlias = tuple[int, ...]

NoneType = type(None)

_BOXED_EQUIVALENTS: dict[type, type] = {
    np.bool_: bool,
    np.int8: int,
    np.int16: int,
    np.int32: int,
    np.int64: int,
    np.uint8: int,
    np.uint16: int,
    np.uint32: int,
    np.uint64: int,
    np.float16: float,
    np.float32: float,
    np.float64: float,
    np.complex64: complex,
    np.complex128: complex,
    np.str_: str,
}


def is_boxed_pair(actual: type, formal: type) -> bool:
    """Return whether the two types differ only by NumPy scalar boxing."""
    return _BOXED_EQUIVALENTS.get(actual) is formal or _BOXED_EQUIVALENTS.get(formal) is actual


def normalize_formal(annotation: object) -> FormalType | None:
    """Reduce a resolved annotation to a class or a tuple of union members.

    Returns None for annotations that cannot be matched against runtime types
    (``Literal``, ``TypeVar``, callables of arbitrary shape and so on).
    """
    if annotation is Any or annotation is object:
        return object
    if annotation is None or annotation is NoneType:
        return NoneType
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        members: list[type] = []
        for arg in typing.get_args(annotation):
            normalized = normalize_formal(arg)
            if normalized is None:
                return None
            if isinstance(normalized, tuple):
                members.extend(normalized)
            else:
                members.append(normalized)
        if object in members:
            return object
        return tuple(dict.fromkeys(members))
    if origin is not None:
        return origin if isinstance(origin, type) else None
    if isinstance(annotation, type):
        return annotation
    return None


def _is_assignable(actual: type, formal: type) -> bool:
    try:
        return issubclass(actual, formal)
    except TypeError:
        # Non-runtime-checkable protocols and similar constructs.
        return False


def _class_cost(actual: type, formal: type) -> int | None:
    if formal is actual:
        return 0
    if is_boxed_pair(actual, formal):
        return 0
    if not _is_assignable(actual, formal):
        return None

    distance = 1
    current: type | None = actual
    while current is not None:
        bases = current.__bases__
        superclass = bases[0] if bases else None
        if superclass is formal:
            return distance
        interfaces = bases[1:]
        if formal in interfaces:
            return distance
        # Mixin bases that lead toward `formal` take precedence over the primary base.
        via_interface = next((base for base in interfaces if _is_assignable(base, formal)), None)
        if via_interface is not None:
            current = via_interface
        else:
            current = superclass
        distance += 1
    return distance


def conversion_cost(actual: type, formal: FormalType) -> int | None:
    """Return the cost of passing an `actual` instance to a `formal` parameter."""
    if isinstance(formal, tuple):
        costs = [cost for member in formal if (cost := _class_cost(actual, member)) is not None]
        return min(costs) if costs else None
    return _class_cost(actual, formal)


def score_parameters(
    actual_types: Sequence[type],
    formal_types: Sequence[FormalType],
) -> ScoreVector | None:
    """Score each position; None when arity differs or any position is incompatible."""
    if len(actual_types) != len(formal_types):
        return None
    scores: list[int] = []
    for actual, formal in zip(actual_types, formal_types):
        cost = conversion_cost(actual, formal)
        if cost is None:
            return None
        scores.append(cost)
    return tuple(scores)


def is_better(old_scores: Sequence[int], new_scores: Sequence[int]) -> bool:
    """Return whether `new_scores` beats `old_scores`.

    Lower total wins. Equal totals are broken left to right at the first
    position that differs; identical vectors keep the older candidate.
    """
    old_total = sum(old_scores)
    new_total = sum(new_scores)
    if old_total != new_total:
        return new_total < old_total
    for old, new in zip(old_scores, new_scores):
        if old != new:
            return new < old
    return False


__all__ = [
    "FormalType",
    "NoneType",
    "ScoreVector",
    "conversion_cost",
    "is_better",
    "is_boxed_pair",
    "normalize_formal",
    "score_parameters",
]
