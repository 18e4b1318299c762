"""Dispatch error taxonomy and tolerated-failure logging."""

from __future__ import annotations

import logging
from typing import TypeAlias

# Failures tolerated while introspecting handler annotations during a scan.
RecoverableScanErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_SCAN_ERRORS: RecoverableScanErrors = (
    NameError,
    TypeError,
    AttributeError,
    SyntaxError,
    ValueError,
)


class DispatchError(RuntimeError):
    """Base class for errors surfaced by dispatchers."""


class ArityMismatchError(DispatchError, ValueError):
    """Caller supplied the wrong number of arguments to a fixed-arity dispatcher."""

    def __init__(self, method_name: str, expected: int, args: tuple[object, ...]) -> None:
        super().__init__(
            f"{len(args)} arguments provided in call to {method_name}{list(args)!r}, "
            f"but {expected} are required."
        )
        self.method_name = method_name
        self.expected = expected
        self.actual = len(args)


class HandlerInvocationError(DispatchError):
    """A resolved handler raised; the original exception is chained as __cause__."""

    def __init__(self, method_name: str, receiver_type: type, handler_name: str) -> None:
        super().__init__(
            f"handler {receiver_type.__qualname__}.{handler_name} failed "
            f"while dispatching {method_name!r}"
        )
        self.method_name = method_name
        self.receiver_type = receiver_type
        self.handler_name = handler_name


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Emit structured observability for tolerated recoverable exceptions."""
    logger.log(level, message, exc_info=True)
