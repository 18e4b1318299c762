"""Dispatch runtime implementations."""

from eventroute.runtime.debug_config import DispatchDebugConfig, load_debug_config
from eventroute.runtime.dpad_dispatch import DirectionalPadDispatchTable
from eventroute.runtime.errors import ArityMismatchError, DispatchError, HandlerInvocationError
from eventroute.runtime.event_dispatch import CallShape, EventDispatcher, ResolvedCall
from eventroute.runtime.logging import setup_dispatch_logging
from eventroute.runtime.method_dispatch import MethodDispatcher
from eventroute.runtime.observable import Observable, ObserverSet
from eventroute.runtime.timers import Timer, TimerScheduler
from eventroute.runtime.touch_dispatch import TouchDispatchTable
from eventroute.runtime.transformers import (
    MotionEventDispatcher,
    OptionalEventDispatcher,
    PointEventDispatcher,
    ReversibleEventDispatcher,
)

__all__ = [
    "ArityMismatchError",
    "CallShape",
    "DirectionalPadDispatchTable",
    "DispatchDebugConfig",
    "DispatchError",
    "EventDispatcher",
    "HandlerInvocationError",
    "MethodDispatcher",
    "MotionEventDispatcher",
    "Observable",
    "ObserverSet",
    "OptionalEventDispatcher",
    "PointEventDispatcher",
    "ResolvedCall",
    "ReversibleEventDispatcher",
    "Timer",
    "TimerScheduler",
    "TouchDispatchTable",
    "load_debug_config",
    "setup_dispatch_logging",
]
