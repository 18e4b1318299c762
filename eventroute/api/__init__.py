"""Public named-event dispatch API contracts."""

from eventroute.api.dispatch import (
    EventDispatcher,
    MethodInvoker,
    create_event_dispatcher,
    create_method_dispatcher,
    create_optional_event_dispatcher,
    create_point_event_dispatcher,
    create_reversible_event_dispatcher,
    handles,
)
from eventroute.api.input_dispatch import (
    DpadDispatch,
    TouchDispatch,
    create_dpad_dispatch_table,
    create_touch_dispatch_table,
)
from eventroute.api.input_events import (
    KeyCode,
    Point,
    PointF,
    TouchAction,
    TouchSample,
    combine_key_codes,
)
from eventroute.api.logging import DispatchLoggingConfig
from eventroute.api.observers import (
    ObserverSet,
    TimerHandle,
    TimerScheduler,
    create_observer_set,
    create_timer_scheduler,
)

__all__ = [
    "DispatchLoggingConfig",
    "DpadDispatch",
    "EventDispatcher",
    "KeyCode",
    "MethodInvoker",
    "ObserverSet",
    "Point",
    "PointF",
    "TimerHandle",
    "TimerScheduler",
    "TouchAction",
    "TouchDispatch",
    "TouchSample",
    "combine_key_codes",
    "create_dpad_dispatch_table",
    "create_event_dispatcher",
    "create_method_dispatcher",
    "create_observer_set",
    "create_optional_event_dispatcher",
    "create_point_event_dispatcher",
    "create_reversible_event_dispatcher",
    "create_timer_scheduler",
    "create_touch_dispatch_table",
    "handles",
]
