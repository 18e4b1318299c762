"""Event dispatchers that accept alternate handler signatures."""

from __future__ import annotations

from eventroute.api.input_events import Point, PointF, TouchSample
from eventroute.runtime.event_dispatch import CallShape, EventDispatcher, ResolvedCall


class OptionalEventDispatcher(EventDispatcher):
    """Event dispatcher whose rightmost arguments may be dropped.

    Created with a minimum of 1 and invoked with ``(a, b, c)``, handlers are
    sought for ``(a, b, c)``, then ``(a, b)``, then ``(a,)``; the longest
    signature a receiver declares comes first.
    """

    def __init__(self, method_name: str, minimum_arity: int = 0) -> None:
        super().__init__(method_name)
        if minimum_arity < 0:
            raise ValueError("minimum_arity must be >= 0")
        self._minimum_arity = minimum_arity

    @property
    def minimum_arity(self) -> int:
        return self._minimum_arity

    def lookup_call_shapes(self, receiver_type: type, arg_types: tuple[type, ...]) -> list[ResolvedCall]:
        calls = super().lookup_call_shapes(receiver_type, arg_types)
        # The full-length shape is the base lookup above.
        for count in range(len(arg_types) - 1, self._minimum_arity - 1, -1):
            shape = CallShape(
                arg_types[:count],
                rewrite=lambda args, count=count: args[:count],
                label=f"first_{count}",
            )
            self.resolve_shape(receiver_type, shape, calls)
        return calls


class ReversibleEventDispatcher(EventDispatcher):
    """Event dispatcher that also accepts handlers declaring arguments in reverse.

    The reversed shape is resolved whether or not a forward handler exists, so
    a receiver may declare both; the forward one is tried first. With fewer
    than two arguments the reversed shape equals the forward one, so a
    handler that does not consume the event is called twice.
    """

    def lookup_call_shapes(self, receiver_type: type, arg_types: tuple[type, ...]) -> list[ResolvedCall]:
        calls = super().lookup_call_shapes(receiver_type, arg_types)
        shape = CallShape(arg_types[::-1], rewrite=lambda args: args[::-1], label="reversed")
        self.resolve_shape(receiver_type, shape, calls)
        return calls


class PointEventDispatcher(EventDispatcher):
    """Project one location payload into the coordinate signature a handler wants.

    For a payload handler ``on_touch_down(self, point: PointF)`` the payload is
    passed as is. Otherwise, in order: ``(x: float, y: float)``,
    ``(x: int, y: int)``, ``(point: Point)`` and ``()``.

    Each projection resolves on its own, so a single unannotated parameter
    matches both the payload and the ``Point`` projection; unless it returns
    True it is called twice, first with the payload and then with the
    rounded ``Point``.
    """

    payload_type: type = PointF

    def locate(self, payload: object) -> PointF:
        """Return the location carried by `payload`."""
        if not isinstance(payload, PointF):
            raise ValueError(f"expected PointF payload, got {type(payload).__qualname__}")
        return payload

    def lookup_call_shapes(self, receiver_type: type, arg_types: tuple[type, ...]) -> list[ResolvedCall]:
        calls = super().lookup_call_shapes(receiver_type, arg_types)
        if len(arg_types) != 1 or not issubclass(arg_types[0], self.payload_type):
            return calls
        for shape in self._projections():
            self.resolve_shape(receiver_type, shape, calls)
        return calls

    def _projections(self) -> tuple[CallShape, ...]:
        locate = self.locate

        def xy_float(args: tuple[object, ...]) -> tuple[object, ...]:
            point = locate(args[0])
            return (float(point.x), float(point.y))

        def xy_int(args: tuple[object, ...]) -> tuple[object, ...]:
            rounded = locate(args[0]).rounded()
            return (rounded.x, rounded.y)

        def point(args: tuple[object, ...]) -> tuple[object, ...]:
            return (locate(args[0]).rounded(),)

        return (
            CallShape((float, float), rewrite=xy_float, label="xy_float"),
            CallShape((int, int), rewrite=xy_int, label="xy_int"),
            CallShape((Point,), rewrite=point, label="point"),
            CallShape((), rewrite=lambda args: (), label="empty"),
        )


class MotionEventDispatcher(PointEventDispatcher):
    """Point projections of a raw touch sample, using its local coordinates."""

    payload_type = TouchSample

    def locate(self, payload: object) -> PointF:
        if not isinstance(payload, TouchSample):
            raise ValueError(f"expected TouchSample payload, got {type(payload).__qualname__}")
        return payload.local_point()


__all__ = [
    "MotionEventDispatcher",
    "OptionalEventDispatcher",
    "PointEventDispatcher",
    "ReversibleEventDispatcher",
]
