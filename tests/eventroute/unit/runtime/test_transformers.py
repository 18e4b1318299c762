from __future__ import annotations

import pytest

from eventroute.api.dispatch import handles
from eventroute.api.input_events import Point, PointF, TouchAction, TouchSample
from eventroute.runtime.transformers import (
    MotionEventDispatcher,
    OptionalEventDispatcher,
    PointEventDispatcher,
    ReversibleEventDispatcher,
)
from tests.eventroute.conftest import DragSource, DropTarget, Item, Recorder


class ItemList(Recorder):
    def item_clicked(self, item: Item) -> bool:
        self.record("item_clicked", item)
        return True


class DetailedItemList(Recorder):
    @handles("item_clicked")
    def clicked_with_position(self, item: Item, position: int) -> None:
        self.record("clicked_with_position", item, position)

    @handles("item_clicked")
    def clicked(self, item: Item) -> None:
        self.record("clicked", item)

    @handles("item_clicked")
    def clicked_bare(self) -> None:
        self.record("clicked_bare")


class BareButton(Recorder):
    def ok_clicked(self) -> None:
        self.record("ok_clicked")


class DropZone(Recorder):
    def on_drop(self, target: DropTarget, source: DragSource) -> bool:
        self.record("on_drop", target, source)
        return True


class Echo(Recorder):
    def on_echo(self, value: str) -> None:
        self.record("on_echo", value)


class FloatTouch(Recorder):
    def on_touch(self, x: float, y: float) -> None:
        self.record("xy_float", x, y)


class IntTouch(Recorder):
    def on_touch(self, x: int, y: int) -> None:
        self.record("xy_int", x, y)


class PointTouch(Recorder):
    def on_touch(self, point: Point) -> None:
        self.record("point", point)


class BareTouch(Recorder):
    def on_touch(self) -> None:
        self.record("bare")


class EveryTouch(Recorder):
    @handles("on_touch")
    def touch_payload(self, point: PointF) -> None:
        self.record("payload")

    @handles("on_touch")
    def touch_bare(self) -> bool:
        self.record("bare")
        return True

    @handles("on_touch")
    def touch_int(self, x: int, y: int) -> None:
        self.record("xy_int")

    @handles("on_touch")
    def touch_float(self, x: float, y: float) -> None:
        self.record("xy_float")


class LooseTouch(Recorder):
    def on_touch(self, where) -> None:
        self.record("on_touch", where)


class MotionTouch(Recorder):
    def on_motion(self, x: float, y: float) -> None:
        self.record("on_motion", x, y)


def test_optional_dispatcher_truncates_trailing_arguments() -> None:
    dispatcher = OptionalEventDispatcher("item_clicked", 1)
    receiver = ItemList()
    item = Item("alpha")

    assert dispatcher.dispatch(receiver, item, 4) is True
    assert receiver.calls == [("item_clicked", (item,))]


def test_optional_dispatcher_prefers_longest_signature_first() -> None:
    dispatcher = OptionalEventDispatcher("item_clicked", 0)
    receiver = DetailedItemList()
    item = Item("beta")

    assert dispatcher.dispatch(receiver, item, 2) is False
    assert receiver.calls == [
        ("clicked_with_position", (item, 2)),
        ("clicked", (item,)),
        ("clicked_bare", ()),
    ]


def test_optional_dispatcher_respects_minimum_arity() -> None:
    dispatcher = OptionalEventDispatcher("item_clicked", 2)
    receiver = ItemList()

    assert dispatcher.is_supported_by(receiver, Item("gamma"), 1) is False
    assert dispatcher.minimum_arity == 2


def test_optional_dispatcher_with_all_arguments_optional() -> None:
    dispatcher = OptionalEventDispatcher("ok_clicked")
    receiver = BareButton()

    assert dispatcher.is_supported_by(receiver, object()) is True
    dispatcher.dispatch(receiver, object())
    assert receiver.names() == ["ok_clicked"]
    with pytest.raises(ValueError):
        OptionalEventDispatcher("ok_clicked", -1)


def test_reversible_dispatcher_swaps_arguments() -> None:
    dispatcher = ReversibleEventDispatcher("on_drop")
    receiver = DropZone()
    source = DragSource("card")
    target = DropTarget("pile")

    assert dispatcher.dispatch(receiver, source, target) is True
    assert receiver.calls == [("on_drop", (target, source))]


def test_reversible_dispatcher_tries_reversed_shape_unconditionally() -> None:
    dispatcher = ReversibleEventDispatcher("on_echo")
    receiver = Echo()

    # One argument reversed is the same shape; a non-consuming handler runs for both.
    assert dispatcher.dispatch(receiver, "hi") is False
    assert receiver.calls == [("on_echo", ("hi",)), ("on_echo", ("hi",))]


def test_reversible_dispatcher_stops_after_consuming_forward_handler() -> None:
    dispatcher = ReversibleEventDispatcher("item_clicked")
    receiver = ItemList()

    assert dispatcher.dispatch(receiver, Item("delta")) is True
    assert receiver.names() == ["item_clicked"]


def test_point_dispatcher_projects_float_coordinates() -> None:
    receiver = FloatTouch()
    PointEventDispatcher("on_touch").dispatch(receiver, PointF(1.5, 2.25))
    assert receiver.calls == [("xy_float", (1.5, 2.25))]


def test_point_dispatcher_rounds_half_up_for_int_coordinates() -> None:
    receiver = IntTouch()
    dispatcher = PointEventDispatcher("on_touch")

    dispatcher.dispatch(receiver, PointF(1.5, 2.4))
    dispatcher.dispatch(receiver, PointF(-1.5, -2.6))

    assert receiver.calls == [("xy_int", (2, 2)), ("xy_int", (-1, -3))]


def test_point_dispatcher_projects_rounded_point_and_empty_signature() -> None:
    point_receiver = PointTouch()
    bare_receiver = BareTouch()
    dispatcher = PointEventDispatcher("on_touch")

    dispatcher.dispatch(point_receiver, PointF(3.5, 0.4))
    dispatcher.dispatch(bare_receiver, PointF(3.5, 0.4))

    assert point_receiver.calls == [("point", (Point(4, 0),))]
    assert bare_receiver.calls == [("bare", ())]


def test_point_dispatcher_candidate_order() -> None:
    receiver = EveryTouch()

    assert PointEventDispatcher("on_touch").dispatch(receiver, PointF(1.0, 1.0)) is True
    # Payload, float pair, int pair, point, empty; stops at the first True.
    assert receiver.names() == ["payload", "xy_float", "xy_int", "bare"]


def test_point_projections_require_point_payload() -> None:
    dispatcher = PointEventDispatcher("on_touch")
    assert dispatcher.is_supported_by(BareTouch(), "not-a-point") is False
    assert dispatcher.is_supported_by(BareTouch(), PointF(0.0, 0.0)) is True


def test_motion_dispatcher_projects_local_coordinates() -> None:
    receiver = MotionTouch()
    sample = TouchSample(action=TouchAction.MOVE, x=4.0, y=5.0, raw_x=104.0, raw_y=205.0)

    MotionEventDispatcher("on_motion").dispatch(receiver, sample)

    assert receiver.calls == [("on_motion", (4.0, 5.0))]


def test_unannotated_handler_receives_payload_then_rounded_point() -> None:
    receiver = LooseTouch()

    assert PointEventDispatcher("on_touch").dispatch(receiver, PointF(1.5, 2.4)) is False
    assert receiver.calls == [("on_touch", (PointF(1.5, 2.4),)), ("on_touch", (Point(2, 2),))]
