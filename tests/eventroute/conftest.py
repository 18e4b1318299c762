from __future__ import annotations

from dataclasses import dataclass

from eventroute.api.dispatch import handles
from eventroute.api.input_events import Point, PointF


class Animal:
    pass


class Pet:
    pass


class Dog(Animal, Pet):
    pass


class Puppy(Dog):
    pass


class Cat(Animal):
    pass


@dataclass(frozen=True, slots=True)
class Item:
    label: str


@dataclass(frozen=True, slots=True)
class DragSource:
    name: str


@dataclass(frozen=True, slots=True)
class DropTarget:
    name: str


class Recorder:
    """Receiver base that records every handler call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def record(self, name: str, *args: object) -> None:
        self.calls.append((name, args))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


class Shelter(Recorder):
    @handles("adopt")
    def adopt_animal(self, animal: Animal) -> bool:
        self.record("adopt_animal", animal)
        return True

    @handles("adopt")
    def adopt_dog(self, dog: Dog) -> bool:
        self.record("adopt_dog", dog)
        return True


class Silent(Recorder):
    """Receiver with no handlers at all."""


class TouchRecorder(Recorder):
    """Touch receiver using the float coordinate projection."""

    def on_touch_down(self, x: float, y: float) -> bool:
        self.record("on_touch_down", x, y)
        return True

    def on_screen_touch_down(self, point: Point) -> None:
        self.record("on_screen_touch_down", point)

    def on_touch_move(self, point: PointF) -> None:
        self.record("on_touch_move", point)

    def on_screen_touch_up(self) -> bool:
        self.record("on_screen_touch_up")
        return True

    def on_double_tap(self, x: int, y: int) -> None:
        self.record("on_double_tap", x, y)


class CardinalPad(Recorder):
    def dpad_north_is_down(self) -> None:
        self.record("north")

    def dpad_east_is_down(self) -> None:
        self.record("east")

    def dpad_south_is_down(self) -> None:
        self.record("south")

    def dpad_west_is_down(self) -> None:
        self.record("west")

    def dpad_center_is_down(self) -> bool:
        self.record("center")
        return True


class DiagonalPad(CardinalPad):
    def dpad_northeast_is_down(self) -> bool:
        self.record("northeast")
        return True
