from __future__ import annotations

import gc

import pytest

from eventroute.runtime.timers import TimerScheduler
from tests.eventroute.conftest import Recorder


class Blinker(Recorder):
    def __init__(self, stop_after: int = 0) -> None:
        super().__init__()
        self.stop_after = stop_after

    def blink(self) -> bool:
        self.record("blink")
        return self.stop_after > 0 and len(self.calls) >= self.stop_after

    def on_timeout(self) -> None:
        self.record("on_timeout")


def test_call_once_fires_when_due() -> None:
    scheduler = TimerScheduler()
    blinker = Blinker()
    timer = scheduler.call_once(blinker, "on_timeout", 0.2)

    assert scheduler.advance(0.1) == 0
    assert scheduler.advance(0.1) == 1
    assert scheduler.advance(1.0) == 0
    assert blinker.names() == ["on_timeout"]
    assert timer.is_running is False
    assert timer.fire_count == 1


def test_call_repeatedly_uses_repeat_delay() -> None:
    scheduler = TimerScheduler()
    blinker = Blinker()
    scheduler.call_repeatedly(blinker, "blink", 1.0, repeat_delay=0.5)

    assert scheduler.advance(1.0) == 1
    assert scheduler.advance(1.0) == 2
    assert len(blinker.calls) == 3
    assert scheduler.active_timer_count == 1


def test_repeating_timer_stops_when_handler_consumes() -> None:
    scheduler = TimerScheduler()
    blinker = Blinker(stop_after=2)
    timer = scheduler.call_repeatedly(blinker, "blink", 0.1)

    scheduler.advance(1.0)

    assert blinker.names() == ["blink", "blink"]
    assert timer.is_running is False
    assert scheduler.active_timer_count == 0


def test_stop_and_restart() -> None:
    scheduler = TimerScheduler()
    blinker = Blinker()
    timer = scheduler.call_once(blinker, "on_timeout", 0.5)

    timer.stop()
    assert scheduler.advance(1.0) == 0

    timer.start()
    assert scheduler.advance(0.25) == 0
    assert scheduler.advance(0.25) == 1
    assert blinker.names() == ["on_timeout"]


def test_pause_keeps_remaining_delay() -> None:
    scheduler = TimerScheduler()
    blinker = Blinker()
    timer = scheduler.call_once(blinker, "on_timeout", 1.0)

    scheduler.advance(0.75)
    timer.pause()
    assert timer.is_paused is True
    assert scheduler.advance(5.0) == 0

    timer.resume()
    assert scheduler.advance(0.125) == 0
    assert scheduler.advance(0.125) == 1


def test_missing_handler_still_counts_as_fired() -> None:
    scheduler = TimerScheduler()
    blinker = Blinker()
    timer = scheduler.call_once(blinker, "not_declared", 0.0)

    assert scheduler.advance(0.0) == 1
    assert blinker.calls == []
    assert timer.method_name == "not_declared"


def test_collected_receiver_retires_timer() -> None:
    scheduler = TimerScheduler()
    blinker = Blinker()
    scheduler.call_repeatedly(blinker, "blink", 0.1)

    del blinker
    gc.collect()

    assert scheduler.advance(1.0) == 0
    assert scheduler.active_timer_count == 0


def test_scheduler_validates_time_arguments() -> None:
    scheduler = TimerScheduler()
    blinker = Blinker()
    with pytest.raises(ValueError):
        scheduler.call_once(blinker, "blink", -0.1)
    with pytest.raises(ValueError):
        scheduler.call_repeatedly(blinker, "blink", 0.0)
    with pytest.raises(ValueError):
        scheduler.advance(-0.1)
    scheduler.advance(1.0)
    with pytest.raises(ValueError):
        scheduler.run_due(0.5)
