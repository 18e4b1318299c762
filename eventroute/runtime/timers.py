"""Deferred and repeating named-event timers on a manually advanced clock."""

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass
from heapq import heappop, heappush

from eventroute.runtime.event_dispatch import EventDispatcher

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _TimerState:
    timer_id: int
    receiver_ref: weakref.ref[object]
    event: EventDispatcher
    initial_delay: float
    repeat_delay: float
    due_seconds: float = 0.0
    generation: int = 0
    running: bool = False
    paused_remaining: float | None = None
    fire_count: int = 0


class Timer:
    """Handle for one scheduled named event."""

    __slots__ = ("_scheduler", "_state")

    def __init__(self, scheduler: TimerScheduler, state: _TimerState) -> None:
        self._scheduler = scheduler
        self._state = state

    @property
    def method_name(self) -> str:
        return self._state.event.method_name

    @property
    def is_running(self) -> bool:
        return self._state.running

    @property
    def is_paused(self) -> bool:
        return self._state.paused_remaining is not None

    @property
    def fire_count(self) -> int:
        return self._state.fire_count

    def start(self) -> None:
        """Start from the initial delay; no-op while already running."""
        if self._state.running:
            return
        self._state.paused_remaining = None
        self._scheduler._post(self._state, self._state.initial_delay)

    def stop(self) -> None:
        self._scheduler._cancel(self._state)
        self._state.paused_remaining = None

    def pause(self) -> None:
        """Stop the clock for this timer, remembering the time left until it fires."""
        if not self._state.running:
            return
        remaining = max(0.0, self._state.due_seconds - self._scheduler.now_seconds)
        self._scheduler._cancel(self._state)
        self._state.paused_remaining = remaining

    def resume(self) -> None:
        remaining = self._state.paused_remaining
        if remaining is None:
            return
        self._state.paused_remaining = None
        self._scheduler._post(self._state, remaining)


class TimerScheduler:
    """Fire named events on receivers after a delay, optionally repeating.

    Receivers are held weakly; a timer whose receiver was collected stops.
    A repeating timer also stops once its handler returns True.
    """

    def __init__(self) -> None:
        self._now_seconds = 0.0
        self._next_timer_id = 1
        self._timers: dict[int, _TimerState] = {}
        self._queue: list[tuple[float, int, int]] = []

    @property
    def now_seconds(self) -> float:
        return self._now_seconds

    @property
    def active_timer_count(self) -> int:
        return sum(1 for state in self._timers.values() if state.running)

    def call_once(self, receiver: object, method_name: str, delay: float) -> Timer:
        """Fire `method_name` on receiver once after `delay` seconds."""
        if delay < 0.0:
            raise ValueError("delay must be >= 0")
        return self._create(receiver, method_name, initial_delay=delay, repeat_delay=0.0)

    def call_repeatedly(
        self,
        receiver: object,
        method_name: str,
        delay: float,
        repeat_delay: float | None = None,
    ) -> Timer:
        """Fire after `delay`, then every `repeat_delay` (defaults to `delay`)."""
        if delay < 0.0:
            raise ValueError("delay must be >= 0")
        interval = delay if repeat_delay is None else repeat_delay
        if interval <= 0.0:
            raise ValueError("repeat_delay must be > 0")
        return self._create(receiver, method_name, initial_delay=delay, repeat_delay=interval)

    def advance(self, delta_seconds: float) -> int:
        """Advance clock and fire due timers; return number fired."""
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        return self.run_due(self._now_seconds + delta_seconds)

    def run_due(self, now_seconds: float) -> int:
        """Fire timers due at or before `now_seconds`."""
        if now_seconds < self._now_seconds:
            raise ValueError("now_seconds cannot move backwards")
        self._now_seconds = now_seconds
        fired = 0
        while self._queue and self._queue[0][0] <= self._now_seconds:
            _, timer_id, generation = heappop(self._queue)
            state = self._timers.get(timer_id)
            if state is None or not state.running or state.generation != generation:
                continue
            receiver = state.receiver_ref()
            if receiver is None:
                logger.debug("timer_receiver_collected method=%s", state.event.method_name)
                self._retire(state)
                continue
            state.fire_count += 1
            fired += 1
            consumed = state.event.dispatch(receiver)
            del receiver
            if state.generation != generation:
                # Handler stopped or restarted this timer.
                continue
            if consumed or state.repeat_delay <= 0.0:
                self._retire(state)
                continue
            state.due_seconds += state.repeat_delay
            heappush(self._queue, (state.due_seconds, state.timer_id, state.generation))
        return fired

    def _create(self, receiver: object, method_name: str, *, initial_delay: float, repeat_delay: float) -> Timer:
        state = _TimerState(
            timer_id=self._next_timer_id,
            receiver_ref=weakref.ref(receiver),
            event=EventDispatcher(method_name),
            initial_delay=initial_delay,
            repeat_delay=repeat_delay,
        )
        self._next_timer_id += 1
        self._timers[state.timer_id] = state
        timer = Timer(self, state)
        timer.start()
        return timer

    def _post(self, state: _TimerState, delay: float) -> None:
        state.generation += 1
        state.running = True
        state.due_seconds = self._now_seconds + delay
        self._timers[state.timer_id] = state
        heappush(self._queue, (state.due_seconds, state.timer_id, state.generation))

    def _cancel(self, state: _TimerState) -> None:
        state.generation += 1
        state.running = False

    def _retire(self, state: _TimerState) -> None:
        state.running = False
        self._timers.pop(state.timer_id, None)


__all__ = ["Timer", "TimerScheduler"]
