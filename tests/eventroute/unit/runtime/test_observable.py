from __future__ import annotations

from eventroute.runtime.observable import Observable, ObserverSet
from tests.eventroute.conftest import Recorder, Silent


class Score(Observable):
    def __init__(self, value: int = 0) -> None:
        super().__init__()
        self.value = value

    def set_value(self, value: int) -> None:
        self.value = value
        self.notify_observers()


class ScoreLabel(Recorder):
    def change_was_observed(self, score: Score) -> bool:
        self.record("change_was_observed", score.value)
        return True


class ScoreLog(Recorder):
    def score_changed(self, score: Score) -> None:
        self.record("score_changed", score.value)

    def change_was_observed(self, text: str) -> bool:
        self.record("wrong_type", text)
        return True


class Detacher(Recorder):
    def __init__(self, score: Score) -> None:
        super().__init__()
        self.score = score

    def change_was_observed(self, score: Score) -> None:
        self.record("detach")
        score.remove_observer(self)


def test_observers_receive_the_source_in_registration_order() -> None:
    score = Score()
    label = ScoreLabel()
    log = ScoreLog()
    score.add_observer(label)
    score.add_observer(log, "score_changed")

    score.set_value(3)

    assert label.calls == [("change_was_observed", (3,))]
    assert log.calls == [("score_changed", (3,))]
    assert score.observer_count == 2


def test_notify_counts_consuming_handlers_and_skips_incompatible_receivers() -> None:
    score = Score(5)
    score.add_observer(ScoreLabel())
    score.add_observer(ScoreLog())
    score.add_observer(Silent())

    assert score.notify_observers() == 1


def test_duplicate_registration_is_ignored() -> None:
    observers = ObserverSet()
    label = ScoreLabel()

    observers.add(label)
    observers.add(label)
    observers.add(label, "score_changed")
    observers.add(ScoreLabel())

    assert len(observers) == 3


def test_remove_and_clear() -> None:
    score = Score()
    label = ScoreLabel()
    score.add_observer(label)
    score.remove_observer(label, "score_changed")
    assert score.observer_count == 1

    score.remove_observer(label)
    score.set_value(1)
    assert label.calls == []

    score.add_observer(label)
    score.clear_observers()
    assert score.observer_count == 0


def test_observer_may_detach_itself_during_notification() -> None:
    score = Score()
    detacher = Detacher(score)
    label = ScoreLabel()
    score.add_observer(detacher)
    score.add_observer(label)

    score.set_value(2)
    score.set_value(4)

    assert detacher.names() == ["detach"]
    assert label.calls == [("change_was_observed", (2,)), ("change_was_observed", (4,))]
