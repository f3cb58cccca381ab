"""Unit tests for notes_app.scheduler — cooperative one-shot timers."""

from __future__ import annotations

import pytest

from notes_app.scheduler import Scheduler


class TestScheduler:
    def test_idle(self, scheduler: Scheduler) -> None:
        assert scheduler.pending == 0
        assert scheduler.next_due_in() is None
        assert scheduler.run_due() == 0

    def test_runs_only_when_due(self, scheduler: Scheduler, clock) -> None:
        calls: list[str] = []
        scheduler.call_later(0.5, calls.append, "a")

        clock.advance(0.25)
        assert scheduler.run_due() == 0
        assert calls == []
        assert scheduler.next_due_in() == pytest.approx(0.25)

        clock.advance(0.25)
        assert scheduler.run_due() == 1
        assert calls == ["a"]
        assert scheduler.pending == 0

    def test_runs_in_due_order(self, scheduler: Scheduler, clock) -> None:
        calls: list[str] = []
        scheduler.call_later(3.0, calls.append, "late")
        scheduler.call_later(0.3, calls.append, "early")
        scheduler.call_later(0.3, calls.append, "early-second")

        clock.advance(5)
        assert scheduler.run_due() == 3
        assert calls == ["early", "early-second", "late"]

    def test_args_bound_at_schedule_time(self, scheduler: Scheduler, clock) -> None:
        calls: list[str] = []
        note_id = "first"
        scheduler.call_later(0.3, calls.append, note_id)
        note_id = "second"
        scheduler.call_later(0.3, calls.append, note_id)

        clock.advance(1)
        scheduler.run_due()
        assert calls == ["first", "second"]

    def test_negative_delay_runs_immediately(self, scheduler: Scheduler) -> None:
        calls: list[int] = []
        scheduler.call_later(-1, calls.append, 1)
        assert scheduler.next_due_in() == 0.0
        assert scheduler.run_due() == 1
        assert calls == [1]
