"""Shared fixtures: a manual clock, scheduler and in-memory storage."""

from __future__ import annotations

import pytest

from notes_app.config import Settings
from notes_app.scheduler import Scheduler
from notes_app.storage import MemoryStorage


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def scheduler(clock: FakeClock) -> Scheduler:
    return Scheduler(clock=clock)


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    return Settings(_env_file=None, storage_path=tmp_path / "notes.json")
