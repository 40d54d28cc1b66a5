# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from models.task_manager import TaskManager
from storage.local_storage import LocalStorage
from storage.task_storage import TaskStorage


class FakeClock:
    """Settable wall clock in epoch milliseconds."""

    def __init__(self, now: int = 1_700_000_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += int(seconds * 1000)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def local_storage(tmp_path: Path) -> LocalStorage:
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture()
def task_storage(local_storage: LocalStorage) -> TaskStorage:
    return TaskStorage(local_storage)


@pytest.fixture()
def manager(task_storage: TaskStorage, clock: FakeClock) -> TaskManager:
    """TaskManager backed by a real file store and a fake clock."""
    counter = iter(range(1, 10_000))
    m = TaskManager(task_storage, clock=clock, id_factory=lambda: f"task-{next(counter)}")
    m.load()
    return m
