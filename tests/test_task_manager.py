# tests/test_task_manager.py

from __future__ import annotations

import logging
from datetime import date

import pytest

from constants import DEFAULT_ICON
from models.errors import NotFoundError, PersistenceError, ValidationError
from models.task_manager import TaskManager
from storage.csv_export import build_csv
from storage.task_storage import TaskStorage


def test_create_starts_stopped_at_zero(manager: TaskManager, clock) -> None:
    task = manager.create("  Write report ", "📚")
    assert task.name == "Write report"
    assert task.total_seconds == 0
    assert task.is_running is False
    assert task.current_session_start_time is None
    assert task.created_at == clock.now
    assert manager.list() == [task]


def test_create_uses_default_icon(manager: TaskManager) -> None:
    assert manager.create("Plain").icon == DEFAULT_ICON


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_create_rejects_blank_name(manager: TaskManager, name: str) -> None:
    manager.create("Existing")
    with pytest.raises(ValidationError):
        manager.create(name)
    assert len(manager.list()) == 1


def test_list_is_newest_first_and_newer_wins_ties(manager: TaskManager, clock) -> None:
    a = manager.create("A")
    clock.advance(1)
    b = manager.create("B")
    c = manager.create("C")  # same createdAt as B
    assert [t.id for t in manager.list()] == [c.id, b.id, a.id]


def test_scenario_write_report(manager: TaskManager, clock) -> None:
    task = manager.create("Write report", "📚")
    assert len(manager.list()) == 1

    running = manager.toggle_timer(task.id)
    assert running.is_running

    clock.advance(125)
    stopped = manager.toggle_timer(task.id)
    assert stopped.total_seconds == 125
    assert stopped.is_running is False

    edited = manager.set_manual_time(task.id, "00:10:00")
    assert edited.total_seconds == 600

    csv_text = build_csv(manager.list(), today=date(2026, 10, 19))
    assert csv_text.splitlines()[1] == '2026-10-19,"Write report",📚,00:10:00'


def test_effective_seconds_does_not_commit(manager: TaskManager, clock) -> None:
    task = manager.create("Tick")
    manager.toggle_timer(task.id)
    clock.advance(30)
    assert manager.effective_seconds(task.id) == 30
    assert manager.get_task(task.id).total_seconds == 0
    assert [t.id for t in manager.running_tasks()] == [task.id]


def test_manual_time_while_running_stops(manager: TaskManager, clock) -> None:
    task = manager.create("Busy")
    manager.toggle_timer(task.id)
    clock.advance(500)
    out = manager.set_manual_time(task.id, 60)
    assert out.total_seconds == 60
    assert out.is_running is False
    assert out.current_session_start_time is None
    assert manager.running_tasks() == []


def test_manual_time_invalid_leaves_state(manager: TaskManager) -> None:
    task = manager.create("Keep")
    manager.set_manual_time(task.id, "00:01:00")
    with pytest.raises(ValidationError):
        manager.set_manual_time(task.id, "1:00")
    assert manager.get_task(task.id).total_seconds == 60


def test_edit_task_only_touches_name_and_icon(manager: TaskManager, clock) -> None:
    task = manager.create("Old", "📚")
    manager.toggle_timer(task.id)
    edited = manager.edit_task(task.id, "New", "💻")
    assert (edited.name, edited.icon) == ("New", "💻")
    assert edited.is_running
    assert edited.current_session_start_time == clock.now


def test_update_applies_fields_and_validates(manager: TaskManager) -> None:
    task = manager.create("X")
    out = manager.update(task.id, name=" Y ", total_seconds=42)
    assert out.name == "Y"
    assert out.total_seconds == 42
    with pytest.raises(ValidationError):
        manager.update(task.id, is_running=True)
    with pytest.raises(ValidationError):
        manager.update(task.id, total_seconds=-5)
    with pytest.raises(ValidationError):
        manager.update(task.id, id="other")
    assert manager.get_task(task.id).total_seconds == 42


@pytest.mark.parametrize(
    "fields",
    [
        {"total_seconds": 1.5},
        {"total_seconds": "10"},
        {"total_seconds": True},
        {"is_running": 1},
        {"current_session_start_time": "now"},
        {"name": 123},
        {"icon": object()},
    ],
)
def test_update_rejects_wrong_types(manager: TaskManager, task_storage: TaskStorage, fields) -> None:
    task = manager.create("Typed")
    updates = []
    manager.task_updated.connect(updates.append)

    with pytest.raises(ValidationError):
        manager.update(task.id, **fields)

    assert manager.get_task(task.id) == task
    assert task_storage.load_tasks() == [task]
    assert updates == []


def test_missing_ids_are_silent_noops(manager: TaskManager) -> None:
    assert manager.update("nope", name="x") is None
    assert manager.remove("nope") is False
    assert manager.toggle_timer("nope") is None
    assert manager.edit_task("nope", "a", "b") is None
    assert manager.set_manual_time("nope", 5) is None
    assert manager.effective_seconds("nope") is None
    with pytest.raises(NotFoundError):
        manager.require_task("nope")


def test_remove_deletes_task(manager: TaskManager) -> None:
    keep = manager.create("Keep")
    gone = manager.create("Gone")
    assert manager.remove(gone.id) is True
    assert manager.get_task(gone.id) is None
    assert [t.id for t in manager.list()] == [keep.id]


def test_every_mutation_is_persisted(manager: TaskManager, task_storage: TaskStorage, clock) -> None:
    task = manager.create("Persist", "🎯")
    manager.toggle_timer(task.id)
    clock.advance(10)
    manager.toggle_timer(task.id)

    reloaded = TaskManager(task_storage, clock=clock)
    reloaded.load()
    assert reloaded.list() == manager.list()
    assert reloaded.get_task(task.id).total_seconds == 10

    manager.remove(task.id)
    reloaded.load()
    assert reloaded.list() == []


def test_running_session_survives_reload(manager: TaskManager, task_storage: TaskStorage, clock) -> None:
    task = manager.create("Overnight")
    manager.toggle_timer(task.id)

    clock.advance(3600)
    reloaded = TaskManager(task_storage, clock=clock)
    reloaded.load()
    assert reloaded.effective_seconds(task.id) == 3600
    assert reloaded.toggle_timer(task.id).total_seconds == 3600


def test_signals_are_emitted(manager: TaskManager) -> None:
    events = []
    manager.task_added.connect(lambda t: events.append(("added", t.id)))
    manager.task_updated.connect(lambda t: events.append(("updated", t.id)))
    manager.task_deleted.connect(lambda tid: events.append(("deleted", tid)))

    task = manager.create("Signal")
    manager.toggle_timer(task.id)
    manager.remove(task.id)
    manager.remove(task.id)

    assert events == [("added", task.id), ("updated", task.id), ("deleted", task.id)]


class _BrokenStorage:
    def load_tasks(self):
        return []

    def save_tasks(self, tasks):
        raise PersistenceError("disk full")


def test_persistence_failure_is_reported_not_raised(clock, caplog: pytest.LogCaptureFixture) -> None:
    m = TaskManager(_BrokenStorage(), clock=clock)
    failures = []
    m.persistence_failed.connect(failures.append)

    with caplog.at_level(logging.ERROR, logger="models.task_manager"):
        task = m.create("Unsaved")

    assert failures == ["disk full"]
    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert errors and errors[0].exc_info is not None
    assert m.get_task(task.id) == task
