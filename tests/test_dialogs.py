# tests/test_dialogs.py

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from components.dialogs import TaskFormDialog, TimeEditDialog  # noqa: E402
from models.duration import format_time  # noqa: E402
from models.task_manager import TaskManager  # noqa: E402

app = QApplication.instance() or QApplication([])


def _watch(dialog) -> list[str]:
    outcome: list[str] = []
    dialog.accepted.connect(lambda: outcome.append("accepted"))
    dialog.rejected.connect(lambda: outcome.append("rejected"))
    return outcome


def _time_dialog(manager: TaskManager, task_id: str) -> TimeEditDialog:
    task = manager.require_task(task_id)
    return TimeEditDialog(
        task.name, format_time(task.total_seconds),
        lambda value: manager.set_manual_time(task_id, value),
    )


def test_blank_name_shows_error_and_creates_nothing(manager: TaskManager) -> None:
    dialog = TaskFormDialog(manager.create)
    outcome = _watch(dialog)

    dialog.name_edit.setText("   ")
    dialog.submit()

    assert not dialog.error_label.isHidden()
    assert dialog.error_label.text() == "Task name cannot be empty."
    assert outcome == []
    assert manager.list() == []


def test_cancelled_task_form_creates_nothing(manager: TaskManager) -> None:
    dialog = TaskFormDialog(manager.create)
    outcome = _watch(dialog)

    dialog.name_edit.setText("Never saved")
    dialog.reject()

    assert outcome == ["rejected"]
    assert manager.list() == []


def test_valid_task_form_creates_task(manager: TaskManager) -> None:
    dialog = TaskFormDialog(manager.create)
    outcome = _watch(dialog)

    dialog.name_edit.setText(" Design logo ")
    dialog.icon_picker.select("🎨")
    dialog.submit()

    assert outcome == ["accepted"]
    [task] = manager.list()
    assert (task.name, task.icon) == ("Design logo", "🎨")


def test_malformed_time_then_cancel_leaves_total(manager: TaskManager) -> None:
    task = manager.create("Report")
    manager.set_manual_time(task.id, 600)

    dialog = _time_dialog(manager, task.id)
    assert dialog.time_edit.text() == "00:10:00"
    outcome = _watch(dialog)

    dialog.time_edit.setText("1:00")
    dialog.submit()
    assert not dialog.error_label.isHidden()
    assert outcome == []

    dialog.reject()
    assert outcome == ["rejected"]
    assert manager.get_task(task.id).total_seconds == 600


def test_valid_time_commits_and_stops(manager: TaskManager, clock) -> None:
    task = manager.create("Report")
    manager.set_manual_time(task.id, 600)
    manager.toggle_timer(task.id)
    clock.advance(30)

    dialog = _time_dialog(manager, task.id)
    outcome = _watch(dialog)
    dialog.time_edit.setText("00:01:00")
    dialog.submit()

    assert outcome == ["accepted"]
    saved = manager.get_task(task.id)
    assert saved.total_seconds == 60
    assert saved.is_running is False
