"""Elapsed-time accounting for tasks.

Every function here is pure: it takes a Task snapshot (and the current time in
epoch milliseconds where needed) and returns a new Task. Only stop() and
override_time() commit time into total_seconds; effective_seconds() is a read
that can be called at any cadence.
"""
from typing import Union

from models.duration import parse_time, NEGATIVE_ERROR
from models.errors import ValidationError, TimerStateError
from models.task import Task, now_ms


def elapsed_seconds(start_ms: int, now: int) -> int:
    # clock set backwards must not produce negative time
    return max(0, (now - start_ms) // 1000)


def effective_seconds(task: Task, now: int) -> int:
    """Committed total plus the live time of the open session"""
    if task.is_running and task.current_session_start_time is not None:
        return task.total_seconds + elapsed_seconds(task.current_session_start_time, now)
    return task.total_seconds


def start(task: Task, now: int) -> Task:
    if task.is_running:
        raise TimerStateError(f"Task '{task.name}' is already running")
    return task.with_changes(is_running=True, current_session_start_time=now)


def stop(task: Task, now: int) -> Task:
    if not task.is_running or task.current_session_start_time is None:
        raise TimerStateError(f"Task '{task.name}' is not running")
    elapsed = elapsed_seconds(task.current_session_start_time, now)
    return task.with_changes(
        total_seconds=task.total_seconds + elapsed,
        is_running=False,
        current_session_start_time=None
    )


def toggle(task: Task, now: int) -> Task:
    """Start a stopped task, stop a running one"""
    if task.is_running:
        return stop(task, now)
    return start(task, now)


def override_time(task: Task, value: Union[int, str]) -> Task:
    """Replace the accumulated duration and stop any open session.

    value is either seconds or an HH:MM:SS string. The running session is
    discarded, not added.
    """
    if isinstance(value, str):
        seconds = parse_time(value)
    elif isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Unsupported time value: {value!r}")
    else:
        seconds = value
    if seconds < 0:
        raise ValidationError(NEGATIVE_ERROR)
    return task.with_changes(
        total_seconds=seconds,
        is_running=False,
        current_session_start_time=None
    )


def clean_name(name: str) -> str:
    if name is not None and not isinstance(name, str):
        raise ValidationError(f"Task name must be text, got {type(name).__name__}")
    name = (name or "").strip()
    if not name:
        raise ValidationError("Task name cannot be empty.")
    return name


def edit(task: Task, name: str, icon: str) -> Task:
    """Rename / re-icon; timer fields are untouched"""
    return task.with_changes(name=clean_name(name), icon=icon or task.icon)
