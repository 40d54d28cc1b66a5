"""Task store with event signals for the UI"""
import logging
import uuid
from typing import Callable, List, Optional, Union

from PyQt6.QtCore import QObject, pyqtSignal

from constants import DEFAULT_ICON
from models import timer
from models.errors import NotFoundError, PersistenceError, ValidationError
from models.task import Task
from storage.task_storage import TaskStorage

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {
    'name': (str,),
    'icon': (str,),
    'total_seconds': (int,),
    'is_running': (bool,),
    'current_session_start_time': (int, type(None)),
}


class TaskManager(QObject):
    """Owns the task collection and writes it through to storage.

    Tasks are immutable snapshots: every mutation builds a new list, swaps it
    in with one assignment, persists it, then emits a signal.
    """

    # Signals for observers (UI)
    task_added = pyqtSignal(Task)
    task_updated = pyqtSignal(Task)
    task_deleted = pyqtSignal(str)  # task_id
    tasks_loaded = pyqtSignal()
    persistence_failed = pyqtSignal(str)

    def __init__(self, storage: TaskStorage,
                 clock: Callable[[], int] = timer.now_ms,
                 id_factory: Callable[[], str] = lambda: str(uuid.uuid4())):
        super().__init__()
        self.storage = storage
        self.clock = clock
        self.id_factory = id_factory
        self.tasks: List[Task] = []

    def load(self):
        """Replace the collection with what storage holds"""
        self.tasks = self.storage.load_tasks()
        logger.info("Loaded %d tasks", len(self.tasks))
        self.tasks_loaded.emit()

    def _persist(self):
        try:
            self.storage.save_tasks(self.tasks)
        except PersistenceError as e:
            logger.exception("Failed to save tasks")
            self.persistence_failed.emit(str(e))

    def _replace(self, new_task: Task) -> Task:
        self.tasks = [new_task if t.id == new_task.id else t for t in self.tasks]
        self._persist()
        self.task_updated.emit(new_task)
        return new_task

    # --- store operations ---
    def create(self, name: str, icon: str = DEFAULT_ICON) -> Task:
        """Add new task and emit signal"""
        task = Task(
            name=timer.clean_name(name),
            icon=icon or DEFAULT_ICON,
            id=self.id_factory(),
            created_at=self.clock()
        )
        # newest first in insertion order, so ties in created_at list the newer task first
        self.tasks = [task] + self.tasks
        self._persist()
        logger.info("Created task %s (%s)", task.id, task.name)
        self.task_added.emit(task)
        return task

    def update(self, task_id: str, **fields) -> Optional[Task]:
        """Apply field changes; None if the id is unknown"""
        unknown = set(fields) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        for key, value in fields.items():
            allowed = UPDATABLE_FIELDS[key]
            # bool is an int subclass; only is_running takes one
            if not isinstance(value, allowed) or (isinstance(value, bool) and bool not in allowed):
                raise ValidationError(f"Invalid value for {key}: {value!r}")
        task = self.get_task(task_id)
        if task is None:
            logger.debug("Update ignored, task %s not found", task_id)
            return None
        if 'name' in fields:
            fields['name'] = timer.clean_name(fields['name'])
        new_task = task.with_changes(**fields)
        if not new_task.is_consistent():
            raise ValidationError("Timer fields are inconsistent")
        logger.info("Updated task %s: %s", task_id, ", ".join(sorted(fields)))
        return self._replace(new_task)

    def remove(self, task_id: str) -> bool:
        """Delete task by ID"""
        if self.get_task(task_id) is None:
            logger.debug("Delete ignored, task %s not found", task_id)
            return False
        self.tasks = [t for t in self.tasks if t.id != task_id]
        self._persist()
        logger.info("Deleted task %s", task_id)
        self.task_deleted.emit(task_id)
        return True

    def get_task(self, task_id: str) -> Optional[Task]:
        """Get task by ID"""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def require_task(self, task_id: str) -> Task:
        task = self.get_task(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    def list(self) -> List[Task]:
        """All tasks, newest first; equal timestamps keep insertion order"""
        return sorted(self.tasks, key=lambda t: t.created_at, reverse=True)

    def running_tasks(self) -> List[Task]:
        return [t for t in self.list() if t.is_running]

    # --- timer commands ---
    def toggle_timer(self, task_id: str) -> Optional[Task]:
        task = self.get_task(task_id)
        if task is None:
            logger.debug("Toggle ignored, task %s not found", task_id)
            return None
        new_task = timer.toggle(task, self.clock())
        logger.info("Task %s %s (total %ds)", task_id,
                    "started" if new_task.is_running else "paused", new_task.total_seconds)
        return self._replace(new_task)

    def edit_task(self, task_id: str, name: str, icon: str) -> Optional[Task]:
        task = self.get_task(task_id)
        if task is None:
            logger.debug("Edit ignored, task %s not found", task_id)
            return None
        return self._replace(timer.edit(task, name, icon))

    def set_manual_time(self, task_id: str, value: Union[int, str]) -> Optional[Task]:
        """Override accumulated time; always leaves the task stopped"""
        task = self.get_task(task_id)
        if task is None:
            logger.debug("Manual time ignored, task %s not found", task_id)
            return None
        new_task = timer.override_time(task, value)
        logger.info("Task %s time set to %ds", task_id, new_task.total_seconds)
        return self._replace(new_task)

    def effective_seconds(self, task_id: str) -> Optional[int]:
        task = self.get_task(task_id)
        if task is None:
            return None
        return timer.effective_seconds(task, self.clock())
