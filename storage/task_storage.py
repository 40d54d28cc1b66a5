"""Local storage for tasks"""
import json
import logging
from typing import List

from constants import STORAGE_KEY_TASKS
from models.task import Task
from storage.local_storage import LocalStorage

logger = logging.getLogger(__name__)


class TaskStorage:
    """Persists the full task collection as one JSON array under a fixed key"""

    def __init__(self, local_storage: LocalStorage, key: str = STORAGE_KEY_TASKS):
        self.local_storage = local_storage
        self.key = key

    def save_tasks(self, tasks: List[Task]) -> None:
        """Write all tasks; raises PersistenceError if the store is unwritable"""
        data = [task.to_dict() for task in tasks]
        self.local_storage.set_item(self.key, json.dumps(data, ensure_ascii=False))
        logger.debug("Saved %d tasks under %s", len(data), self.key)

    def load_tasks(self) -> List[Task]:
        """Load tasks; absent or corrupt data yields an empty list"""
        raw = self.local_storage.get_item(self.key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning("Stored task data is corrupt, starting empty: %s", e)
            return []
        if not isinstance(data, list):
            logger.warning("Stored task data is not a list, starting empty")
            return []

        tasks = []
        for task_dict in data:
            try:
                tasks.append(Task.from_dict(task_dict))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning("Skipping malformed task record %r: %s", task_dict, e)
        logger.debug("Loaded %d tasks from %s", len(tasks), self.key)
        return tasks
