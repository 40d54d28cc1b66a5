"""CSV report of tracked time"""
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

from models.duration import format_time
from models.errors import PersistenceError
from models.task import Task

logger = logging.getLogger(__name__)

CSV_HEADER = "Date,Task Name,Icon,Time Spent (HH:MM:SS)"


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def build_csv(tasks: List[Task], today: Optional[date] = None) -> Optional[str]:
    """Build the report text, or None when there is nothing to export.

    Uses committed total_seconds; an open session is not included.
    """
    if not tasks:
        return None
    day = (today or date.today()).isoformat()
    rows = [
        ",".join([day, _quote(task.name), task.icon, format_time(task.total_seconds)])
        for task in tasks
    ]
    return "\n".join([CSV_HEADER] + rows)


def export_filename(today: Optional[date] = None) -> str:
    return f"time_tracker_export_{(today or date.today()).isoformat()}.csv"


def export_tasks_to_csv(tasks: List[Task], path: Path, today: Optional[date] = None) -> bool:
    """Write the report to path. Returns False (and writes nothing) if there are no tasks."""
    content = build_csv(tasks, today)
    if content is None:
        logger.info("No tasks to export")
        return False
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
    except OSError as e:
        raise PersistenceError(f"Failed to export to {path}: {e}") from e
    logger.info("Exported %d tasks to %s", len(tasks), path)
    return True
