"""Task data model for the time tracker"""
from dataclasses import dataclass, field, replace
from typing import Dict, Any, Optional
import time
import uuid

from constants import DEFAULT_ICON


def now_ms() -> int:
    """Host wall clock in epoch milliseconds"""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Task:
    """Immutable snapshot of one tracked activity.

    total_seconds excludes the open session, if any. Timestamps are wall-clock
    epoch milliseconds.
    """
    name: str
    icon: str = DEFAULT_ICON
    total_seconds: int = 0
    is_running: bool = False
    current_session_start_time: Optional[int] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: int = field(default_factory=now_ms)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the stored JSON record"""
        return {
            'id': self.id,
            'name': self.name,
            'icon': self.icon,
            'totalSeconds': self.total_seconds,
            'isRunning': self.is_running,
            'currentSessionStartTime': self.current_session_start_time,
            'createdAt': self.created_at
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Task':
        """Deserialize a stored record, repairing broken timer fields.

        Raises ValueError for a blank name; callers skip such records.
        """
        name = data.get('name')
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Task record has no name: {data.get('id')!r}")
        start = data.get('currentSessionStartTime')
        if start is not None:
            start = int(start)
        running = data.get('isRunning') is True and start is not None
        return cls(
            id=str(data['id']),
            name=name.strip(),
            icon=str(data.get('icon') or DEFAULT_ICON),
            total_seconds=max(0, int(data.get('totalSeconds', 0))),
            is_running=running,
            current_session_start_time=start if running else None,
            created_at=int(data.get('createdAt', 0))
        )

    def with_changes(self, **changes) -> 'Task':
        """Return a copy with the given fields replaced"""
        return replace(self, **changes)

    def is_consistent(self) -> bool:
        return self.total_seconds >= 0 and self.is_running == (self.current_session_start_time is not None)
