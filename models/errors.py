"""Error types raised by the time tracking core"""


class TimeTrackError(Exception):
    """Base class for all TimeTrack errors"""


class ValidationError(TimeTrackError):
    """User input rejected; state is left unchanged"""


class TimerStateError(ValidationError):
    """Transition not allowed from the task's current timer state"""


class NotFoundError(TimeTrackError):
    """No task with the given id"""

    def __init__(self, task_id: str):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class PersistenceError(TimeTrackError):
    """Durable store could not be written"""
