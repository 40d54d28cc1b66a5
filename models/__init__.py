"""Init file for models package"""
from models.task import Task
from models.errors import TimeTrackError, ValidationError, NotFoundError, PersistenceError

__all__ = ['Task', 'TimeTrackError', 'ValidationError', 'NotFoundError', 'PersistenceError']
