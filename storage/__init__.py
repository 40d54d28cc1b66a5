"""Init file for storage package"""
from storage.local_storage import LocalStorage
from storage.task_storage import TaskStorage

__all__ = ['LocalStorage', 'TaskStorage']
