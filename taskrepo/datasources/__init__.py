"""Data layer package: backend contract, backends, cache store, and repository.

Public exports:
- TaskDataSource protocol
- InMemoryTaskSource, RestTaskSource, SqlTaskSource
- TaskCache
- TasksRepository
"""
from .base import TaskDataSource
from .memory import InMemoryTaskSource
from .rest import RestTaskSource
from .sql import SqlTaskSource
from .cache import TaskCache
from .repository import TasksRepository

__all__ = [
    "TaskDataSource",
    "InMemoryTaskSource",
    "RestTaskSource",
    "SqlTaskSource",
    "TaskCache",
    "TasksRepository",
]
