from .config import Settings, get_settings
from .models import Task
from .errors import TaskRepositoryError, PreconditionError, TaskNotCachedError
from .datasources import TaskDataSource, TaskCache, TasksRepository
from .factory import build_repository, get_repository, reset_repository
from .logging_setup import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "Task",
    "TaskRepositoryError",
    "PreconditionError",
    "TaskNotCachedError",
    "TaskDataSource",
    "TaskCache",
    "TasksRepository",
    "build_repository",
    "get_repository",
    "reset_repository",
    "setup_logging",
]
