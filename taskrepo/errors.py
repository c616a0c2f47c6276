class TaskRepositoryError(Exception):
    """Base class for errors raised by the task repository."""


class PreconditionError(TaskRepositoryError):
    """The caller used the repository in a way its contract does not allow."""


class TaskNotCachedError(PreconditionError, LookupError):
    """An id-based transition was requested for a task that is not in the cache."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task {task_id!r} is not cached; load it before transitioning by id")
        self.task_id = task_id
