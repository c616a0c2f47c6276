from typing import Optional

from .config import Settings, get_settings
from .datasources import (
    InMemoryTaskSource,
    RestTaskSource,
    SqlTaskSource,
    TaskDataSource,
    TasksRepository,
)


class RepositoryFactory:
    """Class-based factory for the task backends and the repository over them."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()

    def build_remote(self) -> TaskDataSource:
        if self.settings.remote_source == "REST":
            return RestTaskSource(self.settings)
        return InMemoryTaskSource(latency_seconds=self.settings.remote_latency_seconds)

    def build_local(self) -> TaskDataSource:
        if self.settings.local_source == "SQL":
            return SqlTaskSource(self.settings)
        return InMemoryTaskSource()

    def build_repository(self) -> TasksRepository:
        return TasksRepository(remote=self.build_remote(), local=self.build_local())


def build_repository(settings: Optional[Settings] = None) -> TasksRepository:
    return RepositoryFactory(settings).build_repository()


# Process-wide repository owned by the composition root, created on first use
_repository: Optional[TasksRepository] = None


def get_repository() -> TasksRepository:
    """Get the shared TasksRepository, building it from settings on first call."""
    global _repository
    if _repository is None:
        _repository = build_repository()
    return _repository


def reset_repository() -> None:
    """Drop the shared repository so the next `get_repository()` builds a fresh one."""
    global _repository
    _repository = None
