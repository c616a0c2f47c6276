from __future__ import annotations

from typing import Any, List, Optional, Union

from ..errors import TaskNotCachedError
from ..models import Task
from .base import TaskDataSource
from .cache import TaskCache


def _require(value: Any, name: str) -> Any:
    if value is None:
        raise ValueError(f"{name} is required")
    return value


def _require_id(task_id: Any) -> str:
    _require(task_id, "task_id")
    if not isinstance(task_id, str) or not task_id:
        raise ValueError(f"task_id must be a non-empty string, got {task_id!r}")
    return task_id


def _require_task(task: Any) -> Task:
    _require(task, "task")
    if not isinstance(task, Task):
        raise TypeError(f"expected Task, got {type(task).__name__}")
    return task


class TasksRepository:
    """Single access point over a remote and a local task backend, with an in-memory cache.

    Reads prefer the cache, then local storage, then the remote backend. Writes
    fan out remote -> local -> cache, in that order, without rollback.
    """

    def __init__(
        self,
        remote: TaskDataSource,
        local: TaskDataSource,
        cache: Optional[TaskCache] = None,
    ) -> None:
        self.remote = _require(remote, "remote")
        self.local = _require(local, "local")
        self.cache = cache if cache is not None else TaskCache()

    @property
    def cache_is_dirty(self) -> bool:
        return self.cache.dirty

    def cached_tasks(self) -> List[Task]:
        return self.cache.values()

    def get_cached_task(self, task_id: str) -> Optional[Task]:
        return self.cache.get(_require_id(task_id))

    # ---- Reads ----
    async def get_tasks(self) -> Optional[List[Task]]:
        """Return every task, or `None` when neither backend has data.

        A dirty cache skips local storage and reloads straight from remote.
        Local storage reporting nothing is the bootstrap case and also falls
        through to remote.
        """
        if not self.cache.dirty:
            tasks = await self.local.get_tasks()
            if tasks is not None:
                self.cache.refresh(tasks)
                return self.cache.values()
        return await self._get_tasks_from_remote()

    async def _get_tasks_from_remote(self) -> Optional[List[Task]]:
        tasks = await self.remote.get_tasks()
        if tasks is None:
            return None
        self.cache.refresh(tasks)
        await self._refresh_local(tasks)
        return self.cache.values()

    async def _refresh_local(self, tasks: List[Task]) -> None:
        await self.local.delete_all_tasks()
        for task in tasks:
            await self.local.save_task(task)

    async def get_task(self, task_id: str) -> Optional[Task]:
        """Cached task if present, otherwise whatever local storage has.

        Point reads never consult the remote backend.
        """
        cached = self.get_cached_task(task_id)
        if cached is not None:
            return cached

        task = await self.local.get_task(task_id)
        if task is None:
            return None
        self.cache.put(task)
        return task

    # ---- Writes ----
    async def save_task(self, task: Task) -> None:
        _require_task(task)
        await self.remote.save_task(task)
        await self.local.save_task(task)
        self.cache.put(task)

    async def complete_task(self, task: Union[Task, str]) -> None:
        completed = self._resolve(task).as_completed()
        await self.remote.complete_task(completed)
        await self.local.complete_task(completed)
        self.cache.put(completed)

    async def activate_task(self, task: Union[Task, str]) -> None:
        active = self._resolve(task).as_active()
        await self.remote.activate_task(active)
        await self.local.activate_task(active)
        self.cache.put(active)

    async def clear_completed_tasks(self) -> None:
        await self.remote.clear_completed_tasks()
        await self.local.clear_completed_tasks()
        self.cache.remove_completed()

    async def delete_all_tasks(self) -> None:
        await self.remote.delete_all_tasks()
        await self.local.delete_all_tasks()
        self.cache.clear()

    async def delete_task(self, task_id: str) -> None:
        _require_id(task_id)
        await self.remote.delete_task(task_id)
        await self.local.delete_task(task_id)
        self.cache.remove(task_id)

    def refresh_tasks(self) -> None:
        """Force the next `get_tasks` to reload from the remote backend."""
        self.cache.invalidate()

    # ---- Helpers ----
    def _resolve(self, task: Union[Task, str]) -> Task:
        # Ids resolve through the cache only; a miss is caller misuse, not a soft failure.
        if isinstance(task, str):
            cached = self.get_cached_task(task)
            if cached is None:
                raise TaskNotCachedError(task)
            return cached
        return _require_task(task)
