import asyncio
from typing import Dict, Iterable, List, Optional

from ..models import Task


class InMemoryTaskSource:
    """Dict-backed task backend for local development and tests.

    `latency_seconds` delays every call to stand in for a slow remote service.
    An empty store reports its task list as not available.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None, latency_seconds: float = 0.0) -> None:
        self.latency_seconds = latency_seconds
        self._tasks: Dict[str, Task] = {t.id: t for t in (tasks or [])}

    async def _delay(self) -> None:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)

    async def get_tasks(self) -> Optional[List[Task]]:
        await self._delay()
        if not self._tasks:
            return None
        return list(self._tasks.values())

    async def get_task(self, task_id: str) -> Optional[Task]:
        await self._delay()
        return self._tasks.get(task_id)

    async def save_task(self, task: Task) -> None:
        await self._delay()
        self._tasks[task.id] = task

    async def complete_task(self, task: Task) -> None:
        await self.save_task(task.as_completed())

    async def activate_task(self, task: Task) -> None:
        await self.save_task(task.as_active())

    async def clear_completed_tasks(self) -> None:
        await self._delay()
        self._tasks = {k: t for k, t in self._tasks.items() if not t.completed}

    async def delete_task(self, task_id: str) -> None:
        await self._delay()
        self._tasks.pop(task_id, None)

    async def delete_all_tasks(self) -> None:
        await self._delay()
        self._tasks.clear()
