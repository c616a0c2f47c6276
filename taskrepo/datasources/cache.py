from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from ..models import Task


class TaskCache:
    """In-process id -> Task map plus the dirty flag, owned by one repository.

    Iteration follows insertion order; upserting a known id keeps its slot.
    """

    def __init__(self) -> None:
        self._tasks: Dict[str, Task] = {}
        self.dirty = False

    def get(self, task_id: str) -> Optional[Task]:
        return self._tasks.get(task_id)

    def put(self, task: Task) -> None:
        self._tasks[task.id] = task

    def remove(self, task_id: str) -> None:
        self._tasks.pop(task_id, None)

    def remove_completed(self) -> None:
        self._tasks = {k: t for k, t in self._tasks.items() if not t.completed}

    def clear(self) -> None:
        self._tasks.clear()

    def refresh(self, tasks: Iterable[Task]) -> None:
        """Replace the whole map with `tasks` (input order) and mark the cache clean."""
        self._tasks.clear()
        for task in tasks:
            self._tasks[task.id] = task
        self.dirty = False

    def invalidate(self) -> None:
        self.dirty = True

    def values(self) -> List[Task]:
        return list(self._tasks.values())

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tasks)
