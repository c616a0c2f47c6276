from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Tuple

from taskrepo.models import Task

Call = Tuple[str, str, object]


class RecordingSource:
    """
    Fake TaskDataSource that writes every call into a shared journal.

    - `name` tags journal entries ("remote" / "local") so cross-backend ordering can be asserted
    - `available=False` makes list reads report not-available even when tasks are stored
    - `drop_writes=True` accepts writes without storing them (a remote that failed quietly)
    - `on_call(op, arg)` runs before the call is applied
    """

    def __init__(
        self,
        name: str,
        journal: List[Call],
        tasks: Optional[Iterable[Task]] = None,
        available: bool = True,
        drop_writes: bool = False,
    ) -> None:
        self.name = name
        self.journal = journal
        self.tasks: Dict[str, Task] = {t.id: t for t in (tasks or [])}
        self.available = available
        self.drop_writes = drop_writes
        self.on_call: Optional[Callable[[str, object], None]] = None

    def _record(self, op: str, arg: object = None) -> None:
        if self.on_call is not None:
            self.on_call(op, arg)
        self.journal.append((self.name, op, arg))

    def calls(self, op: Optional[str] = None) -> List[Call]:
        return [c for c in self.journal if c[0] == self.name and (op is None or c[1] == op)]

    async def get_tasks(self) -> Optional[List[Task]]:
        self._record("get_tasks")
        if not self.available or not self.tasks:
            return None
        return list(self.tasks.values())

    async def get_task(self, task_id: str) -> Optional[Task]:
        self._record("get_task", task_id)
        return self.tasks.get(task_id)

    async def save_task(self, task: Task) -> None:
        self._record("save_task", task)
        if not self.drop_writes:
            self.tasks[task.id] = task

    async def complete_task(self, task: Task) -> None:
        self._record("complete_task", task)
        if not self.drop_writes:
            self.tasks[task.id] = task.as_completed()

    async def activate_task(self, task: Task) -> None:
        self._record("activate_task", task)
        if not self.drop_writes:
            self.tasks[task.id] = task.as_active()

    async def clear_completed_tasks(self) -> None:
        self._record("clear_completed_tasks")
        if not self.drop_writes:
            self.tasks = {k: t for k, t in self.tasks.items() if not t.completed}

    async def delete_task(self, task_id: str) -> None:
        self._record("delete_task", task_id)
        if not self.drop_writes:
            self.tasks.pop(task_id, None)

    async def delete_all_tasks(self) -> None:
        self._record("delete_all_tasks")
        if not self.drop_writes:
            self.tasks.clear()


def make_task(task_id: str, title: str = "", completed: bool = False, description: str = "") -> Task:
    return Task(id=task_id, title=title or f"Task {task_id}", description=description, completed=completed)
