from typing import List, Optional, Protocol

from ..models import Task


class TaskDataSource(Protocol):
    """Capability contract shared by the remote and local task backends.

    Reads return `None` for "not available" instead of raising. Writes are
    best-effort upserts: a backend handles its own transport failures and
    returns normally.
    """

    async def get_tasks(self) -> Optional[List[Task]]: ...

    async def get_task(self, task_id: str) -> Optional[Task]: ...

    async def save_task(self, task: Task) -> None: ...

    async def complete_task(self, task: Task) -> None: ...

    async def activate_task(self, task: Task) -> None: ...

    async def clear_completed_tasks(self) -> None: ...

    async def delete_task(self, task_id: str) -> None: ...

    async def delete_all_tasks(self) -> None: ...
