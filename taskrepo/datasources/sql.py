import asyncio
import logging
from typing import List, Optional

from sqlalchemy import (
    Boolean,
    Column,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
    delete,
    func,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.pool import StaticPool

from ..config import Settings, get_settings
from ..models import Task

logger = logging.getLogger(__name__)

metadata = MetaData()

tasks_table = Table(
    "tasks",
    metadata,
    Column("id", String, primary_key=True),
    Column("title", Text, nullable=False, default=""),
    Column("description", Text, nullable=False, default=""),
    Column("completed", Boolean, nullable=False, default=False),
    # Insertion order survives reloads; an upsert keeps the original slot.
    Column("position", Integer, nullable=False),
)


def _row_to_task(row) -> Task:
    return Task(id=row.id, title=row.title, description=row.description, completed=bool(row.completed))


def _create_engine(db_url: str) -> Engine:
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        # One shared connection, otherwise each worker thread sees its own empty database.
        return create_engine(url, poolclass=StaticPool, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


class SqlTaskSource:
    """Local task backend stored in a SQL database defined by LOCAL_DB_URL.

    An empty table reports the task list as not available, which the
    repository treats as "bootstrap from remote".
    """

    def __init__(self, settings: Settings | None = None, engine: Optional[Engine] = None) -> None:
        self.settings = settings or get_settings()
        self.engine = engine or _create_engine(self.settings.db_url)
        metadata.create_all(self.engine)
        logger.info("SqlTaskSource ready url=%s", self.engine.url.render_as_string(hide_password=True))

    # ---- Blocking helpers (run via asyncio.to_thread) ----
    def _load_all(self) -> List[Task]:
        with self.engine.connect() as conn:
            rows = conn.execute(select(tasks_table).order_by(tasks_table.c.position)).all()
        return [_row_to_task(r) for r in rows]

    def _load_one(self, task_id: str) -> Optional[Task]:
        with self.engine.connect() as conn:
            row = conn.execute(select(tasks_table).where(tasks_table.c.id == task_id)).first()
        return _row_to_task(row) if row is not None else None

    @staticmethod
    def _upsert(conn: Connection, task: Task) -> None:
        values = {"title": task.title, "description": task.description, "completed": task.completed}
        result = conn.execute(update(tasks_table).where(tasks_table.c.id == task.id).values(**values))
        if result.rowcount:
            return
        next_pos = conn.execute(select(func.coalesce(func.max(tasks_table.c.position), -1) + 1)).scalar_one()
        conn.execute(insert(tasks_table).values(id=task.id, position=next_pos, **values))

    def _save(self, task: Task) -> None:
        with self.engine.begin() as conn:
            self._upsert(conn, task)

    def _delete(self, criterion=None) -> None:
        stmt = delete(tasks_table)
        if criterion is not None:
            stmt = stmt.where(criterion)
        with self.engine.begin() as conn:
            conn.execute(stmt)

    # ---- Contract ----
    async def get_tasks(self) -> Optional[List[Task]]:
        tasks = await asyncio.to_thread(self._load_all)
        return tasks or None

    async def get_task(self, task_id: str) -> Optional[Task]:
        return await asyncio.to_thread(self._load_one, task_id)

    async def save_task(self, task: Task) -> None:
        await asyncio.to_thread(self._save, task)

    async def complete_task(self, task: Task) -> None:
        await self.save_task(task.as_completed())

    async def activate_task(self, task: Task) -> None:
        await self.save_task(task.as_active())

    async def clear_completed_tasks(self) -> None:
        await asyncio.to_thread(self._delete, tasks_table.c.completed.is_(True))

    async def delete_task(self, task_id: str) -> None:
        await asyncio.to_thread(self._delete, tasks_table.c.id == task_id)

    async def delete_all_tasks(self) -> None:
        await asyncio.to_thread(self._delete)

    def close(self) -> None:
        self.engine.dispose()
