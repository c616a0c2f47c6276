import asyncio
import logging
from typing import Any, List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from ..config import Settings, get_settings
from ..models import Task

logger = logging.getLogger(__name__)


class RestTaskSource:
    """Remote task backend over a JSON HTTP API.

    Blocking `requests` calls run in a worker thread. Any transport or HTTP
    failure on a read means "not available"; failed writes are logged and dropped.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def _base(self) -> str:
        return (self.settings.api_base_url or "").rstrip("/")

    def _url(self, *parts: str) -> str:
        return "/".join([self._base(), "tasks", *(quote(p, safe="") for p in parts)])

    async def _request(self, method: str, url: str, **kwargs: Any) -> Optional[requests.Response]:
        def _do_request() -> requests.Response:
            return requests.request(method, url, timeout=self.settings.request_timeout_seconds, **kwargs)

        if not self._base():
            logger.warning("No TASKS_API_BASE_URL configured; skipping %s %s", method, url)
            return None
        try:
            resp = await asyncio.to_thread(_do_request)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Remote %s %s failed: %s", method, url, e)
            return None
        return resp

    # ---- Reads ----
    async def get_tasks(self) -> Optional[List[Task]]:
        resp = await self._request("GET", self._url())
        if resp is None:
            return None
        try:
            return [Task.model_validate(item) for item in resp.json()]
        except (ValueError, TypeError, ValidationError) as e:
            logger.warning("Remote returned an unreadable task list: %s", e)
            return None

    async def get_task(self, task_id: str) -> Optional[Task]:
        resp = await self._request("GET", self._url(task_id))
        if resp is None:
            return None
        try:
            return Task.model_validate(resp.json())
        except (ValueError, TypeError, ValidationError) as e:
            logger.warning("Remote returned an unreadable task %s: %s", task_id, e)
            return None

    # ---- Writes ----
    async def save_task(self, task: Task) -> None:
        await self._request("PUT", self._url(task.id), json=task.model_dump())

    async def complete_task(self, task: Task) -> None:
        await self.save_task(task.as_completed())

    async def activate_task(self, task: Task) -> None:
        await self.save_task(task.as_active())

    async def clear_completed_tasks(self) -> None:
        await self._request("POST", self._url("clear-completed"))

    async def delete_task(self, task_id: str) -> None:
        await self._request("DELETE", self._url(task_id))

    async def delete_all_tasks(self) -> None:
        await self._request("DELETE", self._url())
