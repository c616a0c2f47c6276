import os
from typing import List

import pytest

# Ensure predictable environment before importing the package
os.environ.setdefault("REMOTE_SOURCE", "MEMORY")
os.environ.setdefault("LOCAL_SOURCE", "MEMORY")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from taskrepo.config import Settings  # noqa: E402
from taskrepo.datasources.repository import TasksRepository  # noqa: E402

from .fakes import Call, RecordingSource  # noqa: E402


@pytest.fixture()
def journal() -> List[Call]:
    return []


@pytest.fixture()
def remote(journal) -> RecordingSource:
    return RecordingSource("remote", journal)


@pytest.fixture()
def local(journal) -> RecordingSource:
    return RecordingSource("local", journal)


@pytest.fixture()
def repo(remote, local) -> TasksRepository:
    return TasksRepository(remote=remote, local=local)


@pytest.fixture()
def sqlite_settings(tmp_path) -> Settings:
    return Settings(db_url=f"sqlite:///{tmp_path / 'tasks.sqlite3'}", local_source="SQL")
