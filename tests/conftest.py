from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable, Iterator
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool

from src.tasks_api.domain.models.task import Task
from src.tasks_api.domain.models.task_status import TaskStatus
from src.tasks_api.domain.repositories import TaskRepository
from src.tasks_api.infrastructure.database.orm import Base, Database
from src.tasks_api.infrastructure.database.repositories import SqlTaskRepository
from src.tasks_api.presentation.graphql.schema import build_graphql_router

GRAPHQL_PATH = "/api/graphql"


class StubTaskRepository(TaskRepository):
    """Simple in-memory TaskRepository replacement for tests."""

    def __init__(self) -> None:
        self.tasks_by_id: dict[int, Task] = {}
        self.created: list[tuple[str, TaskStatus]] = []
        self._counter = 0

    async def list_tasks(self, status: TaskStatus | None = None) -> list[Task]:
        return [
            task
            for task in self.tasks_by_id.values()
            if status is None or task.status == status
        ]

    async def get_task(self, task_id: int) -> Task | None:
        return self.tasks_by_id.get(task_id)

    async def create_task(self, title: str, status: TaskStatus) -> Task:
        self._counter += 1
        self.created.append((title, status))
        task = Task(id=self._counter, title=title, status=status)
        self.tasks_by_id[task.id] = task
        return task

    async def update_task(
        self,
        task_id: int,
        *,
        title: str | None = None,
        status: TaskStatus | None = None,
    ) -> Task | None:
        task = self.tasks_by_id.get(task_id)
        if task is None:
            return None
        changes = {
            key: value
            for key, value in {"title": title, "status": status}.items()
            if value is not None
        }
        updated = task.model_copy(update=changes)
        self.tasks_by_id[task_id] = updated
        return updated

    async def delete_task(self, task_id: int) -> Task | None:
        return self.tasks_by_id.pop(task_id, None)


def sqlite_database(path: Path) -> Database:
    """Async database over a SQLite file; every session opens its own connection."""
    return Database(f"sqlite+aiosqlite:///{path}", poolclass=NullPool)


def create_sqlite_schema(path: Path) -> None:
    engine = create_engine(f"sqlite:///{path}")
    try:
        Base.metadata.create_all(engine)
    finally:
        engine.dispose()


def _patch_inject_instance(
    monkeypatch: pytest.MonkeyPatch,
    repository: TaskRepository,
) -> Callable[[object], object]:
    """Patch `inject.instance` to always return the given repository."""
    import inject

    def fake_instance(interface: object) -> object:
        if interface is TaskRepository:
            return repository
        raise RuntimeError(f"Unexpected dependency request: {interface}")

    monkeypatch.setattr(inject, "instance", fake_instance)
    return fake_instance


def graphql_client(*, debug: bool = False) -> TestClient:
    app = FastAPI()
    app.include_router(build_graphql_router(debug=debug), prefix=GRAPHQL_PATH)
    return TestClient(app)


@pytest.fixture
def stub_repository() -> StubTaskRepository:
    return StubTaskRepository()


@pytest_asyncio.fixture
async def database(tmp_path: Path) -> AsyncIterator[Database]:
    db = sqlite_database(tmp_path / "tasks.db")
    await db.create_schema()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def repository(database: Database) -> SqlTaskRepository:
    return SqlTaskRepository(database)


@pytest.fixture
def api_client(monkeypatch: pytest.MonkeyPatch, stub_repository: StubTaskRepository):
    """GraphQL test client with the service wired to the in-memory repository."""
    _patch_inject_instance(monkeypatch, stub_repository)
    return graphql_client(), stub_repository


@pytest.fixture
def sql_api_client(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Iterator[TestClient]:
    """GraphQL test client backed by a SQLite file through the SQL repository."""
    path = tmp_path / "tasks.db"
    create_sqlite_schema(path)
    db = sqlite_database(path)
    _patch_inject_instance(monkeypatch, SqlTaskRepository(db))
    yield graphql_client()
    asyncio.run(db.dispose())
