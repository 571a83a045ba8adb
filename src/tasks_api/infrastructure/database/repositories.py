from __future__ import annotations

import logging

from src.tasks_api.domain.models.task import Task
from src.tasks_api.domain.models.task_status import TaskStatus
from src.tasks_api.domain.repositories import TaskRepository
from src.tasks_api.infrastructure.database.mappers import OrmMapper
from src.tasks_api.infrastructure.database.orm import Database, TaskRow
from src.tasks_api.infrastructure.database.queries import (
    build_get_query,
    build_list_query,
    compile_query,
)

logger = logging.getLogger(__name__)


class SqlTaskRepository(TaskRepository):
    """Relational task storage using SQLAlchemy async sessions."""

    def __init__(self, database: Database) -> None:
        self._database = database

    async def list_tasks(self, status: TaskStatus | None = None) -> list[Task]:
        """List tasks, optionally filtered by status."""
        statement = build_list_query(status)
        if logger.isEnabledFor(logging.DEBUG):
            sql, params = compile_query(statement)
            logger.debug("Listing tasks", extra={"sql": sql, "params": params})

        async with self._database.session() as session:
            result = await session.execute(statement)
            rows = result.all()

        return OrmMapper.to_domain_tasks(rows)

    async def get_task(self, task_id: int) -> Task | None:
        """Fetch a task by id."""
        async with self._database.session() as session:
            result = await session.execute(build_get_query(task_id))
            row = result.one_or_none()

        if row is None:
            return None
        return OrmMapper.to_domain_task(row)

    async def create_task(self, title: str, status: TaskStatus) -> Task:
        """Insert a task and build the entity from the generated id."""
        task_row = OrmMapper.to_task_row(title, status)

        async with self._database.session() as session:
            async with session.begin():
                session.add(task_row)
                # Flush so the store assigns the primary key before commit.
                await session.flush()
                task_id = task_row.id

        return Task(id=task_id, title=title, status=status)

    async def update_task(
        self,
        task_id: int,
        *,
        title: str | None = None,
        status: TaskStatus | None = None,
    ) -> Task | None:
        """Apply the supplied fields to the task and return its new state."""
        async with self._database.session() as session:
            async with session.begin():
                task_row = await session.get(TaskRow, task_id)
                if task_row is None:
                    return None

                if title is not None:
                    task_row.title = title
                if status is not None:
                    task_row.task_status = status.value
                task = OrmMapper.to_domain_task(task_row)

        return task

    async def delete_task(self, task_id: int) -> Task | None:
        """Remove the task and return its last stored state."""
        async with self._database.session() as session:
            async with session.begin():
                task_row = await session.get(TaskRow, task_id)
                if task_row is None:
                    return None

                task = OrmMapper.to_domain_task(task_row)
                await session.delete(task_row)

        return task
