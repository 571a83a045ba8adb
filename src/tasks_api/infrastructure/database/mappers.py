from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from src.tasks_api.domain.exceptions import InvalidTaskStatusError
from src.tasks_api.domain.models.task import Task
from src.tasks_api.domain.models.task_status import TaskStatus
from src.tasks_api.infrastructure.database.orm import TaskRow


class TaskRecord(Protocol):
    """Anything exposing the ``tasks`` columns: an ORM row or a result row."""

    id: int
    title: str
    task_status: str


class OrmMapper:
    @staticmethod
    def to_status(value: str) -> TaskStatus:
        try:
            return TaskStatus(value)
        except ValueError as exc:
            raise InvalidTaskStatusError(value) from exc

    @staticmethod
    def to_domain_task(row: TaskRecord) -> Task:
        return Task(
            id=row.id,
            title=row.title,
            status=OrmMapper.to_status(row.task_status),
        )

    @staticmethod
    def to_domain_tasks(rows: Iterable[TaskRecord]) -> list[Task]:
        return [OrmMapper.to_domain_task(row) for row in rows]

    @staticmethod
    def to_task_row(title: str, status: TaskStatus) -> TaskRow:
        return TaskRow(title=title, task_status=status.value)
