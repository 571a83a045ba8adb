from __future__ import annotations

from typing import Protocol

from src.tasks_api.domain.models.task import Task
from src.tasks_api.domain.models.task_status import TaskStatus


class TaskRepository(Protocol):
    """Storage contract for tasks. Missing ids yield ``None``, never an error."""

    async def list_tasks(self, status: TaskStatus | None = None) -> list[Task]:
        """Return every task, optionally narrowed to one status."""

    async def get_task(self, task_id: int) -> Task | None:
        """Return the task identified by ``task_id``."""

    async def create_task(self, title: str, status: TaskStatus) -> Task:
        """Insert a task and return it with the store-generated id."""

    async def update_task(
        self,
        task_id: int,
        *,
        title: str | None = None,
        status: TaskStatus | None = None,
    ) -> Task | None:
        """Apply the supplied fields and return the updated task."""

    async def delete_task(self, task_id: int) -> Task | None:
        """Remove the task and return it as it was before removal."""
