import logging
from typing import cast

import inject

from src.tasks_api.domain.models import (
    CreateTaskInput,
    Task,
    TaskStatus,
    UpdateTaskInput,
)
from src.tasks_api.domain.repositories import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Task queries and mutations exposed through the GraphQL schema."""

    def __init__(self, repository: TaskRepository | None = None) -> None:
        self._repository = repository or cast(
            TaskRepository, inject.instance(TaskRepository)
        )

    async def list_tasks(self, status: TaskStatus | None = None) -> list[Task]:
        """Return all tasks, or only those in ``status`` when given."""
        tasks = await self._repository.list_tasks(status)
        logger.debug(
            "Listed tasks",
            extra={"status": status.value if status else None, "count": len(tasks)},
        )
        return tasks

    async def get_task(self, task_id: int) -> Task | None:
        """Return the task identified by ``task_id``, or ``None`` if it does not exist."""
        return await self._repository.get_task(task_id)

    async def create_task(self, data: CreateTaskInput) -> Task:
        """
        Persist a new task. New tasks always start out active.
        """
        task = await self._repository.create_task(data.title, TaskStatus.ACTIVE)
        logger.info("Created task", extra={"task_id": task.id})
        return task

    async def update_task(self, data: UpdateTaskInput) -> Task | None:
        if not data.has_changes():
            return await self._repository.get_task(data.id)

        task = await self._repository.update_task(
            data.id, title=data.title, status=data.status
        )
        if task is None:
            logger.info("Task to update not found", extra={"task_id": data.id})
        else:
            logger.info(
                "Updated task",
                extra={"task_id": task.id, "status": task.status.value},
            )
        return task

    async def delete_task(self, task_id: int) -> Task | None:
        task = await self._repository.delete_task(task_id)
        if task is None:
            logger.info("Task to delete not found", extra={"task_id": task_id})
        else:
            logger.info("Deleted task", extra={"task_id": task_id})
        return task
