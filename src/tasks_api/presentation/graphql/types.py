from enum import Enum

import strawberry

from src.tasks_api.domain.models import Task, TaskStatus


@strawberry.enum(name="TaskStatus")
class TaskStatusType(Enum):
    completed = "completed"
    active = "active"


@strawberry.type(name="Task")
class TaskType:
    id: int
    title: str
    status: TaskStatusType

    @classmethod
    def from_domain(cls, task: Task) -> "TaskType":
        return cls(id=task.id, title=task.title, status=TaskStatusType(task.status.value))


@strawberry.input(name="CreateTaskInput")
class CreateTaskInputType:
    title: str


@strawberry.input(name="UpdateTaskInput")
class UpdateTaskInputType:
    id: int
    title: str | None = None
    status: TaskStatusType | None = None


def to_domain_status(status: TaskStatusType | None) -> TaskStatus | None:
    if status is None:
        return None
    return TaskStatus(status.value)
