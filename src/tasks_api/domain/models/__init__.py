from src.tasks_api.domain.models.inputs import CreateTaskInput, UpdateTaskInput
from src.tasks_api.domain.models.task import Task
from src.tasks_api.domain.models.task_status import TaskStatus

__all__ = [
    "Task",
    "TaskStatus",
    "CreateTaskInput",
    "UpdateTaskInput",
]
