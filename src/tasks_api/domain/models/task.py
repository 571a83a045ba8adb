from pydantic import BaseModel, Field

from src.tasks_api.domain.models.task_status import TaskStatus


class Task(BaseModel):
    id: int = Field(description="Identifier assigned by the store on creation.")
    title: str = Field(min_length=1, description="Short description of the task.")
    status: TaskStatus = Field(
        default=TaskStatus.ACTIVE, description="Whether the task is still active."
    )
