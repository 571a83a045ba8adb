from pydantic import BaseModel, Field, field_validator

from src.tasks_api.domain.models.task_status import TaskStatus


def _require_text(value: str | None) -> str | None:
    if value is not None and not value.strip():
        raise ValueError("Title must not be blank.")
    return value


class CreateTaskInput(BaseModel):
    title: str = Field(min_length=1, description="Title of the new task.")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return _require_text(value)  # type: ignore[return-value]


class UpdateTaskInput(BaseModel):
    """Partial update; fields left as ``None`` keep their stored value."""

    id: int = Field(description="Identifier of the task to update.")
    title: str | None = Field(default=None, min_length=1, description="New title.")
    status: TaskStatus | None = Field(default=None, description="New status.")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str | None) -> str | None:
        return _require_text(value)

    def has_changes(self) -> bool:
        return self.title is not None or self.status is not None
