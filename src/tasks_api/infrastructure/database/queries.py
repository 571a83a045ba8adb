"""Read statements for the ``tasks`` table.

Filter values always travel as bound parameters; nothing is interpolated into
the SQL text.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, select

from src.tasks_api.domain.models.task_status import TaskStatus
from src.tasks_api.infrastructure.database.orm import TaskRow

_TASK_COLUMNS = (TaskRow.id, TaskRow.title, TaskRow.task_status)


def build_list_query(status: TaskStatus | None = None) -> Select:
    """Select every task, narrowed to ``status`` when one is given.

    Row order is left to the store.
    """
    statement = select(*_TASK_COLUMNS)
    if status is not None:
        statement = statement.where(TaskRow.task_status == status.value)
    return statement


def build_get_query(task_id: int) -> Select:
    return select(*_TASK_COLUMNS).where(TaskRow.id == task_id)


def compile_query(statement: Select) -> tuple[str, dict[str, Any]]:
    """Return the SQL text and its bound parameters, e.g. for debug logging."""
    compiled = statement.compile()
    return str(compiled), dict(compiled.params)
