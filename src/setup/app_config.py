import inject

from src.setup.db_config import get_database
from src.tasks_api.domain.repositories import TaskRepository
from src.tasks_api.infrastructure.database.repositories import SqlTaskRepository


def _bind_repositories(binder: inject.Binder) -> None:
    binder.bind(TaskRepository, SqlTaskRepository(get_database()))


def configure_di() -> None:
    """Configure the DI container once per process."""
    if inject.is_configured():
        return
    inject.configure(_bind_repositories)
