from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import Integer, String
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.tasks_api.domain.models.task_status import TaskStatus

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class TaskRow(Base):
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    # Plain text column; the mapper enforces the TaskStatus domain on read.
    task_status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=TaskStatus.ACTIVE.value,
        server_default=TaskStatus.ACTIVE.value,
    )


class Database:
    """
    SQLAlchemy async engine holder. Create once per process and inject where needed.

    The engine owns a connection pool; every unit of work borrows a connection
    through :meth:`session` and hands it back when the block exits, whether it
    succeeded or raised. Requests never close a connection another request uses.
    """

    def __init__(self, url: str | URL, *, echo: bool = False, **engine_kwargs: Any) -> None:
        self._engine: AsyncEngine = create_async_engine(url, echo=echo, **engine_kwargs)
        self._session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self._engine, expire_on_commit=False
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session:
            yield session

    async def create_schema(self) -> None:
        async with self._engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured", extra={"tables": list(Base.metadata.tables)})

    async def dispose(self) -> None:
        await self._engine.dispose()
        logger.info("Database engine disposed")
