from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.setup.api_config import get_api_settings
from src.setup.app_config import configure_di
from src.setup.db_config import get_database
from src.setup.logging_config import configure_logging
from src.tasks_api.presentation.graphql.schema import build_graphql_router

settings = get_api_settings()
configure_logging(settings.LOG_LEVEL)
configure_di()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    database = get_database()
    if settings.CREATE_SCHEMA_ON_STARTUP:
        await database.create_schema()
    try:
        yield
    finally:
        # Return pooled connections to the server when the instance goes away.
        await database.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="GraphQL API for managing tasks",
    lifespan=lifespan,
)


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(build_graphql_router(debug=settings.DEBUG), prefix=settings.GRAPHQL_PATH)
