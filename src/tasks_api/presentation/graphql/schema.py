from typing import Annotated, Any

import strawberry
from graphql import GraphQLError
from pydantic import BaseModel, ValidationError
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from src.tasks_api.application.services import TaskService
from src.tasks_api.domain.models import CreateTaskInput, UpdateTaskInput
from src.tasks_api.presentation.graphql.types import (
    CreateTaskInputType,
    TaskStatusType,
    TaskType,
    UpdateTaskInputType,
    to_domain_status,
)


def _service(info: Info) -> TaskService:
    return info.context["task_service"]


def _validated(model: type[BaseModel], **fields: Any) -> Any:
    """Build a domain input, reporting failures as a short GraphQL error."""
    try:
        return model(**fields)
    except ValidationError as exc:
        message = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise GraphQLError(f"Invalid input: {message}") from exc


def _to_type(task) -> TaskType | None:
    return TaskType.from_domain(task) if task is not None else None


@strawberry.type
class Query:
    @strawberry.field
    async def tasks(
        self, info: Info, status: TaskStatusType | None = None
    ) -> list[TaskType]:
        tasks = await _service(info).list_tasks(to_domain_status(status))
        return [TaskType.from_domain(task) for task in tasks]

    @strawberry.field
    async def task(
        self, info: Info, task_id: Annotated[int, strawberry.argument(name="id")]
    ) -> TaskType | None:
        return _to_type(await _service(info).get_task(task_id))


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_task(
        self,
        info: Info,
        data: Annotated[CreateTaskInputType, strawberry.argument(name="input")],
    ) -> TaskType | None:
        # Validation errors are raised here, before any storage call.
        task_input = _validated(CreateTaskInput, title=data.title)
        return _to_type(await _service(info).create_task(task_input))

    @strawberry.mutation
    async def update_task(
        self,
        info: Info,
        data: Annotated[UpdateTaskInputType, strawberry.argument(name="input")],
    ) -> TaskType | None:
        task_input = _validated(
            UpdateTaskInput,
            id=data.id,
            title=data.title,
            status=to_domain_status(data.status),
        )
        return _to_type(await _service(info).update_task(task_input))

    @strawberry.mutation
    async def delete_task(
        self, info: Info, task_id: Annotated[int, strawberry.argument(name="id")]
    ) -> TaskType | None:
        return _to_type(await _service(info).delete_task(task_id))


schema = strawberry.Schema(query=Query, mutation=Mutation)


async def get_context() -> dict[str, Any]:
    return {"task_service": TaskService()}


def build_graphql_router(*, debug: bool = False) -> GraphQLRouter:
    """GraphQL endpoint; the GraphiQL explorer is served only in debug mode."""
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if debug else None,
    )
