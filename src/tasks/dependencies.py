from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from src.tasks.schemas import Task
from src.tasks.service import TaskService
from src.tasks.store.base import TaskStore


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.task_store


def get_task_service(
    store: TaskStore = Depends(get_task_store),
) -> TaskService:
    return TaskService(store=store)


async def get_task_from_body(request: Request) -> Task:
    """Decode the raw request body as a Task, whatever its Content-Type."""
    body = await request.body()
    try:
        return Task.model_validate_json(body)
    except ValidationError as e:
        errors = [
            {**error, "loc": ("body", *error["loc"])}
            for error in e.errors(include_url=False)
        ]
        raise RequestValidationError(errors, body=body) from e
