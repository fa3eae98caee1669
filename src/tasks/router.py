from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from pydantic_core import PydanticSerializationError

from src.common.exceptions import (
    KnownException,
    ResourceType,
    malformed_body_response,
    resource_not_found_response,
)
from src.tasks.dependencies import get_task_from_body, get_task_service
from src.tasks.schemas import Task
from src.tasks.service import TaskService


router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"],
)


def empty_json_response(status_code: int) -> Response:
    return Response(status_code=status_code, media_type="application/json")


@router.get("")
def list_tasks(
    task_service: TaskService = Depends(get_task_service),
) -> dict[str, Task]:
    return task_service.list_tasks()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={
        201: {"description": "Task created or replaced"},
        **malformed_body_response,
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": Task.model_json_schema()}},
        }
    },
)
def create_task(
    task: Task = Depends(get_task_from_body),
    task_service: TaskService = Depends(get_task_service),
) -> Response:
    task_service.upsert_task(task)
    return empty_json_response(status.HTTP_201_CREATED)


@router.get(
    "/{task_id}",
    response_model=Task,
    responses={**resource_not_found_response(ResourceType.TASK)},
)
def get_task(
    task_id: str, task_service: TaskService = Depends(get_task_service)
) -> Response:
    task = task_service.get_task(task_id)
    try:
        content = task.model_dump_json()
    except PydanticSerializationError as e:
        raise KnownException(str(e)) from e

    return Response(content=content, media_type="application/json")


@router.delete(
    "/{task_id}",
    response_class=Response,
    responses={
        200: {"description": "Task deleted"},
        **resource_not_found_response(ResourceType.TASK),
    },
)
def delete_task(
    task_id: str, task_service: TaskService = Depends(get_task_service)
) -> Response:
    task_service.delete_task(task_id)
    return empty_json_response(status.HTTP_200_OK)
