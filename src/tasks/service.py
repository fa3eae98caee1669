import logging

from src.common.exceptions import ResourceNotFoundException, ResourceType
from src.tasks.schemas import Task
from src.tasks.store.base import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, *, store: TaskStore) -> None:
        self.store = store

    def list_tasks(self) -> dict[str, Task]:
        return self.store.list_tasks()

    def upsert_task(self, task: Task) -> None:
        # Keyed by the task's own id; get and delete are keyed by the path id.
        self.store.upsert_task(task)
        logger.info(f"Task '{task.id}' saved")

    def get_task(self, task_id: str) -> Task:
        task = self.store.get_task(task_id)
        if task is None:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)
        return task

    def delete_task(self, task_id: str) -> None:
        if not self.store.delete_task(task_id):
            raise ResourceNotFoundException(ResourceType.TASK, task_id)
        logger.info(f"Task '{task_id}' deleted")
