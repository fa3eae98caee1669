import logging
import threading

from src.tasks.schemas import Task
from src.tasks.store.base import TaskStore

logger = logging.getLogger(__name__)


class InMemoryTaskStore(TaskStore):
    """Task store backed by a dict, safe to share between request threads.

    Tasks are copied on the way in and on the way out so that callers never
    hold a reference to stored state. Each operation is atomic on its own;
    nothing spans several operations.
    """

    def __init__(self) -> None:
        logger.debug("Initializing InMemoryTaskStore")
        self._tasks: dict[str, Task] = {}
        self._lock = threading.Lock()

    def list_tasks(self) -> dict[str, Task]:
        with self._lock:
            return {
                task_id: task.model_copy(deep=True)
                for task_id, task in self._tasks.items()
            }

    def upsert_task(self, task: Task) -> None:
        with self._lock:
            self._tasks[task.id] = task.model_copy(deep=True)

    def get_task(self, task_id: str) -> Task | None:
        with self._lock:
            task = self._tasks.get(task_id)
            return task.model_copy(deep=True) if task is not None else None

    def delete_task(self, task_id: str) -> bool:
        with self._lock:
            return self._tasks.pop(task_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)
