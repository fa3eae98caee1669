from abc import ABC, abstractmethod

from src.tasks.schemas import Task


class TaskStore(ABC):
    @abstractmethod
    def list_tasks(self) -> dict[str, Task]:
        pass

    @abstractmethod
    def upsert_task(self, task: Task) -> None:
        pass

    @abstractmethod
    def get_task(self, task_id: str) -> Task | None:
        pass

    @abstractmethod
    def delete_task(self, task_id: str) -> bool:
        pass

    @abstractmethod
    def count(self) -> int:
        pass
