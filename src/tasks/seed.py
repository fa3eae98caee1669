import logging

from src.tasks.schemas import Task
from src.tasks.store.base import TaskStore

logger = logging.getLogger(__name__)


EXAMPLE_TASKS: list[Task] = [
    Task(
        id="1",
        description="Finish the final REST API assignment",
        note="If I get it done today, tomorrow is a free day. Hooray!",
        applications=["VS Code", "Terminal", "git"],
    ),
    Task(
        id="2",
        description="Test the final assignment with Postman",
        note="Better to do this during development, every time you start the server and check a handler",
        applications=["VS Code", "Terminal", "git", "Postman"],
    ),
]


def seed_example_tasks(store: TaskStore) -> None:
    for task in EXAMPLE_TASKS:
        store.upsert_task(task)
    logger.info(f"Seeded {len(EXAMPLE_TASKS)} example tasks")
