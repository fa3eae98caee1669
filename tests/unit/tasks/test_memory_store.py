from concurrent.futures import ThreadPoolExecutor
import pytest

from src.tasks.schemas import Task
from src.tasks.store.memory import InMemoryTaskStore


@pytest.fixture
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture
def sample_task() -> Task:
    return Task(
        id="1",
        description="Write the handlers",
        note="Check them with curl",
        applications=["VS Code", "Terminal"],
    )


def test_list_tasks_empty(store: InMemoryTaskStore) -> None:
    assert store.list_tasks() == {}
    assert store.count() == 0


def test_upsert_and_get_task(store: InMemoryTaskStore, sample_task: Task) -> None:
    store.upsert_task(sample_task)

    assert store.get_task("1") == sample_task
    assert store.list_tasks() == {"1": sample_task}
    assert store.count() == 1


def test_upsert_replaces_existing_task(
    store: InMemoryTaskStore, sample_task: Task
) -> None:
    store.upsert_task(sample_task)
    replacement = sample_task.model_copy(update={"description": "Rewrite them"})
    store.upsert_task(replacement)

    assert store.count() == 1
    assert store.get_task("1") == replacement


def test_upsert_accepts_empty_id(store: InMemoryTaskStore) -> None:
    store.upsert_task(Task(description="anonymous"))

    task = store.get_task("")
    assert task is not None
    assert task.description == "anonymous"


def test_get_task_missing(store: InMemoryTaskStore) -> None:
    assert store.get_task("missing") is None


def test_delete_task(store: InMemoryTaskStore, sample_task: Task) -> None:
    store.upsert_task(sample_task)

    assert store.delete_task("1") is True
    assert store.get_task("1") is None
    assert store.delete_task("1") is False


def test_delete_task_missing_has_no_effect(
    store: InMemoryTaskStore, sample_task: Task
) -> None:
    store.upsert_task(sample_task)

    assert store.delete_task("2") is False
    assert store.count() == 1


def test_stored_task_is_isolated_from_caller(
    store: InMemoryTaskStore, sample_task: Task
) -> None:
    store.upsert_task(sample_task)
    sample_task.applications.append("Postman")

    fetched = store.get_task("1")
    assert fetched is not None
    assert fetched.applications == ["VS Code", "Terminal"]

    fetched.applications.clear()
    store.list_tasks()["1"].note = "changed"

    stored = store.get_task("1")
    assert stored is not None
    assert stored.applications == ["VS Code", "Terminal"]
    assert stored.note == "Check them with curl"


def test_concurrent_upserts_and_deletes(store: InMemoryTaskStore) -> None:
    task_ids = [str(i) for i in range(200)]

    def upsert(task_id: str) -> None:
        store.upsert_task(Task(id=task_id))
        store.list_tasks()

    with ThreadPoolExecutor(max_workers=16) as executor:
        list(executor.map(upsert, task_ids))

    assert set(store.list_tasks().keys()) == set(task_ids)

    with ThreadPoolExecutor(max_workers=16) as executor:
        deleted = list(executor.map(store.delete_task, task_ids[:100]))

    assert all(deleted)
    assert store.count() == 100
