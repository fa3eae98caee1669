from typing import Generator
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.config import Settings
from src.main import create_app


@pytest.fixture
def seed_tasks() -> bool:
    """Overridden with parametrize by tests that need the example tasks."""
    return False


@pytest.fixture
def test_settings(seed_tasks: bool) -> Settings:
    return Settings(
        SEED_TASKS=seed_tasks,
        OTEL_ENABLED=False,
        CORS_ENABLED=False,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def test_app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture
def test_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(test_app) as client:
        yield client
