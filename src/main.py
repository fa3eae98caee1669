import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException
import uvicorn

from src.common.exceptions import (
    KnownException,
    ResourceNotFoundException,
    http_exception_handler,
    known_exception_handler,
    resource_not_found_handler,
    unexpected_exception_handler,
    validation_exception_handler,
    internal_error_response,
)
from src.common.opentelemetry import setup_opentelemetry
from src.config import Settings, get_settings
from src.healthcheck.router import router as health_router
from src.tasks.router import router as tasks_router
from src.tasks.seed import seed_example_tasks
from src.tasks.store.memory import InMemoryTaskStore

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


def create_app(settings: Settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.task_store = InMemoryTaskStore()
        if settings.SEED_TASKS:
            seed_example_tasks(app.state.task_store)
        yield
        logger.info(f"Shutting down with {app.state.task_store.count()} tasks in memory")

    app = FastAPI(
        title=settings.API_NAME,
        summary=settings.API_SUMMARY,
        lifespan=lifespan,
        responses={**internal_error_response},
        version=settings.API_VERSION,
    )

    if settings.OTEL_ENABLED:
        setup_opentelemetry(settings.OTEL_SERVICE_NAME, app)

    if settings.CORS_ENABLED:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.exception_handler(RequestValidationError)(validation_exception_handler)
    app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
    app.exception_handler(KnownException)(known_exception_handler)
    app.exception_handler(HTTPException)(http_exception_handler)
    app.exception_handler(Exception)(unexpected_exception_handler)

    app.include_router(health_router)
    app.include_router(tasks_router)

    return app


app = create_app(settings)


def run() -> None:
    logger.info(f"Starting {settings.API_NAME} on {settings.HOST}:{settings.PORT}")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
