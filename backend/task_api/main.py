"""Task API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Task routes live under settings.api_prefix; demo routes at the root
    - CORSMiddleware wraps RequestBoundaryMiddleware: boundary 500s carry CORS headers
    - RequestBoundaryMiddleware counts every request that reaches the app (not CORS preflights)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers in api/error_handlers.py; the 500 path is owned by the middleware
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import task_api
from task_api.api.error_handlers import register_error_handlers
from task_api.api.middleware import RequestBoundaryMiddleware, RequestCounter
from task_api.api.routes import demo, health, tasks
from task_api.config import get_settings
from task_api.infrastructure.database import dispose_db, init_db
from task_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_tables()
    logger.info(f"Task API listening on port {settings.port}")
    yield
    await dispose_db()
    logger.info("Task API shutting down")


app = FastAPI(
    title="Task API", version=task_api.__version__, lifespan=lifespan,
)

settings = get_settings()
app.state.request_counter = RequestCounter()
app.state.expose_error_details = settings.expose_error_details

app.add_middleware(RequestBoundaryMiddleware)
# Added last: outermost, so boundary 500s still get CORS headers
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(tasks.router, prefix=settings.api_prefix)
app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(demo.router)

register_error_handlers(app)
