"""FastAPI application entry point."""
from __future__ import annotations

from fastapi import FastAPI

from taskboard.api import tasks, users
from taskboard.core.log import configure_logging

# ------------------------------------------------------------------
# App creation
# ------------------------------------------------------------------
app = FastAPI(
    title="Taskboard API",
    description="In-memory task and user management",
    version="0.1.0",
)


@app.on_event("startup")
def on_startup():
    configure_logging()


@app.get("/health")
def health():
    return {"status": "ok"}


# ------------------------------------------------------------------
# Routers
# ------------------------------------------------------------------
app.include_router(tasks.router)
app.include_router(users.router)
