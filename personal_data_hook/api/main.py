"""FastAPI application factory.

Assembles the health and personal data routers.
This module is the authoritative app object — personal_data_hook/main.py re-exports it.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from personal_data_hook.api.routes.health import router as health_router
from personal_data_hook.api.routes.personal_data import router as personal_data_router
from personal_data_hook.core.logging import setup_logging
from personal_data_hook.core.settings import get_settings


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(personal_data_router)
