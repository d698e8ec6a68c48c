"""GET /health — liveness check, plus the record type this service guards."""
from __future__ import annotations

from fastapi import APIRouter

from personal_data_hook.core.constants import PERSONAL_DATA_ENTITY
from personal_data_hook.core.settings import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness check")
def health_check() -> dict[str, str]:
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.app_env,
        "record_type": PERSONAL_DATA_ENTITY,
    }
