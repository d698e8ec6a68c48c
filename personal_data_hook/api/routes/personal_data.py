"""Personal data routes.

POST   /personal-data        — create a record (runs the pre-operation hooks)
GET    /personal-data/{id}   — record detail
PATCH  /personal-data/{id}   — update the submitted fields only
"""
from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Header, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from personal_data_hook.api.deps import get_db, get_pipeline
from personal_data_hook.core.errors import DuplicateRecordError, HookExecutionError, RecordNotFoundError
from personal_data_hook.db.models import PersonalData
from personal_data_hook.pipeline.host import HookPipeline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/personal-data", tags=["personal-data"])


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------

class PersonalDataBody(BaseModel):
    name: str | None = None
    phone: str | None = None
    national_id: str | None = None
    state_id: str | None = None
    license_number: str | None = None


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.post("", status_code=201, summary="Create a personal data record")
def create_personal_data(
    body: PersonalDataBody,
    pipeline: HookPipeline = Depends(get_pipeline),
    user_id: UUID | None = Header(default=None, alias="X-User-Id"),
):
    try:
        record = pipeline.create(body.model_dump(exclude_unset=True), user_id=user_id)
    except HookExecutionError as exc:
        raise _to_http_error(exc) from exc
    return _summary(record)


@router.get("/{record_id}", summary="Get a personal data record")
def get_personal_data(record_id: UUID, db: Session = Depends(get_db)):
    record = db.get(PersonalData, record_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Record not found")
    return _summary(record)


@router.patch("/{record_id}", summary="Update a personal data record")
def update_personal_data(
    record_id: UUID,
    body: PersonalDataBody,
    pipeline: HookPipeline = Depends(get_pipeline),
    user_id: UUID | None = Header(default=None, alias="X-User-Id"),
):
    try:
        record = pipeline.update(record_id, body.model_dump(exclude_unset=True), user_id=user_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Record not found") from exc
    except HookExecutionError as exc:
        raise _to_http_error(exc) from exc
    return _summary(record)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _to_http_error(exc: HookExecutionError) -> HTTPException:
    if isinstance(exc, DuplicateRecordError):
        logger.info("Rejected duplicate %s", exc.field)
        return HTTPException(status_code=409, detail=exc.message)
    return HTTPException(status_code=422, detail=exc.message)


def _summary(record: PersonalData) -> dict:
    return {"id": str(record.id), **record.to_attributes()}
