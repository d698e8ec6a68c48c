"""``RecordStore`` backed by a SQLAlchemy session.

Writes through this store bypass the pre-operation hooks: ``HookPipeline``
uses it to persist a change-set once its hooks have run.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any
from uuid import UUID

from sqlalchemy.orm import Session

from personal_data_hook.core.constants import PERSONAL_DATA_ENTITY
from personal_data_hook.core.errors import RecordNotFoundError
from personal_data_hook.db.repositories import PersonalDataRepository


class SqlAlchemyRecordStore:
    def __init__(self, db: Session) -> None:
        self.repository = PersonalDataRepository(db)

    def _check_record_type(self, record_type: str) -> None:
        if record_type.lower() != PERSONAL_DATA_ENTITY:
            raise ValueError(f"Unsupported record type {record_type!r}")

    def find_first(
        self,
        record_type: str,
        field: str,
        values: Sequence[str],
        exclude_id: UUID | None = None,
    ) -> UUID | None:
        self._check_record_type(record_type)
        match = self.repository.find_first_matching(field, values, exclude_id=exclude_id)
        return None if match is None else match.id

    def update(self, record_type: str, record_id: UUID, fields: Mapping[str, Any]) -> None:
        self._check_record_type(record_type)
        record = self.repository.get(record_id)
        if record is None:
            raise RecordNotFoundError(record_type, record_id)
        self.repository.update(record, **fields)
