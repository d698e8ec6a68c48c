from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from personal_data_hook.db import models

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def create(self, **kwargs) -> ModelT:
        entity = self.model(**kwargs)
        self.db.add(entity)
        self.db.flush()
        return entity

    def get(self, entity_id: UUID) -> ModelT | None:
        return self.db.get(self.model, entity_id)

    def list(self, limit: int = 100, offset: int = 0) -> list[ModelT]:
        stmt = select(self.model).offset(offset).limit(limit)
        return self.db.execute(stmt).scalars().all()

    def update(self, entity: ModelT, **kwargs) -> ModelT:
        for key, value in kwargs.items():
            setattr(entity, key, value)
        self.db.flush()
        return entity


class PersonalDataRepository(BaseRepository[models.PersonalData]):
    model = models.PersonalData

    def find_first_matching(
        self,
        field: str,
        values: Sequence[str],
        exclude_id: UUID | None = None,
    ) -> models.PersonalData | None:
        """Return one row whose *field* equals any of *values*, or ``None``.

        The row identified by *exclude_id* never matches.
        """
        if not values:
            return None

        column = getattr(self.model, field)
        stmt = select(self.model).where(or_(*(column == value for value in values)))
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        return self.db.execute(stmt.limit(1)).scalars().first()
