"""Pre-operation hook pipeline.

``HookPipeline`` builds the ``ExecutionContext`` for each create or update,
runs the registered hooks at the requested depth, then writes the
(possibly rewritten) change-set through ``SqlAlchemyRecordStore``.

Updates issued by a hook through its ``RecordStore`` re-enter the pipeline
one level deeper, exactly like any other update, and are committed on their
own: they survive an abort of the operation that triggered them.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Protocol
from uuid import UUID

from sqlalchemy.orm import Session

from personal_data_hook.core.constants import PERSONAL_DATA_ENTITY, PRE_IMAGE_NAME, TARGET_PARAMETER
from personal_data_hook.core.errors import RecordNotFoundError
from personal_data_hook.db.models import PersonalData
from personal_data_hook.db.repositories import PersonalDataRepository
from personal_data_hook.db.store import SqlAlchemyRecordStore
from personal_data_hook.hook.context import ChangeSet, Entity, ExecutionContext, MessageName
from personal_data_hook.hook.plugin import PersonalDataValidationHook

logger = logging.getLogger(__name__)

TOP_LEVEL_DEPTH = 1


class PreOperationHook(Protocol):
    def execute(self, context: ExecutionContext) -> None:
        ...


class PipelineRecordStore:
    """Store handed to hooks: reads go straight to the database, writes
    go back through the pipeline with an incremented depth."""

    def __init__(self, pipeline: HookPipeline, context: ExecutionContext) -> None:
        self.pipeline = pipeline
        self.context = context

    def find_first(
        self,
        record_type: str,
        field: str,
        values: Sequence[str],
        exclude_id: UUID | None = None,
    ) -> UUID | None:
        return self.pipeline.store.find_first(record_type, field, values, exclude_id=exclude_id)

    def update(self, record_type: str, record_id: UUID, fields: Mapping[str, Any]) -> None:
        self.pipeline.update(
            record_id,
            fields,
            user_id=self.context.user_id,
            depth=self.context.depth + 1,
            logical_name=record_type,
        )
        self.pipeline.db.commit()


class HookPipeline:
    def __init__(self, db: Session, hooks: Sequence[PreOperationHook] | None = None) -> None:
        self.db = db
        self.repository = PersonalDataRepository(db)
        self.store = SqlAlchemyRecordStore(db)
        self.hooks: list[PreOperationHook] = list(hooks) if hooks is not None else []

    @classmethod
    def default(cls, db: Session) -> HookPipeline:
        """Pipeline with the personal data validation hook registered."""
        pipeline = cls(db)
        pipeline.register(PersonalDataValidationHook(pipeline.store_for))
        return pipeline

    def register(self, hook: PreOperationHook) -> None:
        self.hooks.append(hook)

    def store_for(self, context: ExecutionContext) -> PipelineRecordStore:
        return PipelineRecordStore(self, context)

    def _run_hooks(self, context: ExecutionContext) -> None:
        for hook in self.hooks:
            hook.execute(context)

    def create(
        self,
        attributes: Mapping[str, Any],
        *,
        user_id: UUID | None = None,
        depth: int = TOP_LEVEL_DEPTH,
        logical_name: str = PERSONAL_DATA_ENTITY,
    ) -> PersonalData:
        target = Entity(logical_name=logical_name, attributes=ChangeSet(attributes))
        context = ExecutionContext(
            message_name=MessageName.CREATE,
            depth=depth,
            user_id=user_id,
            input_parameters={TARGET_PARAMETER: target},
        )
        self._run_hooks(context)

        record = self.repository.create(**target.attributes.to_dict())
        logger.info("Created %s %s at depth %d", logical_name, record.id, depth)
        return record

    def update(
        self,
        record_id: UUID,
        attributes: Mapping[str, Any],
        *,
        user_id: UUID | None = None,
        depth: int = TOP_LEVEL_DEPTH,
        logical_name: str = PERSONAL_DATA_ENTITY,
    ) -> PersonalData:
        record = self.repository.get(record_id)
        if record is None:
            raise RecordNotFoundError(logical_name, record_id)

        target = Entity(logical_name=logical_name, id=record_id, attributes=ChangeSet(attributes))
        pre_image = Entity(logical_name=logical_name, id=record_id, attributes=ChangeSet(record.to_attributes()))
        context = ExecutionContext(
            message_name=MessageName.UPDATE,
            depth=depth,
            user_id=user_id,
            primary_entity_id=record_id,
            input_parameters={TARGET_PARAMETER: target},
            pre_entity_images={PRE_IMAGE_NAME: pre_image},
        )
        self._run_hooks(context)

        self.store.update(logical_name, record_id, target.attributes.to_dict())
        logger.info("Updated %s %s at depth %d", logical_name, record_id, depth)
        return record
