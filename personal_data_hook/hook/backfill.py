from __future__ import annotations

import logging
from uuid import UUID

from personal_data_hook.core.constants import PERSONAL_DATA_ENTITY
from personal_data_hook.hook.fields import IdentityField
from personal_data_hook.hook.store import RecordStore

logger = logging.getLogger(__name__)


class BackfillUpdater:
    """Write a normalized value into a stored record outside the change-set.

    The update is issued immediately and is not rolled back if the
    operation that triggered it later aborts.
    """

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def backfill(self, target_id: UUID, field: IdentityField, normalized: str) -> None:
        self.store.update(PERSONAL_DATA_ENTITY, target_id, {field.name: normalized})
        logger.info("%s normalized via automatic update on record %s", field.label, target_id)
