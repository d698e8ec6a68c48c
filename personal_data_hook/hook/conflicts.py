from __future__ import annotations

import logging

from personal_data_hook.core.constants import PERSONAL_DATA_ENTITY
from personal_data_hook.hook.context import ExecutionContext
from personal_data_hook.hook.fields import IdentityField
from personal_data_hook.hook.store import RecordStore

logger = logging.getLogger(__name__)


def build_match_values(normalized: str | None, raw: str | None) -> list[str]:
    """Values a stored record may hold for the same document.

    The normalized form comes first; the raw form is added when it differs,
    so legacy rows still holding a masked value are caught too.
    """
    values: list[str] = []
    if normalized:
        values.append(normalized)
    if raw and raw != normalized:
        values.append(raw)
    return values


class ConflictDetector:
    """Look for another record already holding an identity value."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def find_conflict(
        self,
        field: IdentityField,
        normalized: str | None,
        raw: str | None,
        context: ExecutionContext,
    ) -> bool:
        values = build_match_values(normalized, raw)
        if not values:
            logger.debug("No usable value to look up %s: skipping conflict check", field.label)
            return False

        exclude_id = context.target_id if context.is_update else None
        match_id = self.store.find_first(PERSONAL_DATA_ENTITY, field.name, values, exclude_id=exclude_id)
        if match_id is None:
            return False

        logger.info("Duplicate %s found on record %s", field.label, match_id)
        return True
