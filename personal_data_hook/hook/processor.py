"""Per-field normalization and uniqueness enforcement.

One ``FieldProcessor`` handles every identity field; the field's metadata
(attribute name, label, whether it is uniqueness-constrained) is the only
thing that varies between them.

For each field the effective value comes from the submitted change-set
when the caller sent it, otherwise (update only) from the pre-change
snapshot.  Submitted values are rewritten in place; snapshot values are
corrected through a separate store update once the conflict check passes.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from personal_data_hook.core.errors import DuplicateRecordError
from personal_data_hook.hook.backfill import BackfillUpdater
from personal_data_hook.hook.conflicts import ConflictDetector
from personal_data_hook.hook.context import ChangeSet, ExecutionContext
from personal_data_hook.hook.fields import PHONE, IdentityField
from personal_data_hook.hook.normalizer import normalize_digits
from personal_data_hook.hook.store import RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedValue:
    raw: str | None
    explicitly_submitted: bool


def _as_string(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def resolve_value(
    field: IdentityField,
    change_set: ChangeSet,
    prior_snapshot: Mapping[str, Any] | None,
) -> ResolvedValue | None:
    """Find the value to validate for *field*, or ``None`` when there is none."""
    if field.name in change_set:
        return ResolvedValue(raw=change_set.get_string(field.name), explicitly_submitted=True)
    if prior_snapshot is not None and field.name in prior_snapshot:
        return ResolvedValue(raw=_as_string(prior_snapshot[field.name]), explicitly_submitted=False)
    return None


def normalize_phone(change_set: ChangeSet) -> None:
    """Rewrite a submitted phone number to digits only.

    Phone numbers are not uniqueness-constrained: no lookup, no backfill.
    """
    if PHONE.name not in change_set or change_set.is_blank(PHONE.name):
        return
    normalized = normalize_digits(change_set.get_string(PHONE.name))
    if not normalized:
        return
    change_set[PHONE.name] = normalized
    logger.debug("Phone normalized in target")


class FieldProcessor:
    def __init__(
        self,
        store: RecordStore,
        conflict_detector: ConflictDetector | None = None,
        backfill_updater: BackfillUpdater | None = None,
    ) -> None:
        self.conflict_detector = conflict_detector or ConflictDetector(store)
        self.backfill_updater = backfill_updater or BackfillUpdater(store)

    def process(
        self,
        field: IdentityField,
        change_set: ChangeSet,
        prior_snapshot: Mapping[str, Any] | None,
        context: ExecutionContext,
    ) -> None:
        """Normalize *field*, reject duplicates and heal stored legacy values.

        Raises ``DuplicateRecordError`` when another record already holds
        the value.  Mutates *change_set* only when the caller submitted
        *field* explicitly.
        """
        resolved = resolve_value(field, change_set, prior_snapshot if context.is_update else None)
        if resolved is None or resolved.raw is None or not resolved.raw.strip():
            return

        raw = resolved.raw
        normalized = normalize_digits(raw)

        if resolved.explicitly_submitted and normalized:
            change_set[field.name] = normalized
            logger.debug("%s normalized in target", field.label)

        if field.conflict_checked and self.conflict_detector.find_conflict(field, normalized, raw, context):
            raise DuplicateRecordError(field.name, field.duplicate_message)

        target_id = context.target_id
        if not resolved.explicitly_submitted and normalized and context.is_update and target_id is not None:
            self.backfill_updater.backfill(target_id, field, normalized)
