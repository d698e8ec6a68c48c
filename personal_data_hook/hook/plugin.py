"""Pre-operation validation hook for ``personal_data`` records.

Runs before a record is created or updated:

1. the guard skips nested, malformed or foreign-entity invocations;
2. a submitted phone number is reduced to digits;
3. national ID, state ID and license number are normalized, checked for
   duplicates on other records, and backfilled into the stored record when
   they were only known from the pre-change snapshot.

A duplicate raises ``DuplicateRecordError`` unchanged.  Any other failure is
logged and re-raised as a generic ``HookExecutionError``.
"""
from __future__ import annotations

import logging

from personal_data_hook.core.constants import UNEXPECTED_ERROR_PREFIX
from personal_data_hook.core.errors import HookExecutionError
from personal_data_hook.hook.context import ExecutionContext
from personal_data_hook.hook.fields import IDENTITY_FIELDS
from personal_data_hook.hook.guard import should_proceed
from personal_data_hook.hook.processor import FieldProcessor, normalize_phone
from personal_data_hook.hook.store import StoreFactory

logger = logging.getLogger(__name__)


class PersonalDataValidationHook:
    """Normalize and de-duplicate identity documents before persistence."""

    def __init__(self, store_factory: StoreFactory) -> None:
        self.store_factory = store_factory

    def execute(self, context: ExecutionContext) -> None:
        try:
            if not should_proceed(context):
                return

            change_set = context.target.attributes
            normalize_phone(change_set)

            processor = FieldProcessor(self.store_factory(context))
            prior_snapshot = context.prior_snapshot
            for field in IDENTITY_FIELDS:
                processor.process(field, change_set, prior_snapshot, context)
        except HookExecutionError:
            raise
        except Exception as exc:
            logger.exception("Unexpected failure in %s", type(self).__name__)
            raise HookExecutionError(f"{UNEXPECTED_ERROR_PREFIX}{exc}") from exc
