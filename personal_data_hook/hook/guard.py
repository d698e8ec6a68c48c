from __future__ import annotations

import logging

from personal_data_hook.core.constants import MAX_EXECUTION_DEPTH, PERSONAL_DATA_ENTITY
from personal_data_hook.hook.context import ExecutionContext

logger = logging.getLogger(__name__)


def should_proceed(context: ExecutionContext) -> bool:
    """Return whether the hook should run for *context*.

    Skips are normal no-ops, never errors: nested invocations (including the
    ones triggered by the hook's own backfill updates), payloads without a
    target entity, and records of another type.
    """
    if context.depth > MAX_EXECUTION_DEPTH:
        logger.info("Depth %d > %d: skipping to avoid recursion", context.depth, MAX_EXECUTION_DEPTH)
        return False

    target = context.target
    if target is None:
        logger.info("Target missing or invalid: skipping")
        return False

    if target.logical_name.lower() != PERSONAL_DATA_ENTITY:
        logger.info("Unsupported entity %s: skipping", target.logical_name)
        return False

    return True
