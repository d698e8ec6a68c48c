"""Exceptions raised by the validation hook and its host pipeline.

``HookExecutionError`` is the only exception kind a hook lets escape.  Its
``DuplicateRecordError`` subclass marks a business-rule violation whose
message is safe to show to an end user as-is.
"""
from __future__ import annotations

from uuid import UUID


class HookExecutionError(Exception):
    """Abort the persistence operation the hook was invoked for."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicateRecordError(HookExecutionError):
    """Another record already holds the submitted identity value."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class RecordNotFoundError(LookupError):
    def __init__(self, record_type: str, record_id: UUID) -> None:
        super().__init__(f"{record_type} {record_id} not found")
        self.record_type = record_type
        self.record_id = record_id
