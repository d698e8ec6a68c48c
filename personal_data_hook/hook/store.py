"""Record store interface the hook needs from its host."""
from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol
from uuid import UUID

from personal_data_hook.hook.context import ExecutionContext


class RecordStore(Protocol):
    def find_first(
        self,
        record_type: str,
        field: str,
        values: Sequence[str],
        exclude_id: UUID | None = None,
    ) -> UUID | None:
        """Return the id of one record whose *field* equals any of *values*."""
        ...

    def update(self, record_type: str, record_id: UUID, fields: Mapping[str, Any]) -> None:
        ...


StoreFactory = Callable[[ExecutionContext], RecordStore]
