"""Per-invocation payload handed to a pre-operation hook by its host.

``ExecutionContext`` mirrors what the host pipeline knows about the
operation in flight: which message is running, how deeply nested the call
is, who is acting, which record is targeted, the submitted change-set
(``input_parameters["Target"]``) and, on update, the record's state before
the change (``pre_entity_images["PreImage"]``).
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any
from uuid import UUID

from personal_data_hook.core.constants import PRE_IMAGE_NAME, TARGET_PARAMETER


class MessageName(StrEnum):
    CREATE = "Create"
    UPDATE = "Update"


class ChangeSet(MutableMapping[str, Any]):
    """Field assignments a caller intends to persist.

    Presence and blankness are separate questions: a key that is present
    with a blank value was still explicitly submitted.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ChangeSet(keys={sorted(self._values)!r})"

    def get_string(self, key: str) -> str | None:
        value = self._values.get(key)
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    def is_blank(self, key: str) -> bool:
        value = self.get_string(key)
        return value is None or not value.strip()

    def to_dict(self) -> dict[str, Any]:
        return dict(self._values)


@dataclass(slots=True)
class Entity:
    logical_name: str
    id: UUID | None = None
    attributes: ChangeSet = field(default_factory=ChangeSet)


@dataclass(frozen=True, slots=True)
class ExecutionContext:
    message_name: str
    depth: int
    user_id: UUID | None = None
    primary_entity_id: UUID | None = None
    input_parameters: Mapping[str, Any] = field(default_factory=dict)
    pre_entity_images: Mapping[str, Entity] = field(default_factory=dict)

    @property
    def is_update(self) -> bool:
        return self.message_name.lower() == MessageName.UPDATE.lower()

    @property
    def target_id(self) -> UUID | None:
        """Identifier of the record being changed; ``None`` on create."""
        if self.primary_entity_id is None or self.primary_entity_id.int == 0:
            return None
        return self.primary_entity_id

    @property
    def target(self) -> Entity | None:
        candidate = self.input_parameters.get(TARGET_PARAMETER)
        return candidate if isinstance(candidate, Entity) else None

    @property
    def prior_snapshot(self) -> Mapping[str, Any] | None:
        """Read-only view of the record before the update, when the host supplied one."""
        if not self.is_update:
            return None
        image = self.pre_entity_images.get(PRE_IMAGE_NAME)
        if image is None:
            return None
        return MappingProxyType(image.attributes.to_dict())
