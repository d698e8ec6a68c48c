"""Metadata for the attributes the hook normalizes."""
from __future__ import annotations

from dataclasses import dataclass

from personal_data_hook.core.constants import (
    DUPLICATE_MESSAGE_TEMPLATE,
    LICENSE_NUMBER_FIELD,
    NATIONAL_ID_FIELD,
    PHONE_FIELD,
    STATE_ID_FIELD,
)


@dataclass(frozen=True, slots=True)
class IdentityField:
    name: str
    label: str
    conflict_checked: bool = True
    message_template: str = DUPLICATE_MESSAGE_TEMPLATE

    @property
    def duplicate_message(self) -> str:
        return self.message_template.format(label=self.label)


PHONE = IdentityField(name=PHONE_FIELD, label="phone", conflict_checked=False)
NATIONAL_ID = IdentityField(name=NATIONAL_ID_FIELD, label="nationalID")
STATE_ID = IdentityField(name=STATE_ID_FIELD, label="stateID")
LICENSE_NUMBER = IdentityField(name=LICENSE_NUMBER_FIELD, label="licenseNumber")

# Processing order matters: the first conflict aborts the remaining fields.
IDENTITY_FIELDS: tuple[IdentityField, ...] = (NATIONAL_ID, STATE_ID, LICENSE_NUMBER)
