from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from personal_data_hook.core.constants import PERSONAL_DATA_ENTITY
from personal_data_hook.db.base import Base


class PersonalData(Base):
    """One person's contact and identity-document record.

    Document columns are not unique at the database level: legacy rows may
    still hold masked values, so uniqueness is enforced on the normalized
    form by the pre-operation hook.
    """

    __tablename__ = PERSONAL_DATA_ENTITY

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    name: Mapped[str | None] = mapped_column(String(256), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    national_id: Mapped[str | None] = mapped_column(String(32), nullable=True, index=True)
    state_id: Mapped[str | None] = mapped_column(String(32), nullable=True, index=True)
    license_number: Mapped[str | None] = mapped_column(String(32), nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def to_attributes(self) -> dict[str, str | None]:
        return {
            "name": self.name,
            "phone": self.phone,
            "national_id": self.national_id,
            "state_id": self.state_id,
            "license_number": self.license_number,
        }
