#!/usr/bin/env python3
"""Seed demo data: personal data records, some with legacy masked documents.

Legacy rows are inserted directly, bypassing the validation hook, so the
first update through the API shows the automatic backfill.

Usage:
    python scripts/seed_demo.py          # uses DATABASE_URL from env / .env
    DATABASE_URL=... python scripts/seed_demo.py
"""
from __future__ import annotations

import sys

from sqlalchemy import create_engine
from sqlalchemy.orm import Session

# Ensure project root is on sys.path
sys.path.insert(0, ".")

from personal_data_hook.core.settings import get_settings
from personal_data_hook.db.base import Base
from personal_data_hook.db.models import PersonalData
from personal_data_hook.pipeline.host import HookPipeline


def seed(session: Session) -> None:
    """Insert demo records through the pipeline plus two legacy rows."""
    pipeline = HookPipeline.default(session)

    demo_people = [
        # (name, phone, national_id, state_id, license_number)
        ("Ana Souza", "(11) 98888-7777", "123.456.789-00", "12.345.678-9", "0123 4567 890"),
        ("Bruno Lima", "(21) 99999-0000", "987.654.321-00", None, None),
        ("Carla Dias", "+55 31 3333-4444", None, "MG-10.200.300", "98765432100"),
    ]
    for name, phone, national_id, state_id, license_number in demo_people:
        attributes = {"name": name, "phone": phone, "national_id": national_id}
        if state_id:
            attributes["state_id"] = state_id
        if license_number:
            attributes["license_number"] = license_number
        pipeline.create(attributes)

    session.add_all(
        [
            PersonalData(name="Diego Alves", national_id="111.222.333-44", state_id="AB.123.456"),
            PersonalData(name="Elisa Rocha", phone="(41) 3222-1111", license_number="555.666.777-88"),
        ]
    )
    session.commit()
    print(f"Seeded {len(demo_people) + 2} personal data records")


def main() -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)

    with Session(engine) as session:
        seed(session)


if __name__ == "__main__":
    main()
