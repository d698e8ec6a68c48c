"""FastAPI dependency injection — database sessions and the hook pipeline."""
from __future__ import annotations

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from personal_data_hook.db.session import get_session_factory
from personal_data_hook.pipeline.host import HookPipeline


def get_db() -> Generator[Session, None, None]:
    """Yield a SQLAlchemy session; commit on success, rollback on error."""
    db = get_session_factory()()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_pipeline(db: Session = Depends(get_db)) -> HookPipeline:
    """Return a HookPipeline with the validation hook registered."""
    return HookPipeline.default(db)
