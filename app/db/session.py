import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import StorageConstraintError
from app.db.base import SessionLocal

logger = logging.getLogger(__name__)


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """
    Run one handler step as a single transaction.

    Commits on success; rolls back on any error. Unique/foreign key
    violations surface as StorageConstraintError.
    """
    try:
        yield db
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("[DB] integrity error rolled back: %s", exc.orig)
        raise StorageConstraintError(
            "Storage constraint violated",
            details={"reason": str(exc.orig)},
        ) from exc
    except Exception:
        db.rollback()
        raise
