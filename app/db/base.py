import logging
from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import DATABASE_URL as _RAW_DATABASE_URL

logger = logging.getLogger(__name__)


def _build_database_url() -> str:
    """
    Determine the database URL.

    - Prefer DATABASE_URL from the environment (production).
    - Fallback to a local SQLite file for development.
    - Normalize legacy postgres:// URLs to SQLAlchemy's postgresql+psycopg2://.
    """
    url = _RAW_DATABASE_URL

    if url.startswith("postgres://"):
        # SQLAlchemy 2.x expects a driver-qualified URL
        url = url.replace("postgres://", "postgresql+psycopg2://", 1)

    return url


def utcnow() -> datetime:
    """Naive UTC timestamp; every DateTime column stores naive UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


DATABASE_URL = _build_database_url()

engine_kwargs = {"future": True}
if DATABASE_URL.startswith("sqlite"):
    # Needed for SQLite when used with FastAPI in a single process
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    if DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        engine_kwargs["poolclass"] = StaticPool

engine = create_engine(DATABASE_URL, **engine_kwargs)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def log_db_diagnostics() -> None:
    """Print backend and (for SQLite) file diagnostics once at startup."""
    url_safe = engine.url.render_as_string(hide_password=True)
    backend = engine.url.get_backend_name()
    logger.info("[DB] Using database backend=%s url=%s", backend, url_safe)

    if backend == "sqlite" and engine.url.database:
        db_path = Path(engine.url.database).resolve()
        exists = db_path.exists()
        size = db_path.stat().st_size if exists else 0
        logger.info("[DB] SQLite path=%s exists=%s size_bytes=%s", db_path, exists, size)
