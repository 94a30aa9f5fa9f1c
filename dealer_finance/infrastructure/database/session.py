"""Database engine and session factory for the operations store"""

from typing import Any, Dict, Iterator
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from dealer_finance.config import settings


def build_engine(database_url: str) -> Engine:
    """
    Engine for the configured store.

    Postgres gets a bounded pool recycled hourly; SQLite (local runs) is
    opened for use across FastAPI's worker threads.
    """
    options: Dict[str, Any] = {"pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(pool_size=10, max_overflow=10, pool_recycle=3600)
    return create_engine(database_url, **options)


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Iterator[Session]:
    """Request-scoped session; handlers commit or roll back themselves"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
