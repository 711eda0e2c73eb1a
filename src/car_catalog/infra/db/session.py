"""Engine and session plumbing for the Postgres document store.

Nothing here connects until the first call, so the memory backend and the
test suite never need a reachable database.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from car_catalog.infra.config import database_url

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None
# Reentrant: _get_session_factory() builds the engine while holding it.
_init_lock = threading.RLock()


def get_engine() -> Engine:
    """
    Process-wide engine.

    Each store operation holds a connection only for one short query, so
    the pool stays small even with FastAPI running sync routes in threads.
    pool_pre_ping drops connections the server closed while idle.
    """
    global _engine
    if _engine is not None:
        return _engine

    with _init_lock:
        if _engine is None:
            _engine = create_engine(
                database_url(),
                pool_size=5,
                max_overflow=10,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
        return _engine


def _get_session_factory() -> sessionmaker[Session]:
    global _session_factory
    if _session_factory is not None:
        return _session_factory

    with _init_lock:
        if _session_factory is None:
            _session_factory = sessionmaker(bind=get_engine(), expire_on_commit=False)
        return _session_factory


@contextmanager
def get_session() -> Iterator[Session]:
    """One unit of work: commit on success, roll back on any exception."""
    session = _get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def dispose_engine() -> None:
    """Close pooled connections; the next get_session() builds a new engine."""
    global _engine, _session_factory
    with _init_lock:
        engine, _engine, _session_factory = _engine, None, None
    if engine is not None:
        engine.dispose()
