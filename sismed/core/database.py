"""
Store handle: one SQLite file, one engine, one exclusive lock.

Every repository call runs inside ``Store.session()``, which holds the lock
for the whole unit of work. File-level operations (backup, restore) take
the same lock through ``Store.locked()`` so the file is never copied
mid-write.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import AsyncGenerator, Generator

from fastapi import Depends, Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from sismed.core.config import Settings
from sismed.core.errors import StorageUnavailable
from sismed.services.schema_service import ensure_schema
from sismed.services.seed_service import seed_reference_data

logger = logging.getLogger(__name__)


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ships with foreign keys off; cascades depend on this.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Store:
    def __init__(self, path: Path, *, echo: bool = False) -> None:
        self.path = Path(path)
        self.engine: Engine = create_engine(
            f"sqlite:///{self.path}",
            future=True,
            echo=echo,
        )
        event.listen(self.engine, "connect", _enable_foreign_keys)
        self._session_factory = sessionmaker(
            autoflush=False,
            bind=self.engine,
            future=True,
        )
        self._lock = threading.Lock()

    @contextmanager
    def locked(self) -> Generator[None, None, None]:
        with self._lock:
            yield

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Exclusive session on the store.

        Usage:
            with store.session() as db:
                list_patients(db)
        """
        with self._lock:
            db = self._session_factory()
            try:
                yield db
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def release_connections(self) -> None:
        """Close pooled connections so the next checkout reopens the file."""
        self.engine.dispose()

    def close(self) -> None:
        with self._lock:
            self.engine.dispose()


def open_store(settings: Settings) -> Store:
    """
    Open (creating if needed) the store file, ensure the schema and apply
    the seed. Any failure is fatal for the caller.
    """
    path = settings.database_path
    store: Store | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        store = Store(path, echo=settings.sql_echo)
        ensure_schema(store.engine)
        with store.session() as db:
            seed_reference_data(db)
    except (OSError, SQLAlchemyError) as e:
        logger.error("Could not open store at %s: %s", path, e, exc_info=True)
        if store is not None:
            store.engine.dispose()
        raise StorageUnavailable(f"Could not open store at {path}: {e}") from e

    logger.info("Store ready at %s", path)
    return store


async def get_store(request: Request) -> Store:
    """
    FastAPI dependency returning the store owned by the application.
    No lock is taken; use ``hold_store`` or ``get_db`` to touch the file.
    """
    return request.app.state.store


async def hold_store(request: Request) -> AsyncGenerator[Store, None]:
    """
    FastAPI dependency that owns the store for the whole request.

    Queued requests wait on the app's ``asyncio.Lock`` in the event loop,
    not on a worker thread, so a full thread pool cannot starve the
    request that currently holds the store.
    """
    async with request.app.state.store_gate:
        yield request.app.state.store


async def get_db(store: Store = Depends(hold_store)) -> AsyncGenerator[Session, None]:
    """
    FastAPI dependency that yields a DB session holding the store lock
    for the duration of the request.
    """
    with store.session() as db:
        yield db
