# sismed/services/repository.py
"""
Shared write helpers for the entity services.

All of them normalize text through :func:`normalize_for_storage`, commit on
success and turn store constraint failures into ``ConstraintViolation``.
Update and delete report the affected row count; a missing id is 0, not an
error.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Generator

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sismed.core.errors import ConstraintViolation
from sismed.models.base import Base
from sismed.utils.normalization import normalize_for_storage

logger = logging.getLogger(__name__)


@contextmanager
def constraint_guard(db: Session) -> Generator[None, None, None]:
    try:
        yield
    except IntegrityError as e:
        db.rollback()
        message = str(e.orig) if e.orig is not None else str(e)
        logger.warning("Write rejected: %s", message)
        raise ConstraintViolation(message) from e


def insert_row(db: Session, model: type[Base], values: dict[str, Any]) -> int:
    values = normalize_for_storage(model, values)
    values.pop("id", None)
    row = model(**values)

    with constraint_guard(db):
        db.add(row)
        db.flush()  # assigns row.id
        new_id = row.id
        db.commit()

    return new_id


def update_row(db: Session, model: type[Base], row_id: int, values: dict[str, Any]) -> int:
    values = normalize_for_storage(model, values)
    values.pop("id", None)

    with constraint_guard(db):
        result = db.execute(
            update(model).where(model.id == row_id).values(**values),
            execution_options={"synchronize_session": False},
        )
        db.commit()

    if result.rowcount == 0:
        logger.debug("Update on %s id=%s matched no row", model.__tablename__, row_id)
    return result.rowcount


def delete_row(db: Session, model: type[Base], row_id: int) -> int:
    with constraint_guard(db):
        result = db.execute(
            delete(model).where(model.id == row_id),
            execution_options={"synchronize_session": False},
        )
        db.commit()

    return result.rowcount
