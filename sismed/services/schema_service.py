# sismed/services/schema_service.py
import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from sismed.models import Base

logger = logging.getLogger(__name__)


def ensure_schema(engine: Engine) -> None:
    """
    Create any missing table (with its keys and constraints).
    Safe to run on every start; existing tables are left untouched.
    """
    existing = set(inspect(engine).get_table_names())
    missing = [name for name in Base.metadata.tables if name not in existing]

    Base.metadata.create_all(bind=engine, checkfirst=True)

    if missing:
        logger.info("Created tables: %s", ", ".join(missing))
    else:
        logger.debug("Schema already up to date")
