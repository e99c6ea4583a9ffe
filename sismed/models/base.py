# sismed/models/base.py
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all ORM models.

    ``__uppercase_fields__`` lists the free-text columns that are stored
    upper-cased; see :func:`sismed.utils.normalization.normalize_for_storage`.
    """

    __uppercase_fields__ = ()
