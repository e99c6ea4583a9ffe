# sismed/utils/normalization.py
"""
Data-entry normalization applied right before rows are written.

Clinical identifiers (names, dosages, presentations, instructions, notes)
are stored upper-cased so lookups and printed prescriptions read the same
regardless of how they were typed. Create and update paths both go through
:func:`normalize_for_storage`.
"""

from __future__ import annotations

from typing import Any

from sismed.models.base import Base


def normalize_for_storage(model: type[Base], values: dict[str, Any]) -> dict[str, Any]:
    """
    Return a copy of ``values`` with the model's upper-case fields
    upper-cased. ``None`` is kept as is (optional notes).
    """
    normalized = dict(values)
    for field in model.__uppercase_fields__:
        value = normalized.get(field)
        if isinstance(value, str):
            normalized[field] = value.upper()
    return normalized
