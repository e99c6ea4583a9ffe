# sismed/services/store_file_service.py
"""
File-level operations around the store: exporting a rendered prescription
PDF, backing up and restoring the store file.

Dialogs live in the UI; callers pass the chosen path, or None when the
user cancelled.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from sismed.core.database import Store
from sismed.core.errors import Cancelled, IoFailure
from sismed.utils.file_storage import resolve_target_path, write_bytes

logger = logging.getLogger(__name__)

RESTORE_DONE_MESSAGE = "Data restored successfully. Restart the application."


def save_pdf(data: bytes, filename: str, target_path: str | Path | None) -> Path:
    """
    Write already rendered PDF bytes. Returns the absolute path written.
    """
    if not filename.lower().endswith(".pdf"):
        filename = f"{filename}.pdf"
    path = resolve_target_path(target_path, filename)

    try:
        write_bytes(path, data)
    except OSError as e:
        logger.error("Failed to write PDF to %s: %s", path, e, exc_info=True)
        raise IoFailure(str(e)) from e

    logger.info("PDF written to %s (%s bytes)", path, len(data))
    return path


def database_path(store: Store) -> Path:
    return store.path.resolve()


def backup_store(store: Store, target_path: str | Path | None, *, backup_filename: str = "sismed_backup.db") -> Path:
    """
    Copy the store file to ``target_path`` while holding the store lock.
    """
    path = resolve_target_path(target_path, backup_filename)

    with store.locked():
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(store.path, path)
        except OSError as e:
            logger.error("Backup to %s failed: %s", path, e, exc_info=True)
            raise IoFailure(str(e)) from e

    logger.info("Store backed up to %s", path)
    return path


def restore_store(store: Store, source_path: str | Path | None) -> str:
    """
    Replace the store file with a backup. Pooled connections are closed
    first so nothing keeps reading the old file.
    """
    if source_path is None or not str(source_path).strip():
        raise Cancelled()

    source = Path(source_path).expanduser().resolve()
    if not source.is_file():
        raise IoFailure(f"Backup file not found: {source}")

    with store.locked():
        store.release_connections()
        try:
            shutil.copyfile(source, store.path)
        except OSError as e:
            logger.error("Restore from %s failed: %s", source, e, exc_info=True)
            raise IoFailure(str(e)) from e

    logger.info("Store restored from %s", source)
    return RESTORE_DONE_MESSAGE
