#!/usr/bin/env python3
# scripts/manage_store.py
"""
Store maintenance from the command line.
Every operation is safe to run many times (idempotent) except --restore,
which overwrites the store file.

Examples:
  # Create the store (schema + seed) and print catalog counts
  python -m scripts.manage_store --init

  # Re-apply the seed rows that are missing, even on a populated store
  python -m scripts.manage_store --init --reseed

  # Backup / restore
  python -m scripts.manage_store --backup ~/backups/
  python -m scripts.manage_store --restore ~/backups/sismed_backup.db

  # Use another data directory than the configured one
  python -m scripts.manage_store --data-dir /tmp/sismed --init
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sqlalchemy import func, select

from sismed.core.config import get_settings
from sismed.core.database import Store, open_store
from sismed.core.errors import SismedError
from sismed.models import Medicine, Posology
from sismed.services.seed_service import seed_reference_data
from sismed.services.store_file_service import backup_store, restore_store

logger = logging.getLogger(__name__)


def print_counts(store: Store) -> None:
    with store.session() as db:
        medicines = db.scalar(select(func.count()).select_from(Medicine))
        posologies = db.scalar(select(func.count()).select_from(Posology))
    print(f"store: {store.path}")
    print(f"medicines: {medicines}")
    print(f"posologies: {posologies}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="SisMed store maintenance")
    parser.add_argument("--data-dir", type=Path, help="Directory holding the store file")
    parser.add_argument("--init", action="store_true", help="Create schema and seed, then print counts")
    parser.add_argument("--reseed", action="store_true", help="With --init: insert missing seed rows")
    parser.add_argument("--backup", metavar="PATH", help="Copy the store to PATH (file or directory)")
    parser.add_argument("--restore", metavar="PATH", help="Replace the store with the backup at PATH")
    args = parser.parse_args(argv)

    if not (args.init or args.backup or args.restore):
        parser.error("nothing to do: pass --init, --backup or --restore")
    if args.reseed and not args.init:
        parser.error("--reseed requires --init")
    return args


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)

    settings = get_settings()
    if args.data_dir is not None:
        settings = settings.model_copy(update={"data_dir": args.data_dir})

    try:
        store = open_store(settings)
    except SismedError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    try:
        if args.init:
            if args.reseed:
                with store.session() as db:
                    seed_reference_data(db, force=True)
            print_counts(store)
        if args.backup:
            print(f"backup written: {backup_store(store, args.backup, backup_filename=settings.backup_filename)}")
        if args.restore:
            print(restore_store(store, args.restore))
    except SismedError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        store.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
