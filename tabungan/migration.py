"""Applying and rolling back the SQL migration scripts of the database."""

from __future__ import annotations

import logging
import os
import sqlite3
import sys
from pathlib import Path

from .config import load_config
from .database import connect_db

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY = "scripts/database/migration"


def _scripts(directory: str | os.PathLike[str], suffix: str) -> list[Path]:
    with os.scandir(directory) as entries:
        names = sorted(
            entry.name
            for entry in entries
            if not entry.is_dir() and entry.name.endswith(suffix)
        )
    return [Path(directory) / name for name in names]


def _run(db: sqlite3.Connection, script: Path, what: str) -> None:
    query = script.read_text(encoding="utf-8")
    try:
        db.executescript(query)
    except sqlite3.Error as exc:
        raise RuntimeError(f"failed to execute {what} {script.name}: {exc}") from exc


def migrate_up(db: sqlite3.Connection, directory: str | os.PathLike[str] = DEFAULT_DIRECTORY) -> list[str]:
    """Run every ``*.up.sql`` script in name order and return the names applied."""
    applied = []
    for script in _scripts(directory, ".up.sql"):
        logger.info("Applying migration: %s", script.name)
        _run(db, script, "migration")
        applied.append(script.name)
    logger.info("Migration up completed")
    return applied


def migrate_down(db: sqlite3.Connection, directory: str | os.PathLike[str] = DEFAULT_DIRECTORY) -> list[str]:
    """Run every ``*.down.sql`` script in reverse name order and return the names applied."""
    applied = []
    for script in reversed(_scripts(directory, ".down.sql")):
        logger.info("Rolling back migration: %s", script.name)
        _run(db, script, "rollback")
        applied.append(script.name)
    logger.info("Migration down completed")
    return applied


def main(argv: list[str] | None = None) -> int:
    """Run migrations ``up`` or ``down``; return 0 on success and 1 on failure."""
    logging.basicConfig(
        stream=sys.stdout,
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        logger.critical("Missing migration direction: up or down")
        return 1
    direction = args[0].lower()

    try:
        db = connect_db(load_config())
    except ConnectionError as exc:
        logger.critical("Failed to connect to DB: %s", exc)
        return 1

    try:
        if direction == "up":
            migrate_up(db)
        elif direction == "down":
            migrate_down(db)
        else:
            logger.critical("Failed to migrate with unknown direction : %s", direction)
            return 1
    except (OSError, RuntimeError) as exc:
        logger.critical("Failed to migrate %s: %s", direction, exc)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())