"""Local SQLite storage with its schema set up on first use."""

from __future__ import annotations

import os
import sqlite3
import threading
from contextlib import closing
from pathlib import Path
from typing import Sequence

from genco.logger import log_warning

_MIGRATIONS = (
    """
    CREATE TABLE IF NOT EXISTS java_import_route (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        base_package TEXT NOT NULL,
        route TEXT NOT NULL,
        last_type_id TEXT NOT NULL
    )
    """,
)

_migrated: set[Path] = set()
_migration_lock = threading.Lock()


class DatabaseError(RuntimeError):
    """Raised when a query can not be run."""


def _default_db_file() -> Path:
    return Path.cwd() / "database" / "test.db"


def _open(db_file: Path) -> sqlite3.Connection:
    db_file.parent.mkdir(parents=True, exist_ok=True)
    return sqlite3.connect(db_file)


def _migrate(db_file: Path) -> None:
    with closing(_open(db_file)) as connection, connection:
        for statement in _MIGRATIONS:
            connection.execute(statement)


def get_db_connection(db_file: str | os.PathLike | None = None) -> sqlite3.Connection:
    """Open a connection, creating the database and its schema the first time."""
    path = Path(db_file) if db_file is not None else _default_db_file()
    key = path.resolve()
    with _migration_lock:
        if key not in _migrated:
            _migrate(path)
            _migrated.add(key)
    return _open(path)


def execute_insert(
    query: str, params: Sequence[object], db_file: str | os.PathLike | None = None
) -> int:
    """Run a write query with ``params`` and return the number of changed rows."""
    with closing(get_db_connection(db_file)) as connection:
        try:
            with connection:
                return connection.execute(query, tuple(params)).rowcount
        except sqlite3.Error as err:
            message = f"Error running execute query: {err}"
            log_warning(message)
            raise DatabaseError(message) from err