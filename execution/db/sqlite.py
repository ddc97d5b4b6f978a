"""
execution/db/sqlite.py

SQLite helper module for local persistence of the enrollment store.
Provides only infrastructure: path resolution, connection setup, and schema initialization.
No business logic lives here.
"""

import os
import sqlite3
from pathlib import Path

# Overrides the default tmp/app.db location when set.
DB_PATH_ENV_VAR = "TRAINING_DB_PATH"


def get_db_path() -> str:
    """Return the absolute path to the local SQLite database file.

    Honours the TRAINING_DB_PATH environment variable when it is set.
    Otherwise the file lives under the repo's /tmp folder (which is safe to
    delete and is never committed). Creates the directory if it does not exist.

    Returns:
        str: Absolute path to the database file.
    """
    override = os.environ.get(DB_PATH_ENV_VAR)
    if override:
        path = Path(override).expanduser().resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)

    repo_root = Path(__file__).resolve().parents[2]  # execution/db/sqlite.py -> repo root
    tmp_dir = repo_root / "tmp"
    tmp_dir.mkdir(parents=True, exist_ok=True)
    return str(tmp_dir / "app.db")


def connect(db_path: str | None = None) -> sqlite3.Connection:
    """Open and return a sqlite3 connection with rows accessible by column name.

    Args:
        db_path: Path to the SQLite file. Defaults to the result of get_db_path().

    Returns:
        sqlite3.Connection: An open connection whose rows support lookup by name.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row  # rows accessible by column name
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    """Create all application tables if they do not already exist.

    Safe to call multiple times (uses CREATE TABLE IF NOT EXISTS).
    Does not drop or migrate existing tables.

    Schema:
        local_storage - string key -> string value, one row per key
                        (whole JSON collections are stored as single values)

    Args:
        conn: An open sqlite3.Connection.
    """
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS local_storage (
            key         TEXT PRIMARY KEY,
            value       TEXT NOT NULL,
            updated_at  TEXT NOT NULL
        );
    """)
    conn.commit()
