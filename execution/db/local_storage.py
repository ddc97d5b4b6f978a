"""
execution/db/local_storage.py

Durable string key-value storage on top of execution/db/sqlite helpers.
Mirrors the browser localStorage contract: string keys, string values,
whole-value reads and writes. Callers serialize their own payloads.
"""

from datetime import datetime, timezone

from execution.db.sqlite import connect, init_db


def _utc_now() -> str:
    """Return the current UTC time as an ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()


def _check_str(func_name: str, name: str, value: object) -> None:
    if not isinstance(value, str):
        raise TypeError(
            f"{func_name}: '{name}' must be a str, got {type(value).__name__}"
        )


def get_item(key: str, db_path: str | None = None) -> str | None:
    """Return the stored value for key, or None when the key is absent.

    Args:
        key:     Storage key.
        db_path: Path to the SQLite file; defaults to the repo tmp/app.db.

    Raises:
        TypeError: If key is not a str.
    """
    _check_str("get_item", "key", key)

    conn = connect(db_path)
    try:
        init_db(conn)
        row = conn.execute(
            "SELECT value FROM local_storage WHERE key = ?", (key,)
        ).fetchone()
    finally:
        conn.close()

    return row["value"] if row else None


def set_item(key: str, value: str, db_path: str | None = None) -> None:
    """Store value under key, replacing any previous value.

    Args:
        key:     Storage key.
        value:   String payload (typically a JSON document).
        db_path: Path to the SQLite file; defaults to the repo tmp/app.db.

    Raises:
        TypeError: If key or value is not a str.
    """
    _check_str("set_item", "key", key)
    _check_str("set_item", "value", value)

    conn = connect(db_path)
    try:
        init_db(conn)
        conn.execute(
            """
            INSERT INTO local_storage (key, value, updated_at)
            VALUES (?, ?, ?)
            ON CONFLICT (key) DO UPDATE SET
                value      = excluded.value,
                updated_at = excluded.updated_at
            """,
            (key, value, _utc_now()),
        )
        conn.commit()
    finally:
        conn.close()


def remove_item(key: str, db_path: str | None = None) -> None:
    """Delete key from storage. Removing an absent key is a no-op."""
    _check_str("remove_item", "key", key)

    conn = connect(db_path)
    try:
        init_db(conn)
        conn.execute("DELETE FROM local_storage WHERE key = ?", (key,))
        conn.commit()
    finally:
        conn.close()
