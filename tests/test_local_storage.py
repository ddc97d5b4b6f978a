"""
tests/test_local_storage.py

Unit tests for execution/db/local_storage.py.
Uses an isolated database (tmp/test_local_storage.db) and never touches
the application database (tmp/app.db).
"""

import os
import sys
import unittest
from pathlib import Path

# ---------------------------------------------------------------------------
# PYTHONPATH bootstrap - repo root must be importable from any test runner.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from execution.db.local_storage import get_item, remove_item, set_item  # noqa: E402
from execution.db.sqlite import connect                                # noqa: E402

TEST_DB_PATH = str(REPO_ROOT / "tmp" / "test_local_storage.db")


class TestLocalStorage(unittest.TestCase):

    def setUp(self):
        (REPO_ROOT / "tmp").mkdir(parents=True, exist_ok=True)

    def tearDown(self):
        if os.path.exists(TEST_DB_PATH):
            os.remove(TEST_DB_PATH)

    def test_missing_key_returns_none(self):
        """get_item() on a fresh database must return None, not raise."""
        self.assertIsNone(get_item("training-enrollments", db_path=TEST_DB_PATH))

    def test_set_then_get_returns_value(self):
        set_item("k", '[{"id":"1"}]', db_path=TEST_DB_PATH)
        self.assertEqual(get_item("k", db_path=TEST_DB_PATH), '[{"id":"1"}]')

    def test_set_replaces_previous_value_in_one_row(self):
        """A second set_item() for the same key overwrites; no duplicate rows."""
        set_item("k", "first", db_path=TEST_DB_PATH)
        set_item("k", "second", db_path=TEST_DB_PATH)

        self.assertEqual(get_item("k", db_path=TEST_DB_PATH), "second")
        conn = connect(TEST_DB_PATH)
        try:
            count = conn.execute(
                "SELECT COUNT(*) FROM local_storage WHERE key = ?", ("k",)
            ).fetchone()[0]
        finally:
            conn.close()
        self.assertEqual(count, 1)

    def test_keys_are_independent(self):
        set_item("a", "1", db_path=TEST_DB_PATH)
        set_item("b", "2", db_path=TEST_DB_PATH)
        self.assertEqual(get_item("a", db_path=TEST_DB_PATH), "1")
        self.assertEqual(get_item("b", db_path=TEST_DB_PATH), "2")

    def test_empty_string_is_stored_not_treated_as_missing(self):
        set_item("k", "", db_path=TEST_DB_PATH)
        self.assertEqual(get_item("k", db_path=TEST_DB_PATH), "")

    def test_remove_item_deletes_key(self):
        set_item("k", "v", db_path=TEST_DB_PATH)
        remove_item("k", db_path=TEST_DB_PATH)
        self.assertIsNone(get_item("k", db_path=TEST_DB_PATH))

    def test_remove_absent_key_is_noop(self):
        remove_item("never-set", db_path=TEST_DB_PATH)
        self.assertIsNone(get_item("never-set", db_path=TEST_DB_PATH))

    def test_non_string_value_raises_type_error(self):
        with self.assertRaises(TypeError) as ctx:
            set_item("k", ["not", "serialized"], db_path=TEST_DB_PATH)
        self.assertIn("value", str(ctx.exception))

    def test_non_string_key_raises_type_error(self):
        with self.assertRaises(TypeError):
            get_item(42, db_path=TEST_DB_PATH)


if __name__ == "__main__":
    unittest.main()
