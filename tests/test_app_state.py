"""
tests/test_app_state.py

Unit tests for ui/app_state.py.
A plain dict stands in for st.session_state. Uses an isolated database
(tmp/test_app_state.db).
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

from execution.enrollment.enrollment_store import EnrollmentStore  # noqa: E402
from ui.app_state import (                                          # noqa: E402
    STORE_STATE_KEY,
    provide_enrollment_store,
    use_enrollment_store,
)

TEST_DB_PATH = str(REPO_ROOT / "tmp" / "test_app_state.db")


class TestAppState(unittest.TestCase):

    def setUp(self):
        (REPO_ROOT / "tmp").mkdir(parents=True, exist_ok=True)
        self.state = {}

    def tearDown(self):
        if os.path.exists(TEST_DB_PATH):
            os.remove(TEST_DB_PATH)

    def test_use_before_provide_raises(self):
        with self.assertRaises(RuntimeError) as ctx:
            use_enrollment_store(self.state)
        self.assertIn("provide_enrollment_store", str(ctx.exception))

    def test_provide_creates_and_caches_store(self):
        store = provide_enrollment_store(self.state, db_path=TEST_DB_PATH)

        self.assertIsInstance(store, EnrollmentStore)
        self.assertIs(self.state[STORE_STATE_KEY], store)
        self.assertIs(provide_enrollment_store(self.state, db_path=TEST_DB_PATH), store)

    def test_use_returns_the_provided_store(self):
        store = provide_enrollment_store(self.state, db_path=TEST_DB_PATH)
        self.assertIs(use_enrollment_store(self.state), store)

    def test_sessions_are_isolated(self):
        first = provide_enrollment_store(self.state, db_path=TEST_DB_PATH)
        second = provide_enrollment_store({}, db_path=TEST_DB_PATH)
        self.assertIsNot(first, second)


if __name__ == "__main__":
    unittest.main()
