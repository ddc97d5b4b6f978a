"""
ui/app_state.py

Session-scoped access to the EnrollmentStore for Streamlit pages.

A page calls provide_enrollment_store() once near the top of the script;
components further down call use_enrollment_store() to get the same store.
The store lives in st.session_state, so it is loaded from storage once per
browser session and survives Streamlit reruns.
"""

from __future__ import annotations

import sys
from collections.abc import MutableMapping
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Ensure repo root is on sys.path so execution.* imports work regardless of
# where Streamlit is launched from.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from execution.enrollment.enrollment_store import EnrollmentStore  # noqa: E402

STORE_STATE_KEY = "enrollment_store"


def _session(state: MutableMapping | None) -> MutableMapping:
    return st.session_state if state is None else state


def provide_enrollment_store(
    state: MutableMapping | None = None,
    db_path: str | None = None,
) -> EnrollmentStore:
    """Return the session's store, creating it on first use.

    Args:
        state:   Mapping holding per-session values; defaults to st.session_state.
        db_path: SQLite file for a newly created store. Ignored when the
                 session already holds one.
    """
    session = _session(state)
    store = session.get(STORE_STATE_KEY)
    if store is None:
        store = EnrollmentStore(db_path=db_path)
        session[STORE_STATE_KEY] = store
    return store


def use_enrollment_store(state: MutableMapping | None = None) -> EnrollmentStore:
    """Return the store placed in the session by provide_enrollment_store().

    Raises:
        RuntimeError: If no store has been provided for this session.
    """
    store = _session(state).get(STORE_STATE_KEY)
    if store is None:
        raise RuntimeError(
            "use_enrollment_store must be called after provide_enrollment_store"
        )
    return store
