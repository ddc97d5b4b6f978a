"""
execution/enrollment/enrollment_store.py

EnrollmentStore: in-memory enrollments and students backed by whole-collection
persistence to local key-value storage (execution/db/local_storage.py).

- Both collections are read once, at construction.
- Every mutation ends with an explicit persist of the affected collection,
  written in full as a JSON array. There are no partial writes.
- Subscribed listeners are notified after the write, and only when a record
  was actually added or changed.

The course catalog is static (execution/course/course_catalog.py) and is
never persisted.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from datetime import datetime, timezone

from execution.course import course_catalog
from execution.db.local_storage import get_item, set_item
from execution.enrollment.enrollment_records import (
    DROPPED_STATUS,
    ENROLLMENT_FIELDS,
    build_enrollment,
    build_student,
    record_student_enrollment,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Storage keys
# ---------------------------------------------------------------------------
ENROLLMENTS_KEY = "training-enrollments"
STUDENTS_KEY = "training-students"

ENROLLMENTS = "enrollments"
STUDENTS = "students"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _dump(records: list[dict]) -> str:
    """Serialize a collection the way JSON.stringify does (compact, unescaped)."""
    return json.dumps(records, separators=(",", ":"), ensure_ascii=False)


def _load_collection(key: str, db_path: str | None) -> list[dict]:
    """Read and parse the JSON array stored under key.

    Returns an empty list when the key is absent or holds an empty string. A malformed value is fatal:
    the parse error is logged and re-raised.

    Raises:
        json.JSONDecodeError: If the stored value is not valid JSON.
        ValueError: If the stored value is valid JSON but not an array.
    """
    raw = get_item(key, db_path=db_path)
    if not raw:
        logger.debug("No stored value for %s; starting empty.", key)
        return []

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        logger.error("Stored value for %s is not valid JSON.", key)
        raise

    if not isinstance(parsed, list):
        raise ValueError(
            f"Stored value for {key!r} must be a JSON array, "
            f"got {type(parsed).__name__}"
        )

    logger.debug("Loaded %d record(s) from %s.", len(parsed), key)
    return parsed


def _max_numeric_id(*collections: list[dict]) -> int:
    """Return the largest integer-valued id across collections, or 0."""
    largest = 0
    for records in collections:
        for record in records:
            value = str(record.get("id", ""))
            if value.isdigit():
                largest = max(largest, int(value))
    return largest


class EnrollmentStore:
    """Owns the enrollment and student collections for one running session.

    Args:
        db_path: Path to the SQLite file backing local storage; defaults to
                 the repo tmp/app.db (or TRAINING_DB_PATH).
        now:     Clock returning an aware datetime. Used for ids and for a
                 new student's memberSince date. Defaults to UTC now.

    Raises:
        json.JSONDecodeError: If a persisted collection is malformed.
        ValueError: If a persisted collection is not a JSON array.
    """

    def __init__(
        self,
        db_path: str | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._db_path = db_path
        self._now = now or _utc_now
        self._listeners: list[Callable[[str], None]] = []

        self._enrollments = _load_collection(ENROLLMENTS_KEY, db_path)
        self._students = _load_collection(STUDENTS_KEY, db_path)

        # Ids are wall-clock milliseconds, bumped past anything already issued.
        self._last_id = _max_numeric_id(self._enrollments, self._students)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def courses(self) -> list[dict]:
        return course_catalog.list_courses()

    @property
    def enrollments(self) -> list[dict]:
        return [dict(e) for e in self._enrollments]

    @property
    def students(self) -> list[dict]:
        return [dict(s) for s in self._students]

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------
    def subscribe(self, listener: Callable[[str], None]) -> Callable[[], None]:
        """Register listener(collection_name); return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, collection_name: str) -> None:
        for listener in list(self._listeners):
            listener(collection_name)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def _persist_enrollments(self) -> None:
        set_item(ENROLLMENTS_KEY, _dump(self._enrollments), db_path=self._db_path)
        logger.debug("Persisted %d enrollment(s).", len(self._enrollments))

    def _persist_students(self) -> None:
        set_item(STUDENTS_KEY, _dump(self._students), db_path=self._db_path)
        logger.debug("Persisted %d student(s).", len(self._students))

    def _next_id(self) -> str:
        millis = int(self._now().timestamp() * 1000)
        if millis <= self._last_id:
            millis = self._last_id + 1
        self._last_id = millis
        return str(millis)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def add_enrollment(self, data: dict) -> None:
        """Record a new enrollment and upsert its student by email.

        Args:
            data: Every enrollment field except "id" (courseId, courseName,
                  studentName, studentEmail, studentPhone, enrollmentDate,
                  status, price, progress and optionally notes). courseId is
                  not checked against the catalog.

        The enrollment collection is persisted first, then the student
        collection. Listeners are notified only after both writes. Storage
        errors propagate to the caller.
        """
        enrollment = build_enrollment(self._next_id(), data)
        self._enrollments.append(enrollment)
        self._persist_enrollments()

        email = enrollment.get("studentEmail")
        for index, student in enumerate(self._students):
            if student.get("email") == email:
                self._students[index] = record_student_enrollment(
                    student, enrollment.get("enrollmentDate")
                )
                break
        else:
            member_since = self._now().date().isoformat()
            self._students.append(
                build_student(self._next_id(), enrollment, member_since)
            )
            logger.info("New student record created for %s.", email)

        self._persist_students()
        self._notify(ENROLLMENTS)
        self._notify(STUDENTS)

    def update_enrollment(self, enrollment_id: str, updates: dict) -> None:
        """Shallow-merge updates into the enrollment with enrollment_id.

        Fields absent from updates are left untouched. An "id" key in updates
        is ignored. Status changes are unrestricted. An unknown enrollment_id
        is a silent no-op; the collection is persisted either way.
        """
        patch = dict(updates)
        if "id" in patch:
            logger.warning(
                "update_enrollment: ignoring 'id' in updates for enrollment %s.",
                enrollment_id,
            )
            del patch["id"]

        unknown = sorted(set(patch) - set(ENROLLMENT_FIELDS))
        if unknown:
            logger.debug("update_enrollment: merging non-standard field(s) %s.", unknown)

        changed = False
        for index, enrollment in enumerate(self._enrollments):
            if enrollment.get("id") == enrollment_id:
                self._enrollments[index] = {**enrollment, **patch}
                changed = True
                break

        if not changed:
            logger.debug("update_enrollment: no enrollment with id %s.", enrollment_id)

        self._persist_enrollments()
        if changed:
            self._notify(ENROLLMENTS)

    def cancel_enrollment(self, enrollment_id: str) -> None:
        """Mark an enrollment as dropped. Records are never deleted."""
        self.update_enrollment(enrollment_id, {"status": DROPPED_STATUS})

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_student_enrollments(self, email: str) -> list[dict]:
        """Return every enrollment whose studentEmail equals email, in insertion order."""
        return [dict(e) for e in self._enrollments if e.get("studentEmail") == email]

    def get_course_by_id(self, course_id: str) -> dict | None:
        """Return the catalog course with course_id, or None."""
        return course_catalog.get_course_by_id(course_id)
