"""
execution/enrollment/enrollment_records.py

Field names, value spaces and record builders for enrollments and students.

Records are plain dicts keyed by the camelCase names used in the persisted
JSON. No storage access and no clock reads happen here; callers inject ids
and dates.
"""

ENROLLMENT_STATUSES: tuple[str, ...] = ("enrolled", "completed", "dropped", "pending")

# Status written by cancel_enrollment.
DROPPED_STATUS = "dropped"

ENROLLMENT_FIELDS: tuple[str, ...] = (
    "id",
    "courseId",
    "courseName",
    "studentName",
    "studentEmail",
    "studentPhone",
    "enrollmentDate",
    "status",
    "price",
    "progress",
    "notes",
)

STUDENT_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "email",
    "phone",
    "totalCourses",
    "memberSince",
    "lastActivity",
    "completedCourses",
)


def build_enrollment(enrollment_id: str, data: dict) -> dict:
    """Return a new enrollment record: a copy of data with enrollment_id set.

    Any "id" already present in data is overridden.
    """
    record = dict(data)
    record["id"] = enrollment_id
    return record


def build_student(student_id: str, enrollment: dict, member_since: str) -> dict:
    """Return a new student record derived from their first enrollment.

    Args:
        student_id:   Identifier for the new student.
        enrollment:   The enrollment that introduced this email.
        member_since: ISO date (YYYY-MM-DD) the student record is created.
    """
    return {
        "id": student_id,
        "name": enrollment.get("studentName"),
        "email": enrollment.get("studentEmail"),
        "phone": enrollment.get("studentPhone"),
        "totalCourses": 1,
        "memberSince": member_since,
        "lastActivity": enrollment.get("enrollmentDate"),
        "completedCourses": 0,
    }


def record_student_enrollment(student: dict, enrollment_date: str | None) -> dict:
    """Return a copy of student with one more course and a fresh lastActivity."""
    updated = dict(student)
    updated["totalCourses"] = updated.get("totalCourses", 0) + 1
    updated["lastActivity"] = enrollment_date
    return updated
