"""
execution/course/course_catalog.py

Static training course catalog shown on the enrollment front end.

No database access. Pure constants and helpers only.
The catalog is seeded at import time and never persisted or reloaded.
"""

from __future__ import annotations

import copy

COURSE_LEVELS: tuple[str, ...] = ("Beginner", "Intermediate", "Advanced")

# enrolledStudents is display data only; it is never synced with the
# enrollment store.
COURSES: tuple[dict, ...] = (
    {
        "id": "1",
        "name": "Full Stack Web Development",
        "description": (
            "Complete web development bootcamp covering HTML, CSS, JavaScript, "
            "React, Node.js, and databases."
        ),
        "duration": 12,
        "price": 20000,
        "image": "https://images.pexels.com/photos/574071/pexels-photo-574071.jpeg",
        "features": [
            "HTML5 & CSS3",
            "JavaScript ES6+",
            "React & Redux",
            "Node.js & Express",
            " SQL",
            "Project Portfolio",
        ],
        "level": "Beginner",
        "instructor": "Srikanth",
        "category": "Web Development",
        "startDate": "2025-10-15",
        "maxStudents": 25,
        "enrolledStudents": 18,
    },
    {
        "id": "2",
        "name": "Deta Engineer",
        "description": (
            "Comprehensive Python course from basics to advanced topics "
            "including data engineering and automation."
        ),
        "duration": 12,
        "price": 30000,
        "image": "https://images.pexels.com/photos/1181671/pexels-photo-1181671.jpeg",
        "features": [
            "Python Fundamentals",
            "Data Structures",
            "Web Scraping",
            "Automation Scripts",
            "SQL",
            "Big Data Tools",
            "Real Projects",
            "Databricks",
            "Azure Data Factory",
        ],
        "level": "Beginner",
        "instructor": "Venkaiah Naidu",
        "category": "Programming",
        "startDate": "2025-09-01",
        "maxStudents": 10,
        "enrolledStudents": 7,
    },
    {
        "id": "3",
        "name": "Cloud Computing & DevOps",
        "description": (
            "Learn cloud platforms, containerization, CI/CD, and modern DevOps "
            "practices for scalable applications."
        ),
        "duration": 12,
        "price": 25000,
        "image": "https://images.pexels.com/photos/1181298/pexels-photo-1181298.jpeg",
        "features": [
            "AWS/Azure/GCP",
            "Docker & Kubernetes",
            "CI/CD Pipelines",
            "Infrastructure as Code",
            "Monitoring & Logging",
            "Security Best Practices",
        ],
        "level": "Advanced",
        "instructor": "VasuDeva",
        "category": "Cloud & DevOps",
        "startDate": "2025-09-15",
        "maxStudents": 10,
        "enrolledStudents": 3,
    },
    {
        "id": "4",
        "name": "Medical Coding",
        "description": (
            "Ensure accurate healthcare billing, insurance claims, and "
            "compliance by translating medical diagnoses and procedures into "
            "standardized universal codes."
        ),
        "duration": 12,
        "price": 30000,
        "image": "https://images.pexels.com/photos/590022/pexels-photo-590022.jpeg",
        "features": [
            "Human Anatomy and Physiology",
            "ICD 10 CM Guidelines",
            "IPDRG Cross Training",
            "Basic/Advanced Medical coding",
            "Leading a code in 3M Solventum",
        ],
        "level": "Intermediate",
        "instructor": "Dr. Ravi Prathap",
        "category": "Medical Coding",
        "startDate": "2025-09-15",
        "maxStudents": 15,
        "enrolledStudents": 12,
    },
)

COURSE_IDS: frozenset[str] = frozenset(course["id"] for course in COURSES)


def list_courses() -> list[dict]:
    """Return deep copies of every catalog course, in catalog order."""
    return [copy.deepcopy(course) for course in COURSES]


def get_course_by_id(course_id: str) -> dict | None:
    """Return a copy of the catalog course with the given id.

    Args:
        course_id: Course identifier (e.g. "1").

    Returns:
        The matching course dict, or None when no course has that id.
    """
    for course in COURSES:
        if course["id"] == course_id:
            return copy.deepcopy(course)
    return None
