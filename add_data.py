"""
Script to add sample data to the CCRM platform via the REST API.
Make sure the server is running before executing this script.

Usage:
    python -m ccrm.main --serve --no-seed
    python add_data.py
"""

import os
import sys
from typing import Any, Dict, List

from ccrm.api.client import CCRMClient, CCRMClientError


def _console_supports_utf8() -> bool:
    enc = getattr(sys.stdout, "encoding", None)
    return enc is not None and "utf" in enc.lower()


_OK_CHAR = "✓" if _console_supports_utf8() else "[OK]"
_FAIL_CHAR = "✗" if _console_supports_utf8() else "[FAIL]"


INSTRUCTORS = [
    ("ins-1", "Dr. Alice Reed", "alice.reed@university.edu", "Computer Science"),
    ("ins-2", "Dr. Omar Haddad", "omar.haddad@university.edu", "Mathematics"),
]

COURSES = [
    {"code": "CS101", "title": "Introduction to Programming", "credits": 4,
     "department": "Computer Science", "semester": "FALL", "instructor_id": "ins-1"},
    {"code": "CS201", "title": "Data Structures", "credits": 4,
     "department": "Computer Science", "semester": "SPRING", "instructor_id": "ins-1"},
    {"code": "MATH101", "title": "Calculus I", "credits": 3,
     "department": "Mathematics", "semester": "FALL", "instructor_id": "ins-2"},
    {"code": "ENG101", "title": "English Composition", "credits": 2,
     "department": "English", "semester": "SUMMER"},
]

STUDENTS = [
    ("S001", "R1001", "Alice Johnson", "alice.johnson@university.edu"),
    ("S002", "R1002", "Bob Smith", "bob.smith@university.edu"),
    ("S003", "R1003", "Carol Davis", "carol.davis@university.edu"),
]

# (student id, course code, grade or None)
ENROLLMENTS = [
    ("S001", "CS101", "A"),
    ("S001", "MATH101", "B"),
    ("S002", "CS101", "S"),
    ("S002", "ENG101", None),
    ("S003", "CS201", "C"),
]


def seed(client: CCRMClient) -> Dict[str, int]:
    """Push the sample records through the API and return per-kind counts."""
    counts = {"instructors": 0, "courses": 0, "students": 0, "enrollments": 0, "grades": 0, "failures": 0}

    def attempt(kind: str, label: str, call, *args, **kwargs) -> bool:
        try:
            call(*args, **kwargs)
        except CCRMClientError as e:
            print(f"{_FAIL_CHAR} Failed to create {label}: {e}")
            counts["failures"] += 1
            return False
        print(f"{_OK_CHAR} Created {label}")
        counts[kind] += 1
        return True

    print("Creating instructors...")
    for instructor in INSTRUCTORS:
        attempt("instructors", f"instructor {instructor[0]}", client.add_instructor, *instructor)

    print("\nCreating courses...")
    for course in COURSES:
        fields = dict(course)
        code = fields.pop("code")
        attempt("courses", f"course {code}", client.add_course, code, **fields)

    print("\nCreating students...")
    for student in STUDENTS:
        attempt("students", f"student {student[0]}", client.add_student, *student)

    print("\nEnrolling students...")
    for student_id, course_code, grade in ENROLLMENTS:
        if attempt("enrollments", f"enrollment {student_id} -> {course_code}",
                   client.enroll, student_id, course_code) and grade:
            attempt("grades", f"grade {grade} for {student_id} in {course_code}",
                    client.record_grade, student_id, course_code, grade)

    return counts


def print_transcripts(client: CCRMClient, students: List[Dict[str, Any]]) -> None:
    for student in students:
        print(f"\n{'=' * 60}")
        print(client.transcript(student["id"])["text"])


def main() -> int:
    """Main execution."""
    client = CCRMClient(os.environ.get("CCRM_BASE_URL", "http://127.0.0.1:8000"))
    print("=" * 60)
    print("CCRM - Data Addition Script")
    print("=" * 60)

    if not client.is_healthy():
        print(f"{_FAIL_CHAR} Server is not running at {client.base_url}!")
        print("\nPlease start the server first:")
        print("  python -m ccrm.main --serve --no-seed")
        return 1

    counts = seed(client)
    print_transcripts(client, client.list_students())

    print("\n" + "=" * 60)
    print(f"{_OK_CHAR} Sample data added: {counts}")
    print(f"  - View API docs: {client.base_url}/docs")
    return 0 if counts["failures"] == 0 else 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print(f"\n\n{_FAIL_CHAR} Interrupted by user")
        sys.exit(1)
