"""
Services module containing registration, enrollment and reporting services.
"""

from .student_service import StudentService
from .course_service import CourseService
from .enrollment_service import EnrollmentService
from .transcript_service import TranscriptService

__all__ = [
    "StudentService",
    "CourseService",
    "EnrollmentService",
    "TranscriptService",
]
