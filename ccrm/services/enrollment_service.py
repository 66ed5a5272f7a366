"""
Enrollment and grading service.

This is where the cross-entity rules live: enrolling requires both the
student and the course to exist, while dropping and grading quietly do
nothing when their target is missing.
"""

from datetime import date
from typing import List, Optional

from ..core.entities import Enrollment
from ..core.enums import Grade
from ..core.exceptions import NotFoundError
from ..persistence.registry import DataStore


class EnrollmentService:
    """Service for enrolling students in courses and recording grades."""
    
    def __init__(self, data_store: DataStore):
        self._data_store = data_store
    
    def enroll(self, student_id: str, course_code: str, enrolled_on: Optional[date] = None) -> Enrollment:
        """Enroll a student in a course.

        Raises NotFoundError when either side is unknown. An existing
        enrollment for the same course is replaced by the new one.
        """
        student = self._data_store.students.get(student_id)
        course = self._data_store.courses.get(course_code)
        if student is None or course is None:
            raise NotFoundError(
                "Student or Course not found",
                error_code="NOT_FOUND",
                details={'student_id': student_id, 'course_code': course_code},
            )
        
        enrollment = Enrollment(student, course, enrolled_on)
        student.enroll(enrollment)
        return enrollment
    
    def unenroll(self, student_id: str, course_code: str) -> None:
        """Drop a student from a course if both the student and the enrollment exist."""
        student = self._data_store.students.get(student_id)
        if student is not None:
            student.unenroll(course_code)
    
    def record_grade(self, student_id: str, course_code: str, grade: Grade) -> None:
        """Set the grade on an existing enrollment in place."""
        student = self._data_store.students.get(student_id)
        if student is None:
            return
        enrollment = student.get_enrollment(course_code)
        if enrollment is not None:
            enrollment.set_grade(grade)
    
    def get_enrollment(self, student_id: str, course_code: str) -> Optional[Enrollment]:
        student = self._data_store.students.get(student_id)
        if student is None:
            return None
        return student.get_enrollment(course_code)
    
    def enrollments_for_course(self, course_code: str) -> List[Enrollment]:
        """Scan every student for enrollments in a course."""
        results = []
        for student in self._data_store.students.values():
            enrollment = student.get_enrollment(course_code)
            if enrollment is not None:
                results.append(enrollment)
        return results
