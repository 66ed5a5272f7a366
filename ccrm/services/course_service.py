"""
Course and instructor registration service.
"""

from typing import List, Optional

from ..core.entities import Course, Instructor
from ..core.enums import Semester
from ..persistence.registry import DataStore


class CourseService:
    """Registers courses and instructors and answers catalogue lookups."""
    
    def __init__(self, data_store: DataStore):
        self._data_store = data_store
    
    def add_course(self, course: Course) -> Course:
        """Register a built course under its code (last write wins)."""
        self._data_store.courses.put(course.code, course)
        return course
    
    def find_by_code(self, code: str) -> Optional[Course]:
        """Find a course by code."""
        return self._data_store.courses.get(code)
    
    def list_all(self) -> List[Course]:
        """List all courses."""
        return self._data_store.courses.values()
    
    def deactivate(self, code: str) -> None:
        """Deactivate a course; unknown codes are ignored."""
        course = self._data_store.courses.get(code)
        if course is not None:
            course.deactivate()
    
    def add_instructor(self, instructor_id: str, full_name: str, email: str, department: str) -> Instructor:
        """Create and register an instructor."""
        instructor = Instructor(instructor_id, full_name, email, department)
        self._data_store.instructors.put(instructor_id, instructor)
        return instructor
    
    def find_instructor(self, instructor_id: str) -> Optional[Instructor]:
        return self._data_store.instructors.get(instructor_id)
    
    def list_instructors(self) -> List[Instructor]:
        return self._data_store.instructors.values()
    
    def courses_taught_by(self, instructor_id: str) -> List[Course]:
        """Scan the course registry for courses owned by an instructor."""
        return [course for course in self._data_store.courses.values()
                if course.instructor is not None and course.instructor.id == instructor_id]
    
    def search(self, department: Optional[str] = None, semester: Optional[Semester] = None,
               instructor_id: Optional[str] = None) -> List[Course]:
        """Filter courses by any combination of department, semester and instructor."""
        results = []
        for course in self._data_store.courses.values():
            if department is not None and course.department.lower() != department.lower():
                continue
            if semester is not None and course.semester is not semester:
                continue
            if instructor_id is not None and (course.instructor is None or course.instructor.id != instructor_id):
                continue
            results.append(course)
        return results
