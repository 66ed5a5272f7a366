"""
Student registration service.
"""

from typing import List, Optional

from ..core.entities import Student
from ..persistence.registry import DataStore


class StudentService:
    """Creates, finds, lists and deactivates students."""
    
    def __init__(self, data_store: DataStore):
        self._data_store = data_store
    
    def add_student(self, student_id: str, reg_no: str, full_name: str, email: str) -> Student:
        """Create an ACTIVE student and register it under student_id.

        A second call with the same id replaces the first student.
        """
        student = Student(student_id, reg_no, full_name, email)
        self._data_store.students.put(student_id, student)
        return student
    
    def find_by_id(self, student_id: str) -> Optional[Student]:
        """Find a student by ID."""
        return self._data_store.students.get(student_id)
    
    def list_all(self) -> List[Student]:
        """List all students."""
        return self._data_store.students.values()
    
    def deactivate(self, student_id: str) -> None:
        """Deactivate a student; unknown ids are ignored."""
        student = self._data_store.students.get(student_id)
        if student is not None:
            student.deactivate()
