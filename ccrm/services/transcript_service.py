"""
Reporting over student enrollments: transcripts, GPA and summaries.
"""

from collections import Counter
from typing import Dict, List, Tuple

from ..core.entities import Student
from ..core.enums import Grade
from ..core.transcript import compute_gpa, render_transcript
from ..persistence.registry import DataStore


class TranscriptService:
    """Read-only reports. Nothing here mutates the registries."""
    
    def __init__(self, data_store: DataStore):
        self._data_store = data_store
    
    def transcript(self, student: Student) -> str:
        """Formatted transcript including the embedded GPA."""
        return render_transcript(student)
    
    def gpa(self, student: Student) -> float:
        return compute_gpa(student.enrollments)
    
    def top_students(self, limit: int = 5) -> List[Tuple[Student, float]]:
        """Students ordered by GPA descending, ties broken by id."""
        ranked = [(student, compute_gpa(student.enrollments))
                  for student in self._data_store.students.values()]
        ranked.sort(key=lambda pair: (-pair[1], pair[0].id))
        return ranked[:max(limit, 0)]
    
    def gpa_distribution(self) -> Dict[str, int]:
        """Count of each grade letter across all graded enrollments."""
        counts: Counter = Counter()
        for student in self._data_store.students.values():
            for enrollment in student.enrollments:
                if enrollment.grade is not None:
                    counts[enrollment.grade.value] += 1
        return {grade.value: counts.get(grade.value, 0) for grade in Grade}
