"""
Core module containing the entity model, enumerations and GPA computation.
"""

from .entities import *
from .interfaces import *
from .exceptions import *
from .enums import *
from .transcript import compute_gpa, render_transcript

__all__ = [
    # Entities
    "Person",
    "Student",
    "Instructor",
    "Course",
    "CourseBuilder",
    "Enrollment",
    
    # Interfaces
    "Repository",
    
    # Enums
    "Grade",
    "GRADE_POINTS",
    "Semester",
    "StudentStatus",
    
    # Exceptions
    "CCRMException",
    "NotFoundError",
    "InvalidGradeError",
    "ValidationError",
    "PersistenceError",
    "ConfigurationError",
    
    # Transcript
    "compute_gpa",
    "render_transcript",
]
