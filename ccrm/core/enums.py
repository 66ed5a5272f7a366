"""
Enumerations and constants for the CCRM platform.
"""

from enum import Enum
from typing import Dict

from .exceptions import InvalidGradeError, ValidationError


class StudentStatus(Enum):
    """Lifecycle status of a student. INACTIVE is terminal."""
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class Grade(Enum):
    """Letter grades on the institution's ten-point scale."""
    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"

    @property
    def points(self) -> int:
        """Grade points used for GPA weighting."""
        return GRADE_POINTS[self]

    @classmethod
    def parse(cls, token: str) -> "Grade":
        """Parse a free-text grade letter such as ``" a "``."""
        letter = (token or "").strip().upper()
        try:
            return cls(letter)
        except ValueError:
            raise InvalidGradeError(
                f"Invalid grade: {token!r}",
                error_code="INVALID_GRADE",
                details={"allowed": [g.value for g in cls]},
            )

    def __str__(self) -> str:
        return self.value


GRADE_POINTS: Dict[Grade, int] = {
    Grade.S: 10,
    Grade.A: 9,
    Grade.B: 8,
    Grade.C: 7,
    Grade.D: 6,
    Grade.E: 5,
    Grade.F: 0,
}


class Semester(Enum):
    """Academic terms, valued by their display label."""
    SPRING = "Spring"
    SUMMER = "Summer"
    FALL = "Fall"

    @property
    def display(self) -> str:
        return self.value

    @classmethod
    def parse(cls, token: str) -> "Semester":
        """Accept either the member name or the display label."""
        cleaned = (token or "").strip().upper()
        for semester in cls:
            if cleaned in (semester.name, semester.value.upper()):
                return semester
        raise ValidationError(f"Unknown semester: {token!r}", error_code="INVALID_SEMESTER")

    def __str__(self) -> str:
        return self.value
