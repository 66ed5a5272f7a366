"""
Transcript rendering and GPA computation.

Everything here is read-only: it walks the student's live enrollment
mapping on every call and never caches or mutates.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List

from .entities import Enrollment, Student


def compute_gpa(enrollments: Iterable[Enrollment]) -> float:
    """Credit-weighted grade point average over graded enrollments.

    Ungraded enrollments add nothing to either side of the ratio. With no
    graded enrollment at all the GPA is 0.0.
    """
    total_points = 0
    total_credits = 0
    for enrollment in enrollments:
        if not enrollment.is_graded:
            continue
        credits = enrollment.course.credits
        total_points += enrollment.grade.points * credits
        total_credits += credits
    if total_credits == 0:
        return 0.0
    average = Decimal(total_points) / Decimal(total_credits)
    # Half-up, so 7.125 reads 7.13.
    return float(average.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def transcript_lines(student: Student) -> List[str]:
    lines = [student.profile()]
    enrollments = student.enrollments
    lines.extend(str(enrollment) for enrollment in enrollments)
    lines.append(f"GPA: {compute_gpa(enrollments):.2f}")
    return lines


def render_transcript(student: Student) -> str:
    """Profile line, one line per enrollment, then the GPA line."""
    return "\n".join(transcript_lines(student))
