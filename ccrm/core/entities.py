"""
Core entities for the CCRM platform.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional

from .enums import Grade, Semester, StudentStatus
from .exceptions import ValidationError


class Person(ABC):
    """Abstract base class for all persons known to the institution."""

    def __init__(self, person_id: str, full_name: str, email: str):
        self._id = person_id
        self._full_name = full_name
        self._email = email
        self._created_at = date.today()

    @property
    def id(self) -> str:
        """Get the person ID."""
        return self._id

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def email(self) -> str:
        return self._email

    @property
    def created_at(self) -> date:
        """Get creation date."""
        return self._created_at

    @abstractmethod
    def profile(self) -> str:
        """One-line human readable profile."""
        pass

    def __str__(self) -> str:
        return f"{self._full_name} ({self._id}) <{self._email}>"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"


class Student(Person):
    """Student entity owning its enrollments, keyed by course code."""

    def __init__(self, person_id: str, reg_no: str, full_name: str, email: str):
        super().__init__(person_id, full_name, email)
        self._reg_no = reg_no
        self._status = StudentStatus.ACTIVE
        self._enrollments: Dict[str, "Enrollment"] = {}
        # Placeholder, not user supplied.
        created = self._created_at
        try:
            self._date_of_birth = created.replace(year=created.year - 18)
        except ValueError:
            self._date_of_birth = created.replace(year=created.year - 18, day=28)

    @property
    def reg_no(self) -> str:
        return self._reg_no

    @property
    def status(self) -> StudentStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        return self._status is StudentStatus.ACTIVE

    @property
    def date_of_birth(self) -> date:
        return self._date_of_birth

    def deactivate(self) -> None:
        """Move the student to INACTIVE. Enrollments are left untouched."""
        self._status = StudentStatus.INACTIVE

    @property
    def enrollments(self) -> List["Enrollment"]:
        """Current enrollments as a list copy."""
        return list(self._enrollments.values())

    def get_enrollment(self, course_code: str) -> Optional["Enrollment"]:
        """Get the enrollment for a course code, if any."""
        return self._enrollments.get(course_code)

    def enroll(self, enrollment: "Enrollment") -> None:
        """Register an enrollment, replacing any prior one for the same course."""
        self._enrollments[enrollment.course.code] = enrollment

    def unenroll(self, course_code: str) -> None:
        """Drop the enrollment for a course code if present."""
        self._enrollments.pop(course_code, None)

    def profile(self) -> str:
        return f"Student: {self._full_name} | RegNo: {self._reg_no} | Status: {self._status.value}"


class Instructor(Person):
    """Instructor entity with a free-text department."""

    def __init__(self, person_id: str, full_name: str, email: str, department: str):
        super().__init__(person_id, full_name, email)
        self._department = department

    @property
    def department(self) -> str:
        return self._department

    def profile(self) -> str:
        return f"Instructor: {self._full_name} | Dept: {self._department}"


class Course:
    """Course entity. The code is fixed at construction and is its registry key."""

    def __init__(self, code: str, title: str, credits: int, instructor: Optional[Instructor],
                 semester: Semester, department: str):
        self._code = code
        self._title = title
        self._credits = credits
        self._instructor = instructor
        self._semester = semester
        self._department = department
        self._active = True

    @property
    def code(self) -> str:
        return self._code

    @property
    def title(self) -> str:
        return self._title

    @property
    def credits(self) -> int:
        return self._credits

    @property
    def instructor(self) -> Optional[Instructor]:
        return self._instructor

    @property
    def semester(self) -> Semester:
        return self._semester

    @property
    def department(self) -> str:
        return self._department

    @property
    def active(self) -> bool:
        return self._active

    def deactivate(self) -> None:
        """One-way deactivation. Existing enrollments stay valid."""
        self._active = False

    def __str__(self) -> str:
        return f"{self._code}: {self._title} ({self._credits} credits) [{self._semester}] - {self._department}"

    def __repr__(self) -> str:
        return f"Course(code={self._code})"


@dataclass
class CourseBuilder:
    """Named-field recipe for a Course with the institution's defaults."""
    code: str
    title: str = "Untitled"
    credits: int = 3
    instructor: Optional[Instructor] = None
    semester: Semester = Semester.FALL
    department: str = "General"

    def build(self) -> Course:
        """Validate the fields and produce the Course."""
        if not self.code or not self.code.strip():
            raise ValidationError("Course code is required", error_code="MISSING_CODE")
        if isinstance(self.credits, bool) or not isinstance(self.credits, int) or self.credits <= 0:
            raise ValidationError(
                f"Credits must be a positive integer, got {self.credits!r}",
                error_code="INVALID_CREDITS",
            )
        return Course(
            code=self.code.strip(),
            title=self.title,
            credits=self.credits,
            instructor=self.instructor,
            semester=self.semester,
            department=self.department,
        )


class Enrollment:
    """Links one student to one course. Owned by the student."""

    def __init__(self, student: Student, course: Course, enrolled_on: Optional[date] = None):
        self._student = student
        self._course = course
        self._enrolled_on = enrolled_on or date.today()
        self._grade: Optional[Grade] = None

    @property
    def student(self) -> Student:
        return self._student

    @property
    def course(self) -> Course:
        return self._course

    @property
    def enrolled_on(self) -> date:
        return self._enrolled_on

    @property
    def grade(self) -> Optional[Grade]:
        return self._grade

    @property
    def is_graded(self) -> bool:
        return self._grade is not None

    def set_grade(self, grade: Grade) -> None:
        """Set or replace the grade."""
        self._grade = grade

    def __str__(self) -> str:
        grade = self._grade.value if self._grade else "N/A"
        return (f"{self._course.code} | {self._course.title} | "
                f"Enrolled: {self._enrolled_on.isoformat()} | Grade: {grade}")
