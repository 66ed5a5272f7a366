"""
Flat-file import and export of the registries.

Each entity kind has its own headerless CSV file. Imports write straight
into the registries with the same last-write-wins rule the services use.
"""

import csv
import logging
from datetime import date
from pathlib import Path
from typing import Dict, Iterator, List, Union

from ..core.entities import CourseBuilder, Enrollment, Instructor, Student
from ..core.enums import Grade, Semester
from ..core.exceptions import CCRMException, PersistenceError
from .registry import DataStore

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

STUDENTS_FILE = "students.csv"
INSTRUCTORS_FILE = "instructors.csv"
COURSES_FILE = "courses.csv"
ENROLLMENTS_FILE = "enrollments.csv"


class ImportExportService:
    """Reads and writes students, instructors, courses and enrollments as CSV."""
    
    def __init__(self, data_store: DataStore):
        self._data_store = data_store
    
    # Students
    
    def export_students(self, path: PathLike) -> int:
        rows = [[s.id, s.reg_no, s.full_name, s.email, s.status.value]
                for s in self._data_store.students.values()]
        self._write_rows(path, rows)
        logger.info("Exported %d students to %s", len(rows), path)
        return len(rows)
    
    def import_students(self, path: PathLike) -> int:
        """Load students; rows need at least id, reg_no, full_name, email."""
        count = 0
        for row in self._read_rows(path):
            if len(row) < 4:
                logger.warning("Skipping short student row in %s: %r", path, row)
                continue
            student = Student(row[0], row[1], row[2], row[3])
            if len(row) > 4 and row[4].strip().upper() == "INACTIVE":
                student.deactivate()
            self._data_store.students.put(student.id, student)
            count += 1
        logger.info("Imported %d students from %s", count, path)
        return count
    
    # Instructors
    
    def export_instructors(self, path: PathLike) -> int:
        rows = [[i.id, i.full_name, i.email, i.department]
                for i in self._data_store.instructors.values()]
        self._write_rows(path, rows)
        logger.info("Exported %d instructors to %s", len(rows), path)
        return len(rows)
    
    def import_instructors(self, path: PathLike) -> int:
        """Load instructors; rows need id, full_name, email, department."""
        count = 0
        for row in self._read_rows(path):
            if len(row) < 4:
                logger.warning("Skipping short instructor row in %s: %r", path, row)
                continue
            instructor = Instructor(row[0], row[1], row[2], row[3])
            self._data_store.instructors.put(instructor.id, instructor)
            count += 1
        logger.info("Imported %d instructors from %s", count, path)
        return count
    
    # Courses
    
    def export_courses(self, path: PathLike) -> int:
        rows = []
        for course in self._data_store.courses.values():
            rows.append([
                course.code,
                course.title,
                str(course.credits),
                course.semester.name,
                course.department,
                course.instructor.id if course.instructor else "",
                "true" if course.active else "false",
            ])
        self._write_rows(path, rows)
        logger.info("Exported %d courses to %s", len(rows), path)
        return len(rows)
    
    def import_courses(self, path: PathLike) -> int:
        """Load courses; unknown instructor ids import as unassigned."""
        count = 0
        for row in self._read_rows(path):
            if len(row) < 5:
                logger.warning("Skipping short course row in %s: %r", path, row)
                continue
            instructor = None
            if len(row) > 5 and row[5]:
                instructor = self._data_store.instructors.get(row[5])
                if instructor is None:
                    logger.warning("Unknown instructor %s for course %s", row[5], row[0])
            try:
                course = CourseBuilder(
                    code=row[0],
                    title=row[1],
                    credits=int(row[2]),
                    instructor=instructor,
                    semester=Semester.parse(row[3]),
                    department=row[4],
                ).build()
            except (ValueError, CCRMException) as e:
                logger.warning("Skipping invalid course row in %s: %r (%s)", path, row, e)
                continue
            if len(row) > 6 and row[6].strip().lower() == "false":
                course.deactivate()
            self._data_store.courses.put(course.code, course)
            count += 1
        logger.info("Imported %d courses from %s", count, path)
        return count
    
    # Enrollments
    
    def export_enrollments(self, path: PathLike) -> int:
        rows = []
        for student in self._data_store.students.values():
            for enrollment in student.enrollments:
                rows.append([
                    student.id,
                    enrollment.course.code,
                    enrollment.enrolled_on.isoformat(),
                    enrollment.grade.value if enrollment.grade else "",
                ])
        self._write_rows(path, rows)
        logger.info("Exported %d enrollments to %s", len(rows), path)
        return len(rows)
    
    def import_enrollments(self, path: PathLike) -> int:
        """Load enrollments; rows naming unknown students or courses are skipped."""
        count = 0
        for row in self._read_rows(path):
            if len(row) < 2:
                continue
            student = self._data_store.students.get(row[0])
            course = self._data_store.courses.get(row[1])
            if student is None or course is None:
                logger.warning("Skipping enrollment for unknown student/course: %r", row)
                continue
            try:
                enrolled_on = date.fromisoformat(row[2]) if len(row) > 2 and row[2] else None
                grade = Grade.parse(row[3]) if len(row) > 3 and row[3] else None
            except (ValueError, CCRMException) as e:
                logger.warning("Skipping invalid enrollment row %r (%s)", row, e)
                continue
            enrollment = Enrollment(student, course, enrolled_on)
            if grade is not None:
                enrollment.set_grade(grade)
            student.enroll(enrollment)
            count += 1
        logger.info("Imported %d enrollments from %s", count, path)
        return count
    
    # Folders
    
    def export_all(self, folder: PathLike) -> List[Path]:
        """Export every registry into folder and return the written files."""
        folder = Path(folder)
        paths = []
        for name, exporter in self._exporters():
            path = folder / name
            exporter(path)
            paths.append(path)
        return paths
    
    def import_all(self, folder: PathLike, replace: bool = False) -> Dict[str, int]:
        """Import whichever export files exist in folder.

        Instructors load before courses and courses before enrollments, so
        references resolve. With replace=True the registries are emptied first.
        """
        folder = Path(folder)
        if replace:
            self._data_store.clear()
            logger.info("Cleared registries before import from %s", folder)
        counts = {}
        for name, loader in ((STUDENTS_FILE, self.import_students),
                             (INSTRUCTORS_FILE, self.import_instructors),
                             (COURSES_FILE, self.import_courses),
                             (ENROLLMENTS_FILE, self.import_enrollments)):
            path = folder / name
            counts[name] = loader(path) if path.exists() else 0
        return counts
    
    def _exporters(self):
        return ((STUDENTS_FILE, self.export_students),
                (INSTRUCTORS_FILE, self.export_instructors),
                (COURSES_FILE, self.export_courses),
                (ENROLLMENTS_FILE, self.export_enrollments))
    
    def _write_rows(self, path: PathLike, rows: List[List[str]]) -> None:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', newline='', encoding='utf-8') as f:
                csv.writer(f).writerows(rows)
        except OSError as e:
            raise PersistenceError(f"Failed to write {path}: {e}", error_code="EXPORT_FAILED")
    
    def _read_rows(self, path: PathLike) -> Iterator[List[str]]:
        path = Path(path)
        try:
            with open(path, 'r', newline='', encoding='utf-8') as f:
                rows = [row for row in csv.reader(f) if row]
        except OSError as e:
            raise PersistenceError(f"Failed to read {path}: {e}", error_code="IMPORT_FAILED")
        return iter(rows)
