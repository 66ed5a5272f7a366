"""
Menu-driven console for operators.
"""

import logging
import random
import uuid
from pathlib import Path
from typing import Callable, Optional

from .core.entities import CourseBuilder
from .core.enums import Grade, Semester
from .core.exceptions import CCRMException, InvalidGradeError

logger = logging.getLogger(__name__)

MAIN_MENU = """
=== CCRM Menu ===
1) Manage Students
2) Manage Courses
3) Enrollment & Grades
4) Import/Export/Backup
0) Exit"""


class ConsoleApp:
    """Interactive loop over a CCRMPlatform.

    Input and output are injectable so the menus can be driven by tests.
    """

    def __init__(self, platform, input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None):
        self._platform = platform
        self._input = input_func or input
        self._output = output_func or print

    def run(self) -> None:
        running = True
        while running:
            self._output(MAIN_MENU)
            try:
                choice = self._prompt("Choose: ")
            except EOFError:
                break
            if choice == "1":
                self.manage_students()
            elif choice == "2":
                self.manage_courses()
            elif choice == "3":
                self.manage_enrollment()
            elif choice == "4":
                self.manage_files()
            elif choice == "0":
                running = False
            else:
                self._output("Unknown option")
        self._output("Exiting CCRM. Goodbye!")

    def _prompt(self, text: str) -> str:
        return self._input(text).strip()

    # Students

    def manage_students(self) -> None:
        choice = self._prompt("Student Menu: 1=Add,2=List,3=Transcript,4=Deactivate,0=Back: ")
        students = self._platform.students
        if choice == "1":
            name = self._prompt("Full name: ")
            email = self._prompt("Email: ")
            student_id = str(uuid.uuid4())
            reg_no = f"R{random.randint(0, 9999):04d}"
            students.add_student(student_id, reg_no, name, email)
            self._output(f"Added: {name} (id {student_id})")
        elif choice == "2":
            for student in students.list_all():
                self._output(f"{student.id} | {student.profile()}")
        elif choice == "3":
            student = students.find_by_id(self._prompt("Student id: "))
            if student is None:
                self._output("Not found")
            else:
                self._output(self._platform.transcripts.transcript(student))
        elif choice == "4":
            students.deactivate(self._prompt("Student id: "))
            self._output("Deactivated if exists.")

    # Courses

    def manage_courses(self) -> None:
        choice = self._prompt("Course Menu: 1=Add,2=List,3=Deactivate,4=Instructors,0=Back: ")
        courses = self._platform.courses
        if choice == "1":
            self._add_course()
        elif choice == "2":
            for course in courses.list_all():
                status = "" if course.active else " (inactive)"
                self._output(f"{course}{status}")
        elif choice == "3":
            courses.deactivate(self._prompt("Course code: "))
            self._output("Deactivated if exists.")
        elif choice == "4":
            for instructor in courses.list_instructors():
                taught = ", ".join(c.code for c in courses.courses_taught_by(instructor.id)) or "-"
                self._output(f"{instructor.id} | {instructor.profile()} | Courses: {taught}")

    def _add_course(self) -> None:
        code = self._prompt("Course code: ")
        title = self._prompt("Title: ") or "Untitled"
        try:
            credits = int(self._prompt("Credits: ") or "3")
            semester_token = self._prompt("Semester (Spring/Summer/Fall, blank = Fall): ")
            semester = Semester.parse(semester_token) if semester_token else Semester.FALL
            department = self._prompt("Department (blank = General): ") or "General"
            instructor_id = self._prompt("Instructor id (blank = none): ")
            instructor = None
            if instructor_id:
                instructor = self._platform.courses.find_instructor(instructor_id)
                if instructor is None:
                    self._output("Instructor not found; course left unassigned.")
            course = CourseBuilder(code=code, title=title, credits=credits, instructor=instructor,
                                   semester=semester, department=department).build()
        except ValueError:
            self._output("Failed: credits must be a whole number")
            return
        except CCRMException as e:
            self._output(f"Failed: {e}")
            return
        self._platform.courses.add_course(course)
        self._output(f"Added: {course}")

    # Enrollment

    def manage_enrollment(self) -> None:
        choice = self._prompt("Enrollment Menu: 1=Enroll,2=Unenroll,3=RecordGrade,0=Back: ")
        enrollments = self._platform.enrollments
        if choice == "1":
            student_id = self._prompt("Student id: ")
            course_code = self._prompt("Course code: ")
            try:
                enrollments.enroll(student_id, course_code)
                self._output("Enrolled.")
            except CCRMException as e:
                self._output(f"Failed: {e}")
        elif choice == "2":
            student_id = self._prompt("Student id: ")
            course_code = self._prompt("Course code: ")
            enrollments.unenroll(student_id, course_code)
            self._output("Unenrolled (if existed).")
        elif choice == "3":
            student_id = self._prompt("Student id: ")
            course_code = self._prompt("Course code: ")
            token = self._prompt("Grade (S/A/B/C/D/E/F): ")
            try:
                grade = Grade.parse(token)
            except InvalidGradeError:
                self._output("Invalid grade")
                return
            enrollments.record_grade(student_id, course_code, grade)
            self._output("Recorded.")

    # Files

    def manage_files(self) -> None:
        choice = self._prompt("File Menu: 1=Export,2=Import,3=Backup,4=Data size,0=Back: ")
        config = self._platform.config
        try:
            if choice == "1":
                paths = self._platform.import_export.export_all(config.export_folder)
                self._output("Exported: " + ", ".join(str(p) for p in paths))
            elif choice == "2":
                answer = self._prompt(f"Folder (blank = {config.export_folder}): ")
                folder = Path(answer).expanduser() if answer else config.export_folder
                counts = self._platform.import_export.import_all(folder)
                self._output(f"Imported: {counts}")
            elif choice == "3":
                target = self._platform.backups.backup(config.export_folder)
                self._output(f"Backup created: {target}")
            elif choice == "4":
                size = self._platform.backups.directory_size(config.data_folder)
                self._output(f"Data folder size: {size} bytes")
        except CCRMException as e:
            logger.warning("File operation failed: %s", e)
            self._output(f"Failed: {e}")
