import pytest

from ccrm.cli import ConsoleApp
from ccrm.core.enums import Grade, StudentStatus
from ccrm.main import CCRMPlatform


def run_console(platform, *answers):
    """Drive the console with scripted answers and return everything it printed."""
    inputs = iter(answers)
    output = []
    ConsoleApp(platform, input_func=lambda prompt: next(inputs), output_func=output.append).run()
    return "\n".join(output)


class TestMainMenu:
    def test_exit(self, platform):
        assert run_console(platform, "0").endswith("Exiting CCRM. Goodbye!")

    def test_unknown_option(self, platform):
        assert "Unknown option" in run_console(platform, "9", "0")

    def test_end_of_input_exits(self, platform):
        def closed(prompt):
            raise EOFError
        output = []
        ConsoleApp(platform, input_func=closed, output_func=output.append).run()
        assert output[-1] == "Exiting CCRM. Goodbye!"


class TestStudentMenu:
    def test_add_student(self, platform):
        output = run_console(platform, "1", "1", "Ann Lee", "ann@uni.edu", "0")
        students = platform.students.list_all()
        assert len(students) == 1
        assert students[0].full_name == "Ann Lee"
        assert students[0].reg_no.startswith("R") and len(students[0].reg_no) == 5
        assert "Added: Ann Lee" in output

    def test_transcript_and_deactivate(self, seeded_platform):
        seeded_platform.enrollments.enroll("stu-1", "CSE101")
        output = run_console(seeded_platform, "1", "3", "stu-1", "1", "4", "stu-1", "1", "3", "ghost", "0")
        assert "CSE101 | Intro to CS" in output
        assert "GPA: 0.00" in output
        assert "Not found" in output
        assert seeded_platform.students.find_by_id("stu-1").status is StudentStatus.INACTIVE


class TestCourseMenu:
    def test_add_course_with_defaults(self, platform):
        run_console(platform, "2", "1", "PHY101", "", "", "", "", "", "0")
        course = platform.courses.find_by_code("PHY101")
        assert course.title == "Untitled"
        assert course.credits == 3
        assert course.department == "General"

    def test_add_course_rejects_bad_credits(self, platform):
        output = run_console(platform, "2", "1", "PHY101", "Physics", "lots", "0")
        assert "Failed: credits must be a whole number" in output
        assert platform.courses.find_by_code("PHY101") is None

    def test_list_instructors(self, seeded_platform):
        output = run_console(seeded_platform, "2", "4", "0")
        assert "Instructor: Dr. Alice | Dept: CSE | Courses: CSE101" in output


class TestEnrollmentMenu:
    def test_enroll_grade_unenroll(self, seeded_platform):
        output = run_console(
            seeded_platform,
            "3", "1", "stu-1", "CSE101",
            "3", "3", "stu-1", "CSE101", "a",
            "0",
        )
        assert "Enrolled." in output
        assert "Recorded." in output
        student = seeded_platform.students.find_by_id("stu-1")
        assert student.get_enrollment("CSE101").grade is Grade.A

        run_console(seeded_platform, "3", "2", "stu-1", "CSE101", "0")
        assert student.get_enrollment("CSE101") is None

    @pytest.mark.parametrize("student_id, course_code", [("ghost", "CSE101"), ("stu-1", "NOPE")])
    def test_enroll_failure_is_reported(self, seeded_platform, student_id, course_code):
        output = run_console(seeded_platform, "3", "1", student_id, course_code, "0")
        assert "Failed: Student or Course not found" in output

    def test_invalid_grade(self, seeded_platform):
        seeded_platform.enrollments.enroll("stu-1", "CSE101")
        output = run_console(seeded_platform, "3", "3", "stu-1", "CSE101", "Q", "0")
        assert "Invalid grade" in output
        assert seeded_platform.students.find_by_id("stu-1").get_enrollment("CSE101").grade is None


class TestFileMenu:
    def test_export_backup_and_size(self, seeded_platform):
        output = run_console(seeded_platform, "4", "1", "4", "3", "4", "4", "0")
        config = seeded_platform.config
        assert (config.export_folder / "students.csv").exists()
        assert "Backup created:" in output
        assert len(list(config.backup_root.iterdir())) == 1
        assert "Data folder size:" in output

    def test_backup_without_exports_fails_softly(self, platform):
        output = run_console(platform, "4", "3", "0")
        assert "Failed: Backup source does not exist" in output

    def test_import_expands_home_folder(self, seeded_platform, tmp_path, monkeypatch):
        home = tmp_path / "home"
        seeded_platform.import_export.export_all(home / "exports")
        monkeypatch.setenv("HOME", str(home))
        fresh = CCRMPlatform(seeded_platform.config)
        output = run_console(fresh, "4", "2", "~/exports", "0")
        assert "'students.csv': 1" in output
        assert fresh.courses.find_by_code("CSE101").instructor.id == "ins-1"
