from datetime import date

import pytest

from ccrm.core.enums import Grade, StudentStatus
from ccrm.core.exceptions import NotFoundError


class TestEnroll:
    def test_enroll_registers_on_student(self, enrollment_service, student, catalogue):
        enrollment = enrollment_service.enroll("stu-1", "CSE101")
        assert enrollment.student is student
        assert enrollment.course is catalogue["CSE101"]
        assert enrollment.grade is None
        assert enrollment.enrolled_on == date.today()
        assert student.get_enrollment("CSE101") is enrollment

    def test_enroll_does_not_touch_course(self, enrollment_service, student, catalogue):
        course = catalogue["CSE101"]
        before = (course.code, course.title, course.credits, course.instructor, course.active)
        enrollment_service.enroll("stu-1", "CSE101")
        assert (course.code, course.title, course.credits, course.instructor, course.active) == before

    @pytest.mark.parametrize("student_id, course_code", [
        ("ghost", "CSE101"),
        ("stu-1", "GHOST1"),
        ("ghost", "GHOST1"),
    ])
    def test_missing_side_raises_same_error(self, enrollment_service, student, catalogue,
                                            student_id, course_code):
        with pytest.raises(NotFoundError) as excinfo:
            enrollment_service.enroll(student_id, course_code)
        assert excinfo.value.error_code == "NOT_FOUND"
        assert student.enrollments == []

    def test_re_enroll_replaces_enrollment(self, enrollment_service, student, catalogue):
        first = enrollment_service.enroll("stu-1", "CSE101", enrolled_on=date(2024, 1, 10))
        enrollment_service.record_grade("stu-1", "CSE101", Grade.A)

        second = enrollment_service.enroll("stu-1", "CSE101")

        assert second is not first
        assert second.grade is None
        assert second.enrolled_on == date.today()
        assert student.get_enrollment("CSE101") is second
        assert len(student.enrollments) == 1

    def test_enroll_in_deactivated_course_is_allowed(self, enrollment_service, course_service,
                                                     student, catalogue):
        course_service.deactivate("CSE101")
        enrollment = enrollment_service.enroll("stu-1", "CSE101")
        enrollment_service.record_grade("stu-1", "CSE101", Grade.B)
        assert enrollment.grade is Grade.B


class TestUnenroll:
    def test_removes_enrollment(self, enrollment_service, student, catalogue):
        enrollment_service.enroll("stu-1", "CSE101")
        enrollment_service.unenroll("stu-1", "CSE101")
        assert student.get_enrollment("CSE101") is None

    def test_missing_pairs_are_noops(self, enrollment_service, student, catalogue):
        enrollment_service.enroll("stu-1", "CSE101")
        enrollment_service.unenroll("stu-1", "MAT101")
        enrollment_service.unenroll("ghost", "CSE101")
        assert [e.course.code for e in student.enrollments] == ["CSE101"]


class TestRecordGrade:
    @pytest.mark.parametrize("grade", list(Grade))
    def test_sets_grade_in_place(self, enrollment_service, student, catalogue, grade):
        enrollment = enrollment_service.enroll("stu-1", "CSE101")
        enrollment_service.record_grade("stu-1", "CSE101", grade)
        assert enrollment.grade is grade

    def test_missing_targets_are_noops(self, enrollment_service, student, catalogue):
        enrollment_service.record_grade("ghost", "CSE101", Grade.A)
        enrollment_service.record_grade("stu-1", "CSE101", Grade.A)
        assert student.enrollments == []

    def test_regrade_overwrites(self, enrollment_service, student, catalogue):
        enrollment = enrollment_service.enroll("stu-1", "CSE101")
        enrollment_service.record_grade("stu-1", "CSE101", Grade.C)
        enrollment_service.record_grade("stu-1", "CSE101", Grade.S)
        assert enrollment.grade is Grade.S


class TestDeactivationKeepsEnrollments:
    def test_deactivate_student_is_idempotent(self, student_service, enrollment_service, student, catalogue):
        enrollment = enrollment_service.enroll("stu-1", "CSE101")
        enrollment_service.record_grade("stu-1", "CSE101", Grade.A)

        student_service.deactivate("stu-1")
        student_service.deactivate("stu-1")

        assert student.status is StudentStatus.INACTIVE
        assert student.enrollments == [enrollment]
        assert enrollment.grade is Grade.A


class TestLookups:
    def test_enrollments_for_course(self, enrollment_service, student_service, student, catalogue):
        student_service.add_student("stu-2", "R2", "Other", "o@uni.edu")
        enrollment_service.enroll("stu-1", "CSE101")
        enrollment_service.enroll("stu-2", "CSE101")
        enrollment_service.enroll("stu-2", "MAT101")
        assert sorted(e.student.id for e in enrollment_service.enrollments_for_course("CSE101")) == ["stu-1", "stu-2"]
        assert enrollment_service.enrollments_for_course("NONE") == []

    def test_get_enrollment(self, enrollment_service, student, catalogue):
        enrollment = enrollment_service.enroll("stu-1", "CSE101")
        assert enrollment_service.get_enrollment("stu-1", "CSE101") is enrollment
        assert enrollment_service.get_enrollment("stu-1", "MAT101") is None
        assert enrollment_service.get_enrollment("ghost", "CSE101") is None
