from ccrm.core.entities import CourseBuilder
from ccrm.core.enums import Semester, StudentStatus


class TestStudentService:
    def test_add_and_find(self, student_service):
        student = student_service.add_student("stu-1", "R1001", "Bob Student", "bob@uni.edu")
        assert student.status is StudentStatus.ACTIVE
        assert student_service.find_by_id("stu-1") is student

    def test_find_absent(self, student_service):
        assert student_service.find_by_id("nobody") is None

    def test_duplicate_id_replaces_student(self, student_service):
        student_service.add_student("stu-1", "R1001", "Bob Student", "bob@uni.edu")
        replacement = student_service.add_student("stu-1", "R2002", "Other", "other@uni.edu")
        assert student_service.find_by_id("stu-1") is replacement
        assert len(student_service.list_all()) == 1

    def test_list_all(self, student_service):
        student_service.add_student("stu-1", "R1", "A", "a@uni.edu")
        student_service.add_student("stu-2", "R2", "B", "b@uni.edu")
        assert sorted(s.id for s in student_service.list_all()) == ["stu-1", "stu-2"]

    def test_deactivate_absent_is_noop(self, student_service):
        student_service.deactivate("nobody")
        assert student_service.list_all() == []


class TestCourseService:
    def test_add_and_find_by_code(self, course_service):
        course = course_service.add_course(CourseBuilder(code="CSE101").build())
        assert course_service.find_by_code("CSE101") is course
        assert course_service.find_by_code("NOPE") is None
        assert course_service.list_all() == [course]

    def test_deactivate(self, course_service, catalogue):
        course_service.deactivate("CSE101")
        course_service.deactivate("NOPE")
        assert not catalogue["CSE101"].active
        assert catalogue["MAT101"].active

    def test_instructors(self, course_service, catalogue):
        assert course_service.find_instructor("ins-1") is catalogue["instructor"]
        assert course_service.list_instructors() == [catalogue["instructor"]]
        assert course_service.courses_taught_by("ins-1") == [catalogue["CSE101"]]
        assert course_service.courses_taught_by("ins-9") == []

    def test_search(self, course_service, catalogue):
        assert course_service.search(department="math") == [catalogue["MAT101"]]
        assert course_service.search(semester=Semester.FALL) == [catalogue["CSE101"]]
        assert course_service.search(instructor_id="ins-1", semester=Semester.SPRING) == []
        assert len(course_service.search()) == 2
