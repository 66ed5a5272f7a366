import pytest

from ccrm.config import AppConfig
from ccrm.core.entities import CourseBuilder
from ccrm.core.enums import Semester
from ccrm.main import CCRMPlatform
from ccrm.persistence.registry import DataStore
from ccrm.services import CourseService, EnrollmentService, StudentService, TranscriptService


@pytest.fixture
def data_store():
    return DataStore()


@pytest.fixture
def student_service(data_store):
    return StudentService(data_store)


@pytest.fixture
def course_service(data_store):
    return CourseService(data_store)


@pytest.fixture
def enrollment_service(data_store):
    return EnrollmentService(data_store)


@pytest.fixture
def transcript_service(data_store):
    return TranscriptService(data_store)


@pytest.fixture
def catalogue(course_service):
    """Two courses worth 4 and 3 credits plus an instructor on the first."""
    instructor = course_service.add_instructor("ins-1", "Dr. Alice", "alice@uni.edu", "CSE")
    cse = course_service.add_course(CourseBuilder(
        code="CSE101", title="Intro to CS", credits=4, instructor=instructor, department="CSE",
    ).build())
    mat = course_service.add_course(CourseBuilder(
        code="MAT101", title="Calculus", credits=3, semester=Semester.SPRING, department="Math",
    ).build())
    return {"instructor": instructor, "CSE101": cse, "MAT101": mat}


@pytest.fixture
def student(student_service):
    return student_service.add_student("stu-1", "R1001", "Bob Student", "bob@uni.edu")


@pytest.fixture
def config(tmp_path):
    return AppConfig(data_folder=tmp_path / "ccrm-data")


@pytest.fixture
def platform(config):
    return CCRMPlatform(config)


@pytest.fixture
def seeded_platform(platform):
    platform.seed_sample_data()
    return platform
