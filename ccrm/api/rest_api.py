"""
REST API implementation for the CCRM platform using FastAPI.
"""

import logging
import threading
from datetime import date, datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..core.entities import Course, CourseBuilder, Enrollment, Instructor, Student
from ..core.enums import Grade, Semester
from ..core.exceptions import InvalidGradeError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


# Pydantic models for API
class StudentCreate(BaseModel):
    id: str = Field(..., min_length=1, max_length=64)
    reg_no: str = Field(..., min_length=1, max_length=20)
    full_name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., pattern=r'^[^@]+@[^@]+\.[^@]+$')


class StudentResponse(BaseModel):
    id: str
    reg_no: str
    full_name: str
    email: str
    status: str
    created_at: date
    enrollments: List[str] = []


class InstructorCreate(BaseModel):
    id: str = Field(..., min_length=1, max_length=64)
    full_name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., pattern=r'^[^@]+@[^@]+\.[^@]+$')
    department: str = Field(..., min_length=1, max_length=100)


class InstructorResponse(BaseModel):
    id: str
    full_name: str
    email: str
    department: str
    courses: List[str] = []


class CourseCreate(BaseModel):
    code: str
    title: str = Field("Untitled", min_length=1, max_length=200)
    credits: int = 3
    instructor_id: Optional[str] = None
    semester: str = "FALL"
    department: str = Field("General", min_length=1, max_length=100)


class CourseResponse(BaseModel):
    code: str
    title: str
    credits: int
    instructor_id: Optional[str] = None
    semester: str
    department: str
    active: bool


class EnrollmentRequest(BaseModel):
    student_id: str = Field(..., min_length=1)
    course_code: str = Field(..., min_length=1)


class EnrollmentResponse(BaseModel):
    student_id: str
    course_code: str
    course_title: str
    enrolled_on: date
    grade: Optional[str] = None


class GradeRequest(BaseModel):
    grade: str


class TranscriptResponse(BaseModel):
    student_id: str
    gpa: float
    enrollments: List[EnrollmentResponse]
    text: str


class RankingEntry(BaseModel):
    student_id: str
    full_name: str
    gpa: float


class CCRMRestAPI:
    """REST API over the services of one CCRMPlatform."""

    def __init__(self, platform):
        self._platform = platform
        self._lock = threading.RLock()

        self.app = FastAPI(
            title="CCRM API",
            description="Campus Course & Records Manager",
            version=__version__,
            docs_url="/docs",
            redoc_url="/redoc"
        )

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        self._setup_routes()

    def _setup_routes(self):
        """Setup API routes."""
        platform = self._platform

        @self.app.exception_handler(RequestValidationError)
        async def request_validation_error(request: Request, exc: RequestValidationError):
            """Report request validation failures as 400."""
            return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST,
                                content={"detail": jsonable_encoder(exc.errors())})

        @self.app.get("/health", response_model=Dict[str, str])
        async def health_check():
            """Health check endpoint."""
            return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

        # Student endpoints
        @self.app.post("/students", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
        async def create_student(student_data: StudentCreate):
            """Create (or replace) a student."""
            with self._lock:
                student = platform.students.add_student(
                    student_data.id, student_data.reg_no, student_data.full_name, student_data.email
                )
                logger.info("Student %s registered", student.id)
                return self._student_to_response(student)

        @self.app.get("/students", response_model=List[StudentResponse])
        async def list_students(skip: int = 0, limit: int = 100):
            """List all students."""
            with self._lock:
                students = sorted(platform.students.list_all(), key=lambda s: s.id)
                return [self._student_to_response(s) for s in students[skip:skip + limit]]

        @self.app.get("/students/{student_id}", response_model=StudentResponse)
        async def get_student(student_id: str):
            """Get a student by ID."""
            with self._lock:
                return self._student_to_response(self._require_student(student_id))

        @self.app.post("/students/{student_id}/deactivate", response_model=StudentResponse)
        async def deactivate_student(student_id: str):
            with self._lock:
                student = self._require_student(student_id)
                platform.students.deactivate(student_id)
                return self._student_to_response(student)

        @self.app.get("/students/{student_id}/transcript", response_model=TranscriptResponse)
        async def get_transcript(student_id: str):
            """Transcript with embedded GPA."""
            with self._lock:
                student = self._require_student(student_id)
                return TranscriptResponse(
                    student_id=student.id,
                    gpa=platform.transcripts.gpa(student),
                    enrollments=[self._enrollment_to_response(e) for e in student.enrollments],
                    text=platform.transcripts.transcript(student),
                )

        # Instructor endpoints
        @self.app.post("/instructors", response_model=InstructorResponse, status_code=status.HTTP_201_CREATED)
        async def create_instructor(data: InstructorCreate):
            with self._lock:
                instructor = platform.courses.add_instructor(data.id, data.full_name, data.email, data.department)
                return self._instructor_to_response(instructor)

        @self.app.get("/instructors", response_model=List[InstructorResponse])
        async def list_instructors():
            with self._lock:
                instructors = sorted(platform.courses.list_instructors(), key=lambda i: i.id)
                return [self._instructor_to_response(i) for i in instructors]

        # Course endpoints
        @self.app.post("/courses", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
        async def create_course(course_data: CourseCreate):
            """Create (or replace) a course."""
            with self._lock:
                instructor = None
                if course_data.instructor_id:
                    instructor = platform.courses.find_instructor(course_data.instructor_id)
                    if instructor is None:
                        raise HTTPException(status_code=404, detail="Instructor not found")
                try:
                    course = CourseBuilder(
                        code=course_data.code,
                        title=course_data.title,
                        credits=course_data.credits,
                        instructor=instructor,
                        semester=Semester.parse(course_data.semester),
                        department=course_data.department,
                    ).build()
                except ValidationError as e:
                    raise HTTPException(status_code=400, detail=str(e))
                platform.courses.add_course(course)
                return self._course_to_response(course)

        @self.app.get("/courses", response_model=List[CourseResponse])
        async def list_courses(department: Optional[str] = None, semester: Optional[str] = None,
                               instructor_id: Optional[str] = None):
            """List courses, optionally filtered."""
            with self._lock:
                try:
                    term = Semester.parse(semester) if semester else None
                except ValidationError as e:
                    raise HTTPException(status_code=400, detail=str(e))
                courses = platform.courses.search(department=department, semester=term,
                                                  instructor_id=instructor_id)
                return [self._course_to_response(c) for c in sorted(courses, key=lambda c: c.code)]

        @self.app.get("/courses/{code}", response_model=CourseResponse)
        async def get_course(code: str):
            with self._lock:
                course = platform.courses.find_by_code(code)
                if course is None:
                    raise HTTPException(status_code=404, detail="Course not found")
                return self._course_to_response(course)

        # Enrollment endpoints
        @self.app.post("/enrollments", response_model=EnrollmentResponse, status_code=status.HTTP_201_CREATED)
        async def enroll_student(enrollment_data: EnrollmentRequest):
            """Enroll a student in a course."""
            with self._lock:
                try:
                    enrollment = platform.enrollments.enroll(
                        enrollment_data.student_id, enrollment_data.course_code
                    )
                except NotFoundError as e:
                    raise HTTPException(status_code=404, detail=str(e))
                return self._enrollment_to_response(enrollment)

        @self.app.delete("/enrollments/{student_id}/{course_code}", status_code=status.HTTP_204_NO_CONTENT)
        async def unenroll_student(student_id: str, course_code: str):
            with self._lock:
                platform.enrollments.unenroll(student_id, course_code)
                return Response(status_code=status.HTTP_204_NO_CONTENT)

        @self.app.put("/enrollments/{student_id}/{course_code}/grade", response_model=EnrollmentResponse)
        async def record_grade(student_id: str, course_code: str, grade_data: GradeRequest):
            """Record a grade on an existing enrollment."""
            with self._lock:
                try:
                    grade = Grade.parse(grade_data.grade)
                except InvalidGradeError as e:
                    raise HTTPException(status_code=400, detail=str(e))
                enrollment = platform.enrollments.get_enrollment(student_id, course_code)
                if enrollment is None:
                    raise HTTPException(status_code=404, detail="Enrollment not found")
                platform.enrollments.record_grade(student_id, course_code, grade)
                return self._enrollment_to_response(enrollment)

        # Reports
        @self.app.get("/reports/top-students", response_model=List[RankingEntry])
        async def top_students(limit: int = 5):
            with self._lock:
                return [RankingEntry(student_id=s.id, full_name=s.full_name, gpa=gpa)
                        for s, gpa in platform.transcripts.top_students(limit)]

        @self.app.get("/reports/grade-distribution", response_model=Dict[str, int])
        async def grade_distribution():
            with self._lock:
                return platform.transcripts.gpa_distribution()

    def _require_student(self, student_id: str) -> Student:
        student = self._platform.students.find_by_id(student_id)
        if student is None:
            raise HTTPException(status_code=404, detail="Student not found")
        return student

    def _student_to_response(self, student: Student) -> StudentResponse:
        return StudentResponse(
            id=student.id,
            reg_no=student.reg_no,
            full_name=student.full_name,
            email=student.email,
            status=student.status.value,
            created_at=student.created_at,
            enrollments=sorted(e.course.code for e in student.enrollments),
        )

    def _instructor_to_response(self, instructor: Instructor) -> InstructorResponse:
        return InstructorResponse(
            id=instructor.id,
            full_name=instructor.full_name,
            email=instructor.email,
            department=instructor.department,
            courses=sorted(c.code for c in self._platform.courses.courses_taught_by(instructor.id)),
        )

    def _course_to_response(self, course: Course) -> CourseResponse:
        return CourseResponse(
            code=course.code,
            title=course.title,
            credits=course.credits,
            instructor_id=course.instructor.id if course.instructor else None,
            semester=course.semester.name,
            department=course.department,
            active=course.active,
        )

    def _enrollment_to_response(self, enrollment: Enrollment) -> EnrollmentResponse:
        return EnrollmentResponse(
            student_id=enrollment.student.id,
            course_code=enrollment.course.code,
            course_title=enrollment.course.title,
            enrolled_on=enrollment.enrolled_on,
            grade=enrollment.grade.value if enrollment.grade else None,
        )
