"""
Main entry point for the CCRM platform.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import AppConfig, load_config
from .core.entities import CourseBuilder
from .core.enums import Grade, Semester
from .core.exceptions import CCRMException
from .persistence import BackupService, DataStore, ImportExportService
from .services import CourseService, EnrollmentService, StudentService, TranscriptService

logger = logging.getLogger(__name__)


class CCRMPlatform:
    """Wires one shared DataStore into every service."""

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config or AppConfig()
        self._data_store = DataStore()
        self._student_service = StudentService(self._data_store)
        self._course_service = CourseService(self._data_store)
        self._enrollment_service = EnrollmentService(self._data_store)
        self._transcript_service = TranscriptService(self._data_store)
        self._import_export = ImportExportService(self._data_store)
        self._backup_service = BackupService(self._config)
        logger.debug("CCRM platform initialized with data folder %s", self._config.data_folder)

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def data_store(self) -> DataStore:
        return self._data_store

    @property
    def students(self) -> StudentService:
        return self._student_service

    @property
    def courses(self) -> CourseService:
        return self._course_service

    @property
    def enrollments(self) -> EnrollmentService:
        return self._enrollment_service

    @property
    def transcripts(self) -> TranscriptService:
        return self._transcript_service

    @property
    def import_export(self) -> ImportExportService:
        return self._import_export

    @property
    def backups(self) -> BackupService:
        return self._backup_service

    def seed_sample_data(self) -> None:
        """One instructor, two courses and one student."""
        instructor = self._course_service.add_instructor("ins-1", "Dr. Alice", "alice@uni.edu", "CSE")
        self._course_service.add_course(CourseBuilder(
            code="CSE101",
            title="Intro to CS",
            credits=4,
            instructor=instructor,
            semester=Semester.FALL,
            department="CSE",
        ).build())
        self._course_service.add_course(CourseBuilder(
            code="MAT101",
            title="Calculus",
            credits=3,
            semester=Semester.FALL,
            department="Math",
        ).build())
        self._student_service.add_student("stu-1", "R1001", "Bob Student", "bob@uni.edu")
        logger.info("Sample data seeded: %s", self._data_store.get_statistics())

    def run_demo(self) -> None:
        """Seed, enroll, grade and print the resulting transcript."""
        print("Running CCRM demonstration...")
        self.seed_sample_data()

        self._enrollment_service.enroll("stu-1", "CSE101")
        self._enrollment_service.enroll("stu-1", "MAT101")
        self._enrollment_service.record_grade("stu-1", "CSE101", Grade.A)

        student = self._student_service.find_by_id("stu-1")
        print("\n=== Transcript ===")
        print(self._transcript_service.transcript(student))
        print(f"\nRegistry statistics: {self._data_store.get_statistics()}")
        print("\n✓ Demo completed")

    def start_rest_server(self, host: Optional[str] = None, port: Optional[int] = None) -> None:
        """Serve the REST API with uvicorn until interrupted."""
        import uvicorn
        from .api.rest_api import CCRMRestAPI

        api = CCRMRestAPI(self)
        host = host or self._config.api_host
        port = port or self._config.api_port
        print(f"✓ REST server starting on http://{host}:{port} (docs at /docs)")
        uvicorn.run(api.app, host=host, port=port, log_level=self._config.log_level.lower())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Campus Course & Records Manager")
    parser.add_argument("--config", type=str, help="Configuration file path (JSON)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--demo", action="store_true", help="Run demo mode")
    mode.add_argument("--serve", action="store_true", help="Serve the REST API")
    parser.add_argument("--no-seed", action="store_true", help="Start with empty registries")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except CCRMException as e:
        print(f"Configuration error: {e}")
        return 2

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.debug("Effective configuration: %s", config.to_dict())
    platform = CCRMPlatform(config)
    print(f"CCRM starting... data folder: {config.data_folder}")

    try:
        if args.demo:
            platform.run_demo()
        elif args.serve:
            if not args.no_seed:
                platform.seed_sample_data()
            platform.start_rest_server()
        else:
            from .cli import ConsoleApp
            if not args.no_seed:
                platform.seed_sample_data()
            ConsoleApp(platform).run()
    except KeyboardInterrupt:
        print("\nShutting down...")

    return 0


if __name__ == "__main__":
    sys.exit(main())
