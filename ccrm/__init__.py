"""
CCRM: Campus Course & Records Manager

An in-process record manager for a single institution covering students,
courses, instructors, enrollments and grades, with transcript and GPA
reporting, flat-file import/export and backups.
"""

__version__ = "1.0.0"
__author__ = "CCRM Development Team"
__description__ = "Campus Course & Records Manager"
