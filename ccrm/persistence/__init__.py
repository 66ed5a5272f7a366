"""
Persistence module: in-memory registries plus flat-file import/export and backups.
"""

from .registry import Registry, DataStore
from .import_export import ImportExportService
from .backup import BackupService, directory_size

__all__ = [
    "Registry",
    "DataStore",
    "ImportExportService",
    "BackupService",
    "directory_size",
]
