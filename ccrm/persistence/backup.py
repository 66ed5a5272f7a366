"""
Timestamped backups of the export folder and directory size reporting.
"""

import logging
import os
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from ..config import AppConfig
from ..core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


def directory_size(path: Union[str, Path]) -> int:
    """Total size in bytes of all regular files below path."""
    path = Path(path)
    if path.is_file():
        return path.stat().st_size
    total = 0
    try:
        entries = list(os.scandir(path))
    except OSError as e:
        logger.debug("Cannot list %s: %s", path, e)
        return 0
    for entry in entries:
        try:
            if entry.is_dir(follow_symlinks=False):
                total += directory_size(entry.path)
            elif entry.is_file(follow_symlinks=False):
                total += entry.stat(follow_symlinks=False).st_size
        except OSError as e:
            logger.debug("Skipping unreadable entry %s: %s", entry.path, e)
    return total


class BackupService:
    """Copies a folder into <data_folder>/backups/<timestamp>."""
    
    def __init__(self, config: AppConfig):
        self._config = config
    
    def backup(self, source_folder: Union[str, Path], now: Optional[datetime] = None) -> Path:
        """Copy source_folder into a new timestamped backup folder and return it."""
        source = Path(source_folder)
        if not source.is_dir():
            raise PersistenceError(f"Backup source does not exist: {source}", error_code="BACKUP_SOURCE_MISSING")
        
        stamp = (now or datetime.now()).strftime(self._config.backup_folder_format)
        target = self._config.backup_root / stamp
        try:
            shutil.copytree(source, target)
        except (OSError, shutil.Error) as e:
            raise PersistenceError(f"Backup to {target} failed: {e}", error_code="BACKUP_FAILED")
        
        logger.info("Backed up %s to %s (%d bytes)", source, target, directory_size(target))
        return target
    
    def directory_size(self, path: Union[str, Path]) -> int:
        return directory_size(path)
