"""
Process configuration for the CCRM platform.

Values resolve in three layers: built-in defaults, an optional JSON
configuration file, then ``CCRM_*`` environment variables.
"""

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .core.exceptions import ConfigurationError


def _default_data_folder() -> Path:
    return Path.home() / "ccrm-data"


ENV_OVERRIDES = {
    'CCRM_DATA_DIR': 'data_folder',
    'CCRM_LOG_LEVEL': 'log_level',
    'CCRM_API_HOST': 'api_host',
    'CCRM_API_PORT': 'api_port',
}


@dataclass
class AppConfig:
    """Runtime settings shared by the console, API and file utilities."""
    data_folder: Path = field(default_factory=_default_data_folder)
    backup_folder_format: str = "%Y%m%d-%H%M%S"
    log_level: str = "INFO"
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    def __post_init__(self):
        self.data_folder = Path(self.data_folder).expanduser()
        self.log_level = str(self.log_level).upper()
        try:
            self.api_port = int(self.api_port)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Invalid API port: {self.api_port!r}", error_code="INVALID_PORT")
        if not 0 < self.api_port < 65536:
            raise ConfigurationError(f"API port out of range: {self.api_port}", error_code="INVALID_PORT")

    @property
    def export_folder(self) -> Path:
        return self.data_folder / "exports"

    @property
    def backup_root(self) -> Path:
        return self.data_folder / "backups"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'data_folder': str(self.data_folder),
            'backup_folder_format': self.backup_folder_format,
            'log_level': self.log_level,
            'api_host': self.api_host,
            'api_port': self.api_port,
        }


def load_config(path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Build an AppConfig from defaults, a JSON file and the environment."""
    values: Dict[str, Any] = {}
    known = {f.name for f in fields(AppConfig)}

    if path:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}", error_code="CONFIG_UNREADABLE")
        if not isinstance(raw, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        values.update({key: value for key, value in raw.items() if key in known})

    env = os.environ if environ is None else environ
    for variable, name in ENV_OVERRIDES.items():
        if env.get(variable):
            values[name] = env[variable]

    return AppConfig(**values)
