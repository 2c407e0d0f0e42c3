"""Configuration settings for the punch clock."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


DATA_DIR_ENV = "PUNCH_DATA_DIR"
LOG_LEVEL_ENV = "PUNCH_LOG_LEVEL"


@dataclass
class Config:
    """Application configuration settings.

    Centralized configuration to avoid hardcoded paths throughout the codebase.
    """
    # File system
    data_dir: Path = field(default_factory=lambda: Path("~/.punch").expanduser())
    data_file_name: str = "data.json"
    log_dir: Optional[Path] = None

    # Logging
    log_level: str = "INFO"
    log_max_bytes: int = 5 * 1024 * 1024
    log_backup_count: int = 3

    def __post_init__(self):
        self.data_dir = Path(self.data_dir).expanduser()
        if self.log_dir is None:
            self.log_dir = self.data_dir / "logs"

    @property
    def data_file(self) -> Path:
        """Path of the JSON file holding the ledger."""
        return self.data_dir / self.data_file_name

    @classmethod
    def load(cls, data_dir: Optional[str] = None) -> 'Config':
        """
        Load configuration.

        An explicit data_dir wins over the PUNCH_DATA_DIR environment variable,
        which wins over the default ~/.punch. PUNCH_LOG_LEVEL sets the log level.

        Args:
            data_dir: Optional override for the data directory

        Returns:
            Config instance with default or loaded values
        """
        kwargs = {}
        data_dir = data_dir or os.environ.get(DATA_DIR_ENV)
        if data_dir:
            kwargs["data_dir"] = Path(data_dir)
        log_level = os.environ.get(LOG_LEVEL_ENV)
        if log_level:
            kwargs["log_level"] = log_level.upper()
        return cls(**kwargs)


# Global config instance
config = Config.load()
