"""
Configuration constants for the content filesystem.

This module centralizes all configurable parameters to make the library
easy to tune and adapt to different hosts.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field

from .paths import normalize_path, untrailingslashit


@dataclass
class ContentConfig:
    """Content directory to content URL mapping."""
    content_dir: str = field(
        default_factory=lambda: os.environ.get("CONTENT_DIR", "/var/www/html/wp-content")
    )
    content_url: str = field(
        default_factory=lambda: os.environ.get("CONTENT_URL", "http://localhost/wp-content")
    )

    def __post_init__(self):
        # Both prefixes are stored without a trailing separator
        self.content_dir = untrailingslashit(normalize_path(self.content_dir))
        self.content_url = untrailingslashit(self.content_url)


@dataclass
class FilesystemConfig:
    """Filesystem provider configuration."""
    # Provider kind, see providers.registry
    method: str = field(default_factory=lambda: os.environ.get("FS_METHOD", "direct"))

    # Default permission bits
    dir_mode: int = 0o755
    file_mode: int = 0o644


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "content_filesystem.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    content: ContentConfig = field(default_factory=ContentConfig)
    filesystem: FilesystemConfig = field(default_factory=FilesystemConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
