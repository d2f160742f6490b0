from __future__ import annotations

"""
Logging settings accepted by ``configure_logging``.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_CONSOLE_FMT: str = "%(levelname)s | %(name)s | %(message)s"
DEFAULT_FILE_FMT: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_DATEFMT: str = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Where removal diagnostics go and how they are formatted.

    Attributes:
        level: Minimum severity name. Unknown names fall back to INFO.
        console: Emit records on stderr.
        log_file: Optional path of a rotating log file; its parent
            directory is created on demand.
        max_bytes: Size of the log file before it is rotated.
        backup_count: Rotated files kept next to the active one.
        console_fmt: Format of stderr records.
        file_fmt: Format of file records.
        datefmt: Timestamp format of file records.

    Raises:
        ValueError: If ``max_bytes`` or ``backup_count`` is negative.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    console_fmt: str = DEFAULT_CONSOLE_FMT
    file_fmt: str = DEFAULT_FILE_FMT
    datefmt: str = DEFAULT_DATEFMT

    def __post_init__(self) -> None:
        if self.max_bytes < 0:
            raise ValueError(f"max_bytes must be >= 0, got {self.max_bytes}")
        if self.backup_count < 0:
            raise ValueError(f"backup_count must be >= 0, got {self.backup_count}")
