from __future__ import annotations

"""
Logging settings for a docsee run.

Only verbosity, destinations and rotation size vary between runs. The
record formats are fixed: the console line is what a user reads next to
the summary, the file line carries the thread name so records from
parallel body fetches can be told apart.
"""

import logging
from dataclasses import dataclass
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(threadName)s | %(name)s | %(message)s"
FILE_DATEFMT = "%Y-%m-%dT%H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Attributes:
        debug: Capture DEBUG records (per-directory listings, config dump).
        console: Write records to stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Rotation threshold for the log file.
        backup_count: Rotated files kept next to the active one.
    """
    debug: bool = False
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 512 * 1024
    backup_count: int = 3

    @property
    def level(self) -> int:
        return logging.DEBUG if self.debug else logging.INFO
