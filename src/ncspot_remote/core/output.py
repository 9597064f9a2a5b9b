"""
Output setup using Loguru.
Console output goes to stderr; an optional rotating file sink mirrors it.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"
CONSOLE_FORMAT = "<level>{level}</level>: {message}"


def setup_loguru(level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    """
    Configure loguru for console (stderr) and optional file logging.

    Args:
        level: Minimum level for both sinks (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file, or None for console only
    """
    # Remove default handler
    logger.remove()

    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                log_file,
                rotation="10 MB",
                retention=5,  # Keep 5 backup files
                level=level,
                format=LOG_FORMAT,
                enqueue=False,
            )
        except OSError as e:
            logger.warning(f"Cannot write log file {log_file}: {e}; logging to console only")
            log_file = None

    logger.debug(f"Loguru initialized (level={level}, file={log_file})")
