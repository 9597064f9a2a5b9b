"""Process liveness checks."""

import subprocess

from loguru import logger


def is_process_running(name: str) -> bool:
    """Check if a process with exactly this name is running.

    Uses `pgrep -x`, so 'ncspot' does not match 'ncspot-remote'.
    A missing pgrep counts as not running.
    """
    try:
        result = subprocess.run(
            ["pgrep", "-x", name],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (subprocess.SubprocessError, OSError) as e:
        logger.warning(f"Could not check for process {name!r}: {e}")
        return False

    return result.returncode == 0
