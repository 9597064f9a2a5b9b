"""
Media-key fallback when ncspot cannot be reached.

macOS goes through osascript, either a System Events key code or a named
Shortcuts shortcut. Other platforms use playerctl.
"""

import subprocess
import sys
from typing import NamedTuple, Optional

from loguru import logger

# Shell convention for "command not found"
EXIT_NOT_FOUND = 127


class FallbackAction(NamedTuple):
    """Platform automation to run instead of the socket write.

    On macOS a key_code takes precedence over a shortcut.
    """

    key_code: Optional[int] = None
    shortcut: Optional[str] = None
    playerctl: Optional[str] = None


def _applescript(action: FallbackAction) -> Optional[str]:
    if action.key_code is not None:
        return f'tell application "System Events" to key code {action.key_code}'
    if action.shortcut:
        return f'tell application "Shortcuts Events" to run shortcut "{action.shortcut}"'
    return None


def build_fallback_argv(
    action: FallbackAction, platform: str = sys.platform
) -> Optional[list[str]]:
    """Build the automation command line for this platform.

    Args:
        action: Fallback action to perform
        platform: sys.platform value

    Returns:
        argv list, or None if the action has nothing for this platform
    """
    if platform == "darwin":
        script = _applescript(action)
        if script is None:
            return None
        return ["osascript", "-e", script]

    if action.playerctl:
        return ["playerctl", action.playerctl]
    return None


def run_fallback(action: FallbackAction, platform: str = sys.platform) -> int:
    """Run the fallback automation once and return its exit status.

    The result is not checked; the status is passed back to the caller as-is.
    """
    argv = build_fallback_argv(action, platform)
    if argv is None:
        logger.error(f"No fallback action available on {platform}")
        return 1

    logger.debug(f"Running fallback: {argv}")
    try:
        result = subprocess.run(argv, check=False)
    except FileNotFoundError:
        logger.error(f"Fallback tool not found: {argv[0]}")
        return EXIT_NOT_FOUND
    except OSError as e:
        logger.error(f"Failed to run fallback {argv[0]}: {e}")
        return 1

    return result.returncode
