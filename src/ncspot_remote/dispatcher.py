"""
Command dispatch: socket delivery when ncspot is up, media-key fallback otherwise.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from ncspot_remote import automation, process
from ncspot_remote.commands import Command
from ncspot_remote.core.config import Config
from ncspot_remote.ipc import client


def is_player_reachable(config: Config, socket_path: Path) -> bool:
    """Check that the player process is alive and its socket exists.

    The socket is only checked once the process is known to be running.
    """
    if not process.is_process_running(config.player.process_name):
        logger.info(f"{config.player.process_name} is not running")
        return False

    if not client.is_socket(socket_path):
        logger.info(f"No socket at {socket_path}")
        return False

    return True


def dispatch(command: Command, config: Optional[Config] = None) -> int:
    """
    Deliver a command to ncspot, or run its fallback.

    Exactly one of the two happens. Neither is retried, and a failed socket
    write does not fall through to the fallback.

    Args:
        command: Command to send
        config: Loaded configuration (defaults when None)

    Returns:
        Exit status: 0 on socket delivery, 1 on socket failure, otherwise
        the fallback's own status
    """
    config = config or Config()
    socket_path = client.get_socket_path(config)

    if is_player_reachable(config, socket_path):
        try:
            client.send_command(socket_path, command.token)
        except OSError as e:
            logger.error(f"Failed to send {command.token!r} to {socket_path}: {e}")
            return 1
        return 0

    if not config.fallback.enabled:
        logger.info(f"Fallback disabled, dropping {command.name!r}")
        return 0

    logger.info(f"Falling back to media key for {command.name!r}")
    return automation.run_fallback(command.fallback)
