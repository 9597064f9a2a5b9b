"""IPC client for sending commands to a running ncspot instance."""

import os
import socket
import stat
from pathlib import Path
from typing import Optional

from loguru import logger

from ncspot_remote.core.config import Config

SOCKET_DIR_TEMPLATE = '/tmp/ncspot-{uid}'
SOCKET_NAME = 'ncspot.sock'


def get_socket_path(config: Optional[Config] = None) -> Path:
    """
    Get the path to the ncspot control socket.

    Args:
        config: Loaded configuration; its socket_path wins when set

    Returns:
        Path to Unix socket
    """
    if config is not None and config.player.socket_path:
        return Path(config.player.socket_path)
    return Path(SOCKET_DIR_TEMPLATE.format(uid=os.getuid())) / SOCKET_NAME


def is_socket(path: Path) -> bool:
    """Return True if path exists and is a Unix socket."""
    try:
        return stat.S_ISSOCK(os.stat(path).st_mode)
    except OSError:
        return False


def send_command(socket_path: Path, token: str) -> None:
    """
    Write a single command token to the ncspot socket.

    The token is sent followed by a newline. No response is read.

    Args:
        socket_path: Path to the ncspot Unix socket
        token: Command token (e.g., 'previous', 'playpause')

    Raises:
        OSError: If the socket cannot be connected to or written
    """
    message = token + '\n'
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
        sock.connect(str(socket_path))
        sock.sendall(message.encode('utf-8'))
    logger.debug(f"Sent {token!r} to {socket_path}")
