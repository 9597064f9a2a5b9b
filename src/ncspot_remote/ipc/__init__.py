"""IPC (Inter-Process Communication) with a running ncspot instance.

ncspot listens on a per-user Unix socket for newline-terminated commands.
"""

from .client import get_socket_path, is_socket, send_command

__all__ = ['get_socket_path', 'is_socket', 'send_command']
